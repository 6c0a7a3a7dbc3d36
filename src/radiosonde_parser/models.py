"""
Data structures produced by the TEMP decoders.

.. changelog::
    .. versionadded:: 1.0
        Initial release of the module with core functionalities.
"""
from dataclasses import asdict, dataclass, field
from typing import Optional, Tuple
__version__ = '1.0'


def dewpoint_from(temperature: Optional[float], depression: Optional[float]) -> Optional[float]:
    if temperature is None or depression is None:
        return None
    return round(temperature - depression, 1)


@dataclass(frozen=True)
class DecodedLevel:
    """One atmospheric level. ``dewpoint`` is always derived, never passed in."""
    pressure: int  # hPa
    height: Optional[int] = None  # geopotential metres
    temperature: Optional[float] = None  # degC
    dewpoint_depression: Optional[float] = None  # degC
    wind_direction: Optional[int] = None  # degrees
    wind_speed: Optional[int] = None  # knots
    dewpoint: Optional[float] = field(init=False, default=None)

    def __post_init__(self):
        object.__setattr__(self, 'dewpoint', dewpoint_from(self.temperature, self.dewpoint_depression))


@dataclass(frozen=True)
class Tropopause:
    pressure: int
    temperature: float
    dewpoint: float
    wind_direction: int
    wind_speed: int


@dataclass(frozen=True)
class MaxWind:
    pressure: int
    wind_direction: int
    wind_speed: int
    shear_below: Optional[int] = None  # kt, 4vbvbvava group
    shear_above: Optional[int] = None


@dataclass(frozen=True)
class TtaaReport:
    """Partial result of decoding the mandatory-level part."""
    station: str = ''
    day: Optional[int] = None
    hour: Optional[int] = None
    surface_pressure: Optional[int] = None
    surface_temperature: Optional[float] = None
    surface_dewpoint_depression: Optional[float] = None
    surface_wind_direction: Optional[int] = None
    surface_wind_speed: Optional[int] = None
    mandatory_levels: Tuple[DecodedLevel, ...] = ()
    tropopause: Optional[Tropopause] = None
    max_wind: Optional[MaxWind] = None
    errors: Tuple[str, ...] = ()


@dataclass(frozen=True)
class TtbbReport:
    """Partial result of decoding the significant-level part."""
    station: str = ''
    day: Optional[int] = None
    hour: Optional[int] = None
    significant_levels: Tuple[DecodedLevel, ...] = ()
    errors: Tuple[str, ...] = ()


@dataclass(frozen=True)
class DecodedProfile:
    """A complete sounding assembled from the TTAA and TTBB parts."""
    station: str = ''
    day: Optional[int] = None
    hour: Optional[int] = None
    surface_pressure: Optional[int] = None
    surface_temperature: Optional[float] = None
    surface_dewpoint_depression: Optional[float] = None
    surface_wind_direction: Optional[int] = None
    surface_wind_speed: Optional[int] = None
    mandatory_levels: Tuple[DecodedLevel, ...] = ()
    significant_levels: Tuple[DecodedLevel, ...] = ()
    tropopause: Optional[Tropopause] = None
    max_wind: Optional[MaxWind] = None

    def to_dict(self) -> dict:
        """Plain, JSON-serialisable copy of the profile."""
        data = asdict(self)
        data['mandatory_levels'] = list(data['mandatory_levels'])
        data['significant_levels'] = list(data['significant_levels'])
        return data


@dataclass(frozen=True)
class SoundingDecodeResult:
    profile: Optional[DecodedProfile]
    errors: Tuple[str, ...] = ()
