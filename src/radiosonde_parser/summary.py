"""
Derived values computed from a decoded sounding profile.

.. changelog::
    .. versionadded:: 1.0
        Initial release of the module with core functionalities.
"""
from typing import Iterable, List, Optional, Tuple

from radiosonde_parser.models import DecodedLevel, DecodedProfile
__version__ = '1.0'

COMPASS_POINTS = ("N", "NE", "E", "SE", "S", "SW", "W", "NW")


def cardinal_direction(degrees: Optional[float]) -> Optional[str]:
    """Eight-point compass name for a wind direction (45 degree sectors centred on each point)."""
    if degrees is None:
        return None
    sector = int(((degrees % 360) + 22.5) // 45) % 8
    return COMPASS_POINTS[sector]


def pressure_altitude(pressure: Optional[float]) -> Optional[int]:
    """Approximate altitude in metres of a pressure level in the standard atmosphere.

    :param pressure: Pressure in hPa.
    :type pressure: float
    :return: Altitude in metres, or None when pressure is missing or not positive.
    :rtype: int or None
    """
    if pressure is None or pressure <= 0:
        return None
    return round(44330 * (1 - (pressure / 1013.25) ** 0.1903))


def split_mandatory_levels(levels: Iterable[DecodedLevel], min_pressure: int = 100) -> Tuple[List[DecodedLevel], List[DecodedLevel]]:
    """Partitions levels into those at or above ``min_pressure`` hPa and the rest."""
    shown, filtered = [], []
    for level in levels:
        (shown if level.pressure >= min_pressure else filtered).append(level)
    return shown, filtered


def summarize_significant_levels(profile: DecodedProfile) -> dict:
    """Counts and wind statistics over the significant levels of a profile.

    :param profile: A decoded profile.
    :type profile: DecodedProfile
    :return: ``temperature_levels``, ``dewpoint_levels``, ``wind_levels``,
        ``max_wind_speed`` and ``mean_wind_speed`` (None without wind data),
        ``surface_included``.
    :rtype: dict
    """
    levels = profile.significant_levels
    speeds = [level.wind_speed for level in levels if level.wind_speed is not None]
    return {
        "temperature_levels": sum(1 for level in levels if level.temperature is not None),
        "dewpoint_levels": sum(1 for level in levels if level.dewpoint is not None),
        "wind_levels": len(speeds),
        "max_wind_speed": max(speeds) if speeds else None,
        "mean_wind_speed": round(sum(speeds) / len(speeds)) if speeds else None,
        "surface_included": profile.surface_pressure is not None
        and any(level.pressure == profile.surface_pressure for level in levels),
    }
