"""
Field codecs for the 5-character groups of WMO TEMP (TTAA/TTBB) reports.

Every decoder here is a pure function. Placeholder groups (``/////``), groups
that are too short and groups with non-digits where digits are required all
decode to ``None`` instead of raising, so the part decoders can keep going.

.. changelog::
    .. versionadded:: 1.0
        Initial release of the module with core functionalities.
"""
from typing import Optional, Tuple
__version__ = '1.0'

# PP of a PPhhh group -> standard isobaric surface (hPa)
PRESSURE_LEVELS = {
    0: 1000,
    92: 925,
    85: 850,
    70: 700,
    50: 500,
    40: 400,
    30: 300,
    25: 250,
    20: 200,
    15: 150,
    10: 100,
}

SURFACE_INDICATOR = 99


def _as_int(text: str, width: int) -> Optional[int]:
    """Reads exactly ``width`` digits, or returns None."""
    if not text or len(text) < width:
        return None
    digits = text[:width]
    if not (digits.isascii() and digits.isdigit()):
        return None
    return int(digits)


def decode_pressure_level(pp: int) -> Optional[int]:
    """Maps the PP indicator of a mandatory level to its pressure in hPa.

    ``99`` marks the surface cluster and is not a mandatory level, so it maps
    to None. Values missing from the standard table are read as tens of hPa.

    :param pp: Two-digit indicator, already converted to an integer.
    :type pp: int
    :return: Pressure in hPa, or None for the surface indicator.
    :rtype: int or None
    """
    if pp == SURFACE_INDICATOR:
        return None
    if pp in PRESSURE_LEVELS:
        return PRESSURE_LEVELS[pp]
    return pp * 10


def scale_height(hhh: int, pressure: int) -> int:
    """Restores the truncated geopotential height of a standard surface.

    The band boundaries are closed intervals.

    :param hhh: The three height digits as read.
    :type hhh: int
    :param pressure: Pressure of the level in hPa.
    :type pressure: int
    :return: Geopotential height in metres.
    :rtype: int
    """
    if pressure > 850:
        return hhh
    if pressure == 850:
        return 1000 + hhh
    if pressure == 700:
        return 2000 + hhh
    if 300 <= pressure <= 500:
        return hhh * 10
    if 100 <= pressure <= 250:
        return 10000 + hhh * 10
    return hhh


def decode_pressure_height(group: str) -> Tuple[Optional[int], Optional[int]]:
    """Decodes the PPhhh group of a mandatory level.

    :param group: The 5-character pressure/height group.
    :type group: str
    :return: A tuple (pressure_hpa, height_m). The height is None when the
        hhh digits are missing; both are None when PP cannot be read or is
        the surface indicator.
    :rtype: tuple
    """
    if not group or len(group) < 5:
        return None, None
    pp = _as_int(group[0:2], 2)
    if pp is None:
        return None, None
    pressure = decode_pressure_level(pp)
    if pressure is None:
        return None, None

    hhh = _as_int(group[2:5], 3)
    height = scale_height(hhh, pressure) if hhh is not None else None
    return pressure, height


def decode_temperature(ttt: str) -> Optional[float]:
    """Decodes a TTT temperature given in tenths of a degree Celsius.

    The parity of the tenths digit carries the sign: even is positive, odd is
    negative (``078`` is 7.8, ``079`` is -7.9).

    :param ttt: The three temperature digits.
    :type ttt: str
    :return: Temperature in degrees Celsius, or None.
    :rtype: float or None
    """
    value = _as_int(ttt, 3)
    if value is None:
        return None
    negative = value % 10 % 2 == 1
    temperature = value / 10.0
    return -temperature if negative else temperature


def decode_dewpoint_depression(dd: str) -> Optional[float]:
    """Decodes the DD dew-point depression code.

    Codes up to 50 are tenths of a degree (0.0 to 5.0), codes above 50 are
    whole degrees offset by 50 (56 is 6, 99 is 49).

    :param dd: The two depression digits.
    :type dd: str
    :return: Dew-point depression in degrees Celsius, or None.
    :rtype: float or None
    """
    value = _as_int(dd, 2)
    if value is None:
        return None
    if value > 50:
        return float(value - 50)
    return value / 10.0


def decode_temp_dewpoint(group: str) -> Tuple[Optional[float], Optional[float]]:
    """Decodes the TTTDD group for temperature and dew-point depression.

    Each half is decoded on its own, so ``078//`` still yields a temperature.

    :param group: The 5-character temperature/dew-point group.
    :type group: str
    :return: A tuple (temperature_c, dew_point_depression_c).
    :rtype: tuple
    """
    if not group or len(group) < 5:
        return None, None
    return decode_temperature(group[0:3]), decode_dewpoint_depression(group[3:5])


def decode_wind(group: str) -> Tuple[Optional[int], Optional[int]]:
    """Decodes the dddff group for wind direction and speed.

    The direction is read in degrees. A units digit of 1 or 6 flags a speed of
    100 knots or more: the digit is removed from the direction and 100 is
    added to the speed (``27115`` is 270 degrees at 115 kt).

    :param group: The 5-character wind group.
    :type group: str
    :return: A tuple (wind_direction_deg, wind_speed_kt), both None when the
        group cannot be read.
    :rtype: tuple
    """
    if not group or len(group) < 5:
        return None, None
    ddd = _as_int(group[0:3], 3)
    ff = _as_int(group[3:5], 2)
    if ddd is None or ff is None:
        return None, None

    overflow = ddd % 10
    if overflow in (1, 6):
        return ddd - overflow, ff + 100
    return ddd, ff


def decode_indicator_pressure(group: str) -> Optional[int]:
    """Reads the PPP pressure that follows a two-digit indicator (88PPP, 77PPP, 00PPP).

    :param group: The 5-character indicator group.
    :type group: str
    :return: Pressure in hPa as read, or None.
    :rtype: int or None
    """
    if not group or len(group) < 5:
        return None
    return _as_int(group[2:5], 3)


def decode_vertical_shear(group: str) -> Tuple[Optional[int], Optional[int]]:
    """Decodes the 4vbvbvava group that may follow a maximum wind.

    :param group: The 5-character shear group, starting with ``4``.
    :type group: str
    :return: A tuple (shear_below_kt, shear_above_kt); each half is None when
        it cannot be read.
    :rtype: tuple
    """
    if not group or len(group) < 5:
        return None, None
    return _as_int(group[1:3], 2), _as_int(group[3:5], 2)
