"""
Decodes WMO TEMP upper-air reports (TTAA mandatory levels, TTBB significant
levels) into a single sounding profile.

Decoding never raises for malformed content. Structural problems are
returned as human-readable strings next to the best-effort result, and
unreadable groups simply leave the matching fields as None.

.. changelog::
    .. versionadded:: 1.0
        Initial release of the module with core functionalities.
"""
import logging
import re
from dataclasses import replace
from typing import List, Optional, Tuple

from radiosonde_parser.codecs import (
    decode_indicator_pressure,
    decode_pressure_height,
    decode_temp_dewpoint,
    decode_vertical_shear,
    decode_wind,
)
from radiosonde_parser.models import (
    DecodedLevel,
    DecodedProfile,
    MaxWind,
    SoundingDecodeResult,
    Tropopause,
    TtaaReport,
    TtbbReport,
    dewpoint_from,
)
from radiosonde_parser.tokenizer import GroupSequence
__version__ = '1.0'

logger = logging.getLogger(__name__)

TTAA_IDENTIFIER = "TTAA"
TTBB_IDENTIFIER = "TTBB"

TROPOPAUSE_PREFIX = "88"
MAX_WIND_PREFIX = "77"
SUPPLEMENTAL_PREFIX = "31"
VERTICAL_SHEAR_PREFIX = "4"
NOT_OBSERVED = ("88999", "77999")

SIGNIFICANT_WIND_SEPARATOR = "21212"
SUPPLEMENTAL_DATA = "31313"
CLOUD_DATA = "41414"
REGIONAL_GROUPS = "51515"
STOP_GROUPS = (SUPPLEMENTAL_DATA, REGIONAL_GROUPS)
INDICATOR_GROUPS = (SIGNIFICANT_WIND_SEPARATOR, SUPPLEMENTAL_DATA, CLOUD_DATA, REGIONAL_GROUPS)

SURFACE_LEVEL = re.compile(r"00[0-9]{3}")
SIGNIFICANT_LEVEL = re.compile(r"[1-9][1-9][0-9]{3}")

MIN_GROUPS = 4
SURFACE_START = 3
MANDATORY_START = 6


def _report(errors: List[str], message: str):
    logger.warning(message)
    errors.append(message)


def _decode_header(groups: GroupSequence, part: str, errors: List[str]):
    """Decodes ``XXXX YYGGI IIiii``: day (YY - 50), hour and station id.

    :return: A tuple (station, day, hour); day and hour are None when the
        YYGGI group cannot be read.
    :rtype: tuple
    """
    header = groups.get(1) or ""
    station = groups.get(2) or ""
    if len(header) < 4 or not (header[0:4].isascii() and header[0:4].isdigit()):
        _report(errors, f"Invalid {part} header group '{header}'")
        return station, None, None
    day = int(header[0:2]) - 50
    hour = int(header[2:4])
    return station, day, hour


def _decode_surface(groups: GroupSequence, index: int) -> dict:
    """Decodes the ``99PoPoPo ToToTaoDoDo dododofofo`` surface cluster.

    Groups that are missing or unreadable leave their fields unset.
    """
    pressure_group = groups.get(index)
    temp_group = groups.get(index + 1)
    wind_group = groups.get(index + 2)

    surface = {}
    if pressure_group and pressure_group.startswith("99"):
        surface["surface_pressure"] = decode_indicator_pressure(pressure_group)
    if temp_group:
        temperature, depression = decode_temp_dewpoint(temp_group)
        surface["surface_temperature"] = temperature
        surface["surface_dewpoint_depression"] = depression
    if wind_group:
        direction, speed = decode_wind(wind_group)
        surface["surface_wind_direction"] = direction
        surface["surface_wind_speed"] = speed
    return surface


def _decode_level(cluster: Tuple[str, ...]) -> Optional[DecodedLevel]:
    """Decodes a ``PPhhh TTTDD dddff`` mandatory-level cluster."""
    pressure, height = decode_pressure_height(cluster[0])
    if pressure is None:
        return None
    temperature, depression = decode_temp_dewpoint(cluster[1])
    direction, speed = decode_wind(cluster[2])
    return DecodedLevel(
        pressure=pressure,
        height=height,
        temperature=temperature,
        dewpoint_depression=depression,
        wind_direction=direction,
        wind_speed=speed,
    )


def _decode_tropopause(cluster: Tuple[str, ...]) -> Optional[Tropopause]:
    """Decodes a ``88PPP TTTDD dddff`` cluster; any missing field discards it."""
    pressure = decode_indicator_pressure(cluster[0])
    temperature, depression = decode_temp_dewpoint(cluster[1])
    direction, speed = decode_wind(cluster[2])
    dewpoint = dewpoint_from(temperature, depression)
    if None in (pressure, temperature, dewpoint, direction, speed):
        return None
    return Tropopause(
        pressure=pressure,
        temperature=temperature,
        dewpoint=dewpoint,
        wind_direction=direction,
        wind_speed=speed,
    )


def _decode_max_wind(groups: GroupSequence, index: int) -> Tuple[Optional[MaxWind], int]:
    """Decodes ``77PPP dddff`` plus an optional ``4vbvbvava`` shear group.

    :return: A tuple (max_wind, next_index). max_wind is None when the
        cluster is incomplete or unreadable.
    :rtype: tuple
    """
    cluster = groups.take(index, 2)
    if cluster is None:
        return None, len(groups)
    index += 2

    shear_below = shear_above = None
    shear_group = groups.get(index)
    if shear_group and len(shear_group) == 5 and shear_group.startswith(VERTICAL_SHEAR_PREFIX):
        shear_below, shear_above = decode_vertical_shear(shear_group)
        index += 1

    pressure = decode_indicator_pressure(cluster[0])
    direction, speed = decode_wind(cluster[1])
    if None in (pressure, direction, speed):
        return None, index
    max_wind = MaxWind(
        pressure=pressure,
        wind_direction=direction,
        wind_speed=speed,
        shear_below=shear_below,
        shear_above=shear_above,
    )
    return max_wind, index


def decode_ttaa(text: str) -> TtaaReport:
    """Decodes the TTAA (mandatory levels) part of a TEMP report.

    After the header and the surface cluster the groups are read cluster by
    cluster, dispatching on the prefix of the first group:

    * ``88`` tropopause (3 groups, last readable one wins)
    * ``77`` maximum wind (2 groups, plus an optional shear group)
    * ``31`` supplemental data, which ends the scan (as does ``51515``)
    * anything else is a mandatory level (3 groups)

    A cluster cut short by the end of the text is dropped. Groups are read by
    position from the ``TTAA`` identifier, so text that lacks it is misread.

    :param text: Raw TTAA text.
    :type text: str
    :return: The decoded part, with any structural errors.
    :rtype: TtaaReport
    """
    errors = []
    groups = GroupSequence.from_text(text, TTAA_IDENTIFIER)
    if len(groups) < MIN_GROUPS:
        _report(errors, "Invalid TTAA format - insufficient data")
        return TtaaReport(errors=tuple(errors))

    station, day, hour = _decode_header(groups, "TTAA", errors)
    surface = _decode_surface(groups, SURFACE_START)

    mandatory_levels = []
    tropopause = None
    max_wind = None

    index = MANDATORY_START
    while index < len(groups):
        group = groups[index]

        if group in NOT_OBSERVED:
            logger.debug("Group %s: section not observed", group)
            index += 1
        elif group.startswith(TROPOPAUSE_PREFIX):
            cluster = groups.take(index, 3)
            if cluster is None:
                break
            decoded = _decode_tropopause(cluster)
            if decoded is None:
                logger.debug("Discarding incomplete tropopause cluster %s", " ".join(cluster))
            else:
                tropopause = decoded
            index += 3
        elif group.startswith(MAX_WIND_PREFIX):
            if groups.take(index, 2) is None:
                break
            decoded, index = _decode_max_wind(groups, index)
            if decoded is None:
                logger.debug("Discarding incomplete maximum wind cluster at group %s", group)
            else:
                max_wind = decoded
        elif group.startswith(SUPPLEMENTAL_PREFIX) or group == REGIONAL_GROUPS:
            break
        else:
            cluster = groups.take(index, 3)
            if cluster is None:
                break
            level = _decode_level(cluster)
            if level is None:
                logger.debug("Skipping mandatory level cluster %s", " ".join(cluster))
            else:
                mandatory_levels.append(level)
            index += 3

    return TtaaReport(
        station=station,
        day=day,
        hour=hour,
        mandatory_levels=tuple(mandatory_levels),
        tropopause=tropopause,
        max_wind=max_wind,
        errors=tuple(errors),
        **surface
    )


def _is_significant_code(group: str) -> bool:
    return bool(SIGNIFICANT_LEVEL.fullmatch(group)) and group not in INDICATOR_GROUPS


def _merge_wind(levels: List[DecodedLevel], pressure: int, direction, speed):
    """Puts wind on the first level at ``pressure``, or adds a wind-only level."""
    for i, level in enumerate(levels):
        if level.pressure == pressure:
            levels[i] = replace(level, wind_direction=direction, wind_speed=speed)
            return
    levels.append(DecodedLevel(pressure=pressure, wind_direction=direction, wind_speed=speed))


def decode_ttbb(text: str) -> TtbbReport:
    """Decodes the TTBB (significant levels) part of a TEMP report.

    The surface level is the first ``00PPP`` group after the header. It and
    the ``nnPPP TTTDD`` pairs before the ``21212`` separator become
    temperature levels. The ``nnPPP dddff`` pairs after the separator (up to
    ``31313``) add wind to the level with the same pressure, or create a
    wind-only level. Levels come back sorted by descending pressure. As with
    TTAA, the header is read by position from the ``TTBB`` identifier.

    :param text: Raw TTBB text.
    :type text: str
    :return: The decoded part, with any structural errors.
    :rtype: TtbbReport
    """
    errors = []
    groups = GroupSequence.from_text(text, TTBB_IDENTIFIER)
    if len(groups) < MIN_GROUPS:
        _report(errors, "Invalid TTBB format - insufficient data")
        return TtbbReport(errors=tuple(errors))

    station, day, hour = _decode_header(groups, "TTBB", errors)

    surface_index = groups.find(SURFACE_LEVEL, SURFACE_START)
    if surface_index == -1:
        _report(errors, "TTBB surface pressure group (00PPP) not found")
        return TtbbReport(station=station, day=day, hour=hour, errors=tuple(errors))

    levels = []
    surface_pressure = decode_indicator_pressure(groups[surface_index])
    index = surface_index + 1
    surface_temp_group = groups.get(index)
    if surface_temp_group is not None and surface_temp_group not in INDICATOR_GROUPS:
        temperature, depression = decode_temp_dewpoint(surface_temp_group)
        levels.append(DecodedLevel(
            pressure=surface_pressure,
            temperature=temperature,
            dewpoint_depression=depression,
        ))
        index += 1

    separator_index = groups.find(SIGNIFICANT_WIND_SEPARATOR, index)
    section_end = separator_index if separator_index != -1 else len(groups)

    # Section 5: temperature / humidity
    while index + 1 < section_end:
        pressure_code, temp_code = groups[index], groups[index + 1]
        if pressure_code in STOP_GROUPS:
            break
        if _is_significant_code(pressure_code):
            temperature, depression = decode_temp_dewpoint(temp_code)
            levels.append(DecodedLevel(
                pressure=decode_indicator_pressure(pressure_code),
                temperature=temperature,
                dewpoint_depression=depression,
            ))
        else:
            logger.debug("Skipping TTBB pair %s %s", pressure_code, temp_code)
        index += 2

    # Section 6: winds
    if separator_index != -1:
        index = separator_index + 1
        while index + 1 < len(groups):
            pressure_code, wind_code = groups[index], groups[index + 1]
            if pressure_code in STOP_GROUPS:
                break
            if SURFACE_LEVEL.fullmatch(pressure_code) or _is_significant_code(pressure_code):
                direction, speed = decode_wind(wind_code)
                _merge_wind(levels, decode_indicator_pressure(pressure_code), direction, speed)
            else:
                logger.debug("Skipping TTBB wind pair %s %s", pressure_code, wind_code)
            index += 2

    levels.sort(key=lambda level: level.pressure, reverse=True)
    return TtbbReport(
        station=station,
        day=day,
        hour=hour,
        significant_levels=tuple(levels),
        errors=tuple(errors),
    )


def assemble_profile(ttaa: TtaaReport, ttbb: Optional[TtbbReport] = None) -> DecodedProfile:
    """Combines the decoded parts into one profile. No further decoding is done."""
    significant_levels = ttbb.significant_levels if ttbb is not None else ()
    return DecodedProfile(
        station=ttaa.station,
        day=ttaa.day,
        hour=ttaa.hour,
        surface_pressure=ttaa.surface_pressure,
        surface_temperature=ttaa.surface_temperature,
        surface_dewpoint_depression=ttaa.surface_dewpoint_depression,
        surface_wind_direction=ttaa.surface_wind_direction,
        surface_wind_speed=ttaa.surface_wind_speed,
        mandatory_levels=ttaa.mandatory_levels,
        significant_levels=significant_levels,
        tropopause=ttaa.tropopause,
        max_wind=ttaa.max_wind,
    )


def decode_sounding(ttaa_text: str, ttbb_text: Optional[str] = None) -> SoundingDecodeResult:
    """Decodes a TTAA report and an optional TTBB report into one profile.

    The TTAA text is required: when it is empty the result has no profile
    and the single error "TTAA data is required". Otherwise a profile is
    always returned, together with every error collected from both parts.

    :param ttaa_text: Raw TTAA text.
    :type ttaa_text: str
    :param ttbb_text: Raw TTBB text, may be None or blank.
    :type ttbb_text: str, optional
    :return: The profile and the list of decode errors.
    :rtype: SoundingDecodeResult
    """
    if not ttaa_text or not ttaa_text.strip():
        errors = []
        _report(errors, "TTAA data is required")
        return SoundingDecodeResult(profile=None, errors=tuple(errors))

    ttaa = decode_ttaa(ttaa_text)
    ttbb = decode_ttbb(ttbb_text) if ttbb_text and ttbb_text.strip() else None

    errors = list(ttaa.errors)
    if ttbb is not None:
        errors.extend(ttbb.errors)
        if ttbb.station and ttaa.station and ttbb.station != ttaa.station:
            _report(errors, f"TTBB station {ttbb.station} does not match TTAA station {ttaa.station}")

    return SoundingDecodeResult(profile=assemble_profile(ttaa, ttbb), errors=tuple(errors))
