"""
Flattens decoded soundings into polars DataFrames and Parquet files.

.. changelog::
    .. versionadded:: 1.0
        Initial release of the module with core functionalities.
"""
import polars as pl

from radiosonde_parser.models import DecodedProfile
from radiosonde_parser.summary import cardinal_direction, pressure_altitude
__version__ = '1.0'

ROW_SCHEMA = {
    "level_type": pl.Utf8,
    "station": pl.Utf8,
    "day": pl.Int64,
    "hour": pl.Int64,
    "pressure": pl.Int64,
    "height": pl.Int64,
    "temperature": pl.Float64,
    "dewpoint": pl.Float64,
    "dewpoint_depression": pl.Float64,
    "wind_direction": pl.Int64,
    "wind_speed": pl.Int64,
    "wind_compass": pl.Utf8,
    "standard_altitude": pl.Int64,
}


def profile_to_rows(profile: DecodedProfile) -> list:
    """One row per level, tagged with ``level_type`` and the report header.

    Row order: surface, mandatory levels, significant levels, tropopause,
    maximum wind. Fields a level type does not carry are None.
    ``wind_compass`` and ``standard_altitude`` are derived from the wind
    direction and the pressure of each row.
    """
    common_header = {
        "station": profile.station,
        "day": profile.day,
        "hour": profile.hour,
    }

    def row(level_type, **values):
        data = dict.fromkeys(ROW_SCHEMA)
        data.update(common_header)
        data.update(values)
        data["level_type"] = level_type
        data["wind_compass"] = cardinal_direction(data["wind_direction"])
        data["standard_altitude"] = pressure_altitude(data["pressure"])
        return data

    all_parsed_rows = []

    if profile.surface_pressure is not None:
        all_parsed_rows.append(row(
            "surface",
            pressure=profile.surface_pressure,
            temperature=profile.surface_temperature,
            dewpoint_depression=profile.surface_dewpoint_depression,
            wind_direction=profile.surface_wind_direction,
            wind_speed=profile.surface_wind_speed,
        ))

    for level_type, levels in (("mandatory", profile.mandatory_levels),
                               ("significant", profile.significant_levels)):
        for level in levels:
            all_parsed_rows.append(row(
                level_type,
                pressure=level.pressure,
                height=level.height,
                temperature=level.temperature,
                dewpoint=level.dewpoint,
                dewpoint_depression=level.dewpoint_depression,
                wind_direction=level.wind_direction,
                wind_speed=level.wind_speed,
            ))

    if profile.tropopause is not None:
        tropopause = profile.tropopause
        all_parsed_rows.append(row(
            "tropopause",
            pressure=tropopause.pressure,
            temperature=tropopause.temperature,
            dewpoint=tropopause.dewpoint,
            wind_direction=tropopause.wind_direction,
            wind_speed=tropopause.wind_speed,
        ))

    if profile.max_wind is not None:
        all_parsed_rows.append(row(
            "max_wind",
            pressure=profile.max_wind.pressure,
            wind_direction=profile.max_wind.wind_direction,
            wind_speed=profile.max_wind.wind_speed,
        ))

    return all_parsed_rows


def profile_to_frame(profile: DecodedProfile) -> pl.DataFrame:
    """Builds a typed polars DataFrame, even for columns that are entirely absent."""
    return pl.DataFrame(profile_to_rows(profile), schema=ROW_SCHEMA)


def write_parquet(profile: DecodedProfile, path: str) -> pl.DataFrame:
    df = profile_to_frame(profile)
    df.write_parquet(path)
    return df
