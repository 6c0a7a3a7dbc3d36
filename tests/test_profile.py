from __future__ import annotations

import json
from dataclasses import FrozenInstanceError, replace

import pytest

from radiosonde_parser.models import DecodedLevel
from radiosonde_parser.parser import assemble_profile, decode_sounding, decode_ttaa, decode_ttbb

TTAA = "TTAA 51231 03808 99996 07819 17005 00057 00057 05008 31313"
TTBB = "TTBB 51238 03808 00996 07819 11995 08018 21212 00996 17005"


def test_decode_sounding_combines_both_parts() -> None:
    result = decode_sounding(TTAA, TTBB)
    assert result.errors == ()
    profile = result.profile
    assert (profile.station, profile.day, profile.hour) == ("03808", 1, 23)
    assert profile.surface_pressure == 996
    assert profile.surface_temperature == pytest.approx(7.8)
    assert [level.pressure for level in profile.mandatory_levels] == [1000]
    assert [level.pressure for level in profile.significant_levels] == [996, 995]
    assert profile.tropopause is None
    assert profile.max_wind is None


@pytest.mark.parametrize("ttaa", ["", "   \n\t", None])
def test_ttaa_text_is_required(ttaa) -> None:
    result = decode_sounding(ttaa, TTBB)
    assert result.profile is None
    assert result.errors == ("TTAA data is required",)


@pytest.mark.parametrize("ttbb", [None, "", "  \n"])
def test_missing_ttbb_gives_no_significant_levels(ttbb) -> None:
    result = decode_sounding(TTAA, ttbb)
    assert result.errors == ()
    assert result.profile.significant_levels == ()


def test_failed_ttbb_keeps_ttaa_profile() -> None:
    result = decode_sounding(TTAA, "TTBB 51238 03808 11995 08018")
    assert result.errors == ("TTBB surface pressure group (00PPP) not found",)
    assert result.profile.significant_levels == ()
    assert [level.pressure for level in result.profile.mandatory_levels] == [1000]


def test_failed_ttaa_still_decodes_ttbb() -> None:
    result = decode_sounding("TTAA 51231", TTBB)
    assert result.errors == ("Invalid TTAA format - insufficient data",)
    assert result.profile.station == ""
    assert result.profile.mandatory_levels == ()
    assert [level.pressure for level in result.profile.significant_levels] == [996, 995]


def test_station_mismatch_is_reported() -> None:
    result = decode_sounding(TTAA, TTBB.replace("03808", "03953"))
    assert result.errors == ("TTBB station 03953 does not match TTAA station 03808",)
    assert result.profile.station == "03808"


def test_decoding_is_idempotent() -> None:
    assert decode_sounding(TTAA, TTBB) == decode_sounding(TTAA, TTBB)


def test_assemble_profile_copies_fields() -> None:
    ttaa = decode_ttaa(TTAA)
    ttbb = decode_ttbb(TTBB)
    profile = assemble_profile(ttaa, ttbb)
    assert profile.mandatory_levels is ttaa.mandatory_levels
    assert profile.significant_levels is ttbb.significant_levels
    assert assemble_profile(ttaa).significant_levels == ()


def test_profile_is_read_only() -> None:
    profile = decode_sounding(TTAA, TTBB).profile
    with pytest.raises(FrozenInstanceError):
        profile.station = "00000"


def test_to_dict_is_json_serialisable() -> None:
    data = decode_sounding(TTAA, TTBB).profile.to_dict()
    restored = json.loads(json.dumps(data))
    assert restored["station"] == "03808"
    assert restored["mandatory_levels"][0]["pressure"] == 1000
    assert restored["significant_levels"][0]["dewpoint"] == pytest.approx(5.9)
    assert restored["tropopause"] is None


def test_dewpoint_is_derived_from_temperature_and_depression() -> None:
    level = DecodedLevel(pressure=850, temperature=3.2, dewpoint_depression=6.0)
    assert level.dewpoint == pytest.approx(-2.8)
    assert DecodedLevel(pressure=850, temperature=3.2).dewpoint is None
    assert DecodedLevel(pressure=850, dewpoint_depression=6.0).dewpoint is None
    assert replace(level, temperature=None).dewpoint is None
    assert replace(level, dewpoint_depression=1.2).dewpoint == pytest.approx(2.0)
