from __future__ import annotations

import pytest

from radiosonde_parser.codecs import (
    decode_dewpoint_depression,
    decode_indicator_pressure,
    decode_pressure_height,
    decode_pressure_level,
    decode_temp_dewpoint,
    decode_temperature,
    decode_vertical_shear,
    decode_wind,
    scale_height,
)


@pytest.mark.parametrize(
    "ttt, expected",
    [("078", 7.8), ("079", -7.9), ("000", 0.0), ("535", -53.5), ("250", 25.0), ("003", -0.3)],
)
def test_temperature_sign_follows_tenths_digit_parity(ttt: str, expected: float) -> None:
    assert decode_temperature(ttt) == pytest.approx(expected)


def test_temperature_sign_law_holds_for_every_code() -> None:
    for value in range(1000):
        decoded = decode_temperature(f"{value:03d}")
        assert (decoded >= 0) == (value % 10 % 2 == 0)
        assert abs(decoded) == pytest.approx(value / 10)


@pytest.mark.parametrize("ttt", ["///", "", "07", "0a8", None])
def test_unreadable_temperature_is_absent(ttt) -> None:
    assert decode_temperature(ttt) is None


@pytest.mark.parametrize(
    "dd, expected",
    [("02", 0.2), ("19", 1.9), ("50", 5.0), ("51", 1.0), ("56", 6.0), ("65", 15.0), ("99", 49.0), ("00", 0.0)],
)
def test_dewpoint_depression_regimes(dd: str, expected: float) -> None:
    assert decode_dewpoint_depression(dd) == pytest.approx(expected)


def test_dewpoint_depression_regime_law_holds_for_every_code() -> None:
    for value in range(100):
        expected = value / 10 if value <= 50 else value - 50
        assert decode_dewpoint_depression(f"{value:02d}") == pytest.approx(expected)


@pytest.mark.parametrize("dd", ["//", "5", "x1", ""])
def test_unreadable_dewpoint_depression_is_absent(dd: str) -> None:
    assert decode_dewpoint_depression(dd) is None


def test_temp_dewpoint_group_decodes_halves_independently() -> None:
    assert decode_temp_dewpoint("07819") == (pytest.approx(7.8), pytest.approx(1.9))
    assert decode_temp_dewpoint("078//") == (pytest.approx(7.8), None)
    assert decode_temp_dewpoint("///19") == (None, pytest.approx(1.9))
    assert decode_temp_dewpoint("/////") == (None, None)
    assert decode_temp_dewpoint("078") == (None, None)


@pytest.mark.parametrize(
    "group, expected",
    [
        ("17005", (170, 5)),
        ("27115", (270, 115)),
        ("27615", (270, 115)),
        ("00000", (0, 0)),
        ("05008", (50, 8)),
        ("28593", (285, 93)),
    ],
)
def test_wind_decoding_and_speed_overflow(group: str, expected: tuple) -> None:
    assert decode_wind(group) == expected


@pytest.mark.parametrize("group", ["/////", "170//", "///05", "1700", "", None, "17a05"])
def test_unreadable_wind_is_absent(group) -> None:
    assert decode_wind(group) == (None, None)


@pytest.mark.parametrize(
    "pp, expected",
    [(0, 1000), (92, 925), (85, 850), (70, 700), (50, 500), (40, 400), (30, 300), (25, 250), (20, 200), (15, 150), (10, 100), (60, 600)],
)
def test_pressure_level_lookup(pp: int, expected: int) -> None:
    assert decode_pressure_level(pp) == expected


def test_surface_indicator_is_not_a_mandatory_level() -> None:
    assert decode_pressure_level(99) is None
    assert decode_pressure_height("99996") == (None, None)


@pytest.mark.parametrize(
    "group, expected",
    [
        ("00057", (1000, 57)),
        ("92780", (925, 780)),
        ("85440", (850, 1440)),
        ("70012", (700, 2012)),
        ("50560", (500, 5600)),
        ("40727", (400, 7270)),
        ("30929", (300, 9290)),
        ("25050", (250, 10500)),
        ("20195", (200, 11950)),
        ("15384", (150, 13840)),
        ("10650", (100, 16500)),
        ("60123", (600, 123)),
    ],
)
def test_pressure_height_scaling(group: str, expected: tuple) -> None:
    assert decode_pressure_height(group) == expected


def test_height_band_boundaries_are_closed() -> None:
    assert scale_height(123, 500) == 1230
    assert scale_height(123, 300) == 1230
    assert scale_height(123, 250) == 11230
    assert scale_height(123, 100) == 11230
    assert scale_height(123, 90) == 123
    assert scale_height(123, 925) == 123


def test_missing_height_keeps_pressure() -> None:
    assert decode_pressure_height("85///") == (850, None)


@pytest.mark.parametrize("group", ["/////", "8544", "", None, "a5440"])
def test_unreadable_pressure_group_is_absent(group) -> None:
    assert decode_pressure_height(group) == (None, None)


def test_indicator_pressure_reads_trailing_digits() -> None:
    assert decode_indicator_pressure("88241") == 241
    assert decode_indicator_pressure("00996") == 996
    assert decode_indicator_pressure("88///") is None
    assert decode_indicator_pressure("882") is None


@pytest.mark.parametrize(
    "decode, group",
    [
        (decode_temperature, "0²8"),
        (decode_dewpoint_depression, "1²"),
        (decode_indicator_pressure, "99²96"),
        (decode_pressure_height, "8²440"),
        (decode_temp_dewpoint, "²²²²²"),
        (decode_wind, "2²005"),
        (decode_vertical_shear, "4²0²0"),
        (decode_temperature, "٠٧٨"),
    ],
)
def test_non_ascii_digits_are_unreadable(decode, group: str) -> None:
    decoded = decode(group)
    values = decoded if isinstance(decoded, tuple) else (decoded,)
    assert all(value is None for value in values)


def test_vertical_shear_halves_decode_independently() -> None:
    assert decode_vertical_shear("41020") == (10, 20)
    assert decode_vertical_shear("4//20") == (None, 20)
    assert decode_vertical_shear("410") == (None, None)
