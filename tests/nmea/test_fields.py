"""Tests for NMEA field encoding and decoding."""

import math

import pytest

from marine.nmea.errors import FieldNotAvailableError, FieldParseError
from marine.nmea.fields import (
    decode_char,
    decode_float,
    decode_int,
    decode_string,
    encode_degrees,
    encode_float,
    encode_int,
    format_latitude,
    format_longitude,
    hemisphere_sign,
    parse_degrees,
    to_decimal_degrees,
)


class TestDecode:
    """Tests for the decode_* functions."""

    def test_string(self):
        assert decode_string("RUSKI") == "RUSKI"

    def test_char(self):
        assert decode_char("N") == "N"

    def test_char_too_long(self):
        with pytest.raises(FieldParseError):
            decode_char("NE")

    def test_int_with_leading_zeros(self):
        assert decode_int("08") == 8
        assert decode_int("-01") == -1

    @pytest.mark.parametrize(
        "value", ["1.5", "abc", "1_000", " 7", "7 ", "+-1", "0x10", "\u0661"]
    )
    def test_int_not_a_number(self, value):
        with pytest.raises(FieldParseError):
            decode_int(value)

    def test_int_with_sign(self):
        assert decode_int("+7") == 7

    def test_float(self):
        assert decode_float("545.4") == pytest.approx(545.4)
        assert decode_float("-7.0") == pytest.approx(-7.0)

    @pytest.mark.parametrize(
        "value, expected",
        [("+1.5", 1.5), (".5", 0.5), ("5.", 5.0), ("1e3", 1000.0), ("-2.5E-1", -0.25)],
    )
    def test_float_notation(self, value, expected):
        assert decode_float(value) == pytest.approx(expected)

    @pytest.mark.parametrize(
        "value",
        [
            "abc",
            "1,2",
            "nan",
            "inf",
            "1_0.5",
            " 7.0",
            "7.0\t",
            "1.2.3",
            "--1",
            ".",
            "1e",
            "1e999",
        ],
    )
    def test_float_not_a_number(self, value):
        with pytest.raises(FieldParseError):
            decode_float(value)

    @pytest.mark.parametrize(
        "decode", [decode_string, decode_char, decode_int, decode_float]
    )
    def test_empty_field_is_not_available(self, decode):
        with pytest.raises(FieldNotAvailableError):
            decode("")

    def test_errors_are_value_and_lookup_errors(self):
        with pytest.raises(ValueError):
            decode_int("x")
        with pytest.raises(LookupError):
            decode_int("")


class TestEncodeInt:
    """Tests for encode_int function."""

    @pytest.mark.parametrize(
        "value, leading, expected",
        [
            (0, 0, "0"),
            (1, 2, "01"),
            (12, 3, "012"),
            (123, 2, "123"),
            (-1, 3, "-01"),
        ],
    )
    def test_padding(self, value, leading, expected):
        assert encode_int(value, leading) == expected


class TestEncodeFloat:
    """Tests for encode_float function."""

    @pytest.mark.parametrize(
        "value, leading, decimals, expected",
        [
            (12.346, 1, 2, "12.35"),
            (123.456, 4, 1, "0123.5"),
            (0.910, 0, 2, ".91"),
            (0.910, 1, 2, "0.91"),
            (3.14, 0, 0, "3"),
            (0.0, 0, 0, "0"),
            (1.0, 2, 3, "01.000"),
            (-1.5, 2, 1, "-01.5"),
        ],
    )
    def test_format(self, value, leading, decimals, expected):
        assert encode_float(value, leading, decimals) == expected

    def test_uses_dot_separator(self):
        assert "," not in encode_float(1234.5, 0, 1)

    def test_round_half_even(self):
        assert encode_float(0.5, 0, 0) == "0"
        assert encode_float(1.5, 0, 0) == "2"
        assert encode_float(2.5, 0, 0) == "2"

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite(self, value):
        with pytest.raises(ValueError):
            encode_float(value, 1, 1)


class TestEncodeDegrees:
    """Tests for encode_degrees function."""

    @pytest.mark.parametrize(
        "value, expected", [(0.0, "000.0"), (45.25, "045.2"), (360.0, "360.0")]
    )
    def test_format(self, value, expected):
        assert encode_degrees(value) == expected

    @pytest.mark.parametrize("value", [-0.1, 360.1, math.nan, math.inf])
    def test_out_of_range(self, value):
        with pytest.raises(ValueError):
            encode_degrees(value)


class TestParseDegrees:
    """Tests for parse_degrees function."""

    def test_latitude(self):
        # 60° 11.552' = 60 + 11.552/60
        assert parse_degrees("6011.552") == pytest.approx(60.19253333)

    def test_longitude(self):
        assert parse_degrees("02501.941") == pytest.approx(25.03235)

    def test_minutes_only(self):
        assert parse_degrees("30.0") == pytest.approx(0.5)

    def test_without_decimal_point_is_minutes(self):
        assert parse_degrees("4807") == pytest.approx(4807 / 60)

    def test_two_digits_before_point_is_minutes(self):
        assert parse_degrees("07.5") == pytest.approx(0.125)

    @pytest.mark.parametrize(
        "value",
        [
            "60AB.552",
            "x",
            "60-1.0",
            "+6011.552",
            "6_011.552",
            "60 11.552",
            "6011.5_52",
        ],
    )
    def test_malformed(self, value):
        with pytest.raises(FieldParseError):
            parse_degrees(value)

    def test_empty(self):
        with pytest.raises(FieldNotAvailableError):
            parse_degrees("")


class TestFormatCoordinates:
    """Tests for format_latitude and format_longitude functions."""

    def test_latitude(self):
        assert format_latitude(60.19253333) == "6011.552"

    def test_longitude(self):
        assert format_longitude(25.03235) == "02501.941"

    def test_sign_is_dropped(self):
        assert format_latitude(-60.19253333) == "6011.552"
        assert format_longitude(-25.03235) == "02501.941"

    def test_rounding_carries_into_degrees(self):
        assert format_latitude(10.99999999) == "1100.000"

    @pytest.mark.parametrize("value", [math.nan, math.inf])
    def test_non_finite(self, value):
        with pytest.raises(ValueError):
            format_longitude(value)

    @pytest.mark.parametrize("value", [0.0, 1.5, 45.123456, 89.99])
    def test_round_trip(self, value):
        assert parse_degrees(format_latitude(value)) == pytest.approx(value, abs=1e-5)


class TestHemisphere:
    """Tests for hemisphere_sign and to_decimal_degrees functions."""

    @pytest.mark.parametrize(
        "indicator, sign", [("N", 1.0), ("E", 1.0), ("S", -1.0), ("W", -1.0)]
    )
    def test_sign(self, indicator, sign):
        assert hemisphere_sign(indicator) == sign

    def test_invalid_indicator(self):
        with pytest.raises(FieldParseError):
            hemisphere_sign("X")

    def test_south_is_negative(self):
        assert to_decimal_degrees("6011.552", "S") == pytest.approx(-60.19253333)

    def test_east_is_positive(self):
        assert to_decimal_degrees("02501.941", "E") == pytest.approx(25.03235)
