"""NMEA field encoding and decoding.

This module provides the conversions between the text of a single NMEA field
and Python values. NMEA fields are comma-separated and may be empty
(consecutive commas indicate missing data). An empty field is reported with
``FieldNotAvailableError`` so callers can distinguish "no data" from a zero
value, and from malformed content, which raises ``FieldParseError``.

Numbers are always rendered with '.' as the decimal separator, independent of
the process locale.
"""

import math
import re
from decimal import ROUND_HALF_EVEN, Decimal

from marine.nmea.errors import FieldNotAvailableError, FieldParseError

# Hemisphere indicators and the sign they give to a coordinate.
_HEMISPHERE_SIGNS = {"N": 1.0, "S": -1.0, "E": 1.0, "W": -1.0}

# int() and float() also accept whitespace, underscores and words like "nan";
# field text must be a plain decimal number.
_INT = re.compile(r"[+-]?[0-9]+")
_DIGITS = re.compile(r"[0-9]+")
_FLOAT = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


def decode_string(value: str) -> str:
    """Return the field content.

    Raises:
        FieldNotAvailableError: If the field is empty.
    """
    if not value:
        raise FieldNotAvailableError("Data not available")
    return value


def decode_char(value: str) -> str:
    """Return the single character held by a field.

    Raises:
        FieldNotAvailableError: If the field is empty.
        FieldParseError: If the field holds more than one character.

    Example:
        >>> decode_char("A")
        'A'
    """
    value = decode_string(value)
    if len(value) > 1:
        raise FieldParseError(f"Expected char, found String [{value}]")
    return value


def decode_int(value: str) -> int:
    """Parse a field to int.

    Raises:
        FieldNotAvailableError: If the field is empty.
        FieldParseError: If the field is not an integer.

    Example:
        >>> decode_int("08")
        8
    """
    value = decode_string(value)
    if not _INT.fullmatch(value):
        raise FieldParseError(f"Field does not contain integer value [{value}]")
    return int(value)


def decode_float(value: str) -> float:
    """Parse a field to float.

    Raises:
        FieldNotAvailableError: If the field is empty.
        FieldParseError: If the field is not a decimal number.

    Example:
        >>> decode_float("545.4")
        545.4
    """
    value = decode_string(value)
    if not _FLOAT.fullmatch(value):
        raise FieldParseError(f"Field does not contain double value [{value}]")
    result = float(value)
    # a huge exponent overflows to infinity
    if not math.isfinite(result):
        raise FieldParseError(f"Field does not contain double value [{value}]")
    return result


def encode_int(value: int, leading: int = 0) -> str:
    """Render an int, zero-padded to ``leading`` digits.

    The sign counts towards the width.

    Example:
        >>> encode_int(1, 3)
        '001'
        >>> encode_int(-1, 3)
        '-01'
    """
    if leading > 0:
        return f"{value:0{leading}d}"
    return str(value)


def encode_float(value: float, leading: int = 0, decimals: int = 0) -> str:
    """Render a float with fixed integer and fraction digit counts.

    The integer part is zero-padded to at least ``leading`` digits and the
    fraction is rounded half-even to exactly ``decimals`` digits. With
    ``leading=0`` and ``decimals > 0`` a zero integer part is omitted
    entirely (``.91``); with no decimals at least one integer digit is
    written.

    Args:
        value: The number to render
        leading: Minimum number of integer digits
        decimals: Exact number of fraction digits

    Returns:
        The formatted number

    Raises:
        ValueError: If the value is NaN or infinite.

    Example:
        >>> encode_float(123.456, 4, 1)
        '0123.5'
        >>> encode_float(0.910, 0, 2)
        '.91'
        >>> encode_float(3.14, 0, 0)
        '3'
    """
    if not math.isfinite(value):
        raise ValueError(f"Cannot encode non-finite value [{value}]")
    if decimals == 0:
        leading = max(leading, 1)

    # Decimal(float) is exact, so ties are decided on the real binary value
    quantum = Decimal(1).scaleb(-decimals)
    rounded = Decimal(value).quantize(quantum, rounding=ROUND_HALF_EVEN)

    sign = "-" if rounded < 0 else ""
    whole, _, fraction = f"{abs(rounded):f}".partition(".")
    whole = whole.lstrip("0").rjust(leading, "0")

    if decimals > 0:
        return f"{sign}{whole}.{fraction}"
    return f"{sign}{whole}"


def encode_degrees(value: float) -> str:
    """Render an angle in the 0..360 range as ``DDD.D``.

    Raises:
        ValueError: If the angle is outside 0..360.

    Example:
        >>> encode_degrees(45.25)
        '045.2'
    """
    if not 0 <= value <= 360:
        raise ValueError("Value out of bounds [0..360]")
    return encode_float(value, 3, 1)


def _split_degrees(value: str) -> tuple[str, str]:
    """Split a DDDMM.MMMM string into its degrees and minutes parts.

    The two digits before the decimal point are always minutes; everything
    before them is whole degrees. Without more than two digits before a
    decimal point the whole value is minutes, which includes values with no
    decimal point at all.

    Example:
        >>> _split_degrees("4807.038")
        ('48', '07.038')
        >>> _split_degrees("8.844957")
        ('', '8.844957')
        >>> _split_degrees("4807")
        ('', '4807')
    """
    dot_position = value.find(".")
    if dot_position > 2:
        return value[: dot_position - 2], value[dot_position - 2 :]
    return "", value


def parse_degrees(value: str) -> float:
    """Convert an NMEA coordinate (DDDMM.MMMM) to decimal degrees.

    The result is always positive; the hemisphere is carried in a separate
    field (see ``to_decimal_degrees``).

    The conversion formula is:
        decimal_degrees = degrees + (minutes / 60)

    Raises:
        FieldNotAvailableError: If the field is empty.
        FieldParseError: If the field is not a coordinate.

    Example:
        >>> parse_degrees("4807.038")  # 48° 07.038'
        48.1173
        >>> parse_degrees("01131.000")  # 11° 31.000'
        11.516666666666667
    """
    value = decode_string(value)
    degrees, minutes = _split_degrees(value)
    if degrees and not _DIGITS.fullmatch(degrees):
        raise FieldParseError(f"Field does not contain a coordinate [{value}]")
    if not _FLOAT.fullmatch(minutes) or minutes.startswith("-"):
        raise FieldParseError(f"Field does not contain a coordinate [{value}]")
    fraction = float(minutes)
    if not math.isfinite(fraction):
        raise FieldParseError(f"Field does not contain a coordinate [{value}]")
    return int(degrees or 0) + fraction / 60.0


def _format_degrees(value: float, degree_digits: int) -> str:
    if not math.isfinite(value):
        raise ValueError(f"Cannot encode non-finite coordinate [{value}]")
    value = abs(value)
    degrees = math.floor(value)
    minutes = encode_float((value - degrees) * 60, 2, 3)
    # 59.9996' rounds up to a full degree
    if minutes == "60.000":
        degrees += 1
        minutes = "00.000"
    return f"{degrees:0{degree_digits}d}{minutes}"


def format_latitude(value: float) -> str:
    """Render a latitude as DDMM.MMM, dropping the sign.

    Example:
        >>> format_latitude(60.1925333)
        '6011.552'
    """
    return _format_degrees(value, 2)


def format_longitude(value: float) -> str:
    """Render a longitude as DDDMM.MMM, dropping the sign.

    Example:
        >>> format_longitude(-25.03235)
        '02501.941'
    """
    return _format_degrees(value, 3)


def hemisphere_sign(indicator: str) -> float:
    """Return +1.0 for 'N'/'E' and -1.0 for 'S'/'W'.

    Raises:
        FieldParseError: For any other indicator.
    """
    try:
        return _HEMISPHERE_SIGNS[indicator]
    except KeyError as exc:
        raise FieldParseError(f"Invalid hemisphere '{indicator}'") from exc


def to_decimal_degrees(value: str, hemisphere: str) -> float:
    """Convert an NMEA coordinate and hemisphere indicator to decimal degrees.

    Sign convention:
    - North/East = positive
    - South/West = negative

    Example:
        >>> to_decimal_degrees("01131.000", "W")
        -11.516666666666667
    """
    return hemisphere_sign(decode_char(hemisphere)) * parse_degrees(value)
