"""NMEA field parsing utilities.

This module provides utilities for parsing individual fields from NMEA sentences.
NMEA fields are comma-separated and may be empty (consecutive commas indicate
missing data). These utilities map empty fields to None, allowing callers to
distinguish "no data" from "zero value". A field that is present but does not
parse raises ``FieldFormatError``; the decoders attach the field index.

Numeric fields are parsed strictly: Python's ``float()`` and ``int()`` would
accept exponents, "inf", "nan", underscores and surrounding whitespace, none of
which is valid NMEA, so every numeric field is matched against a fixed-point
pattern first. Patterns are ASCII-only; other Unicode digits are rejected.
"""

import re
from datetime import date
from enum import Enum
from typing import TypeVar

from gpsnmea.errors import FieldFormatError
from gpsnmea.types import UTCTime

# Supported NMEA talker IDs for multi-constellation GNSS receivers.
# Each 2-character prefix identifies the satellite system.
TALKER_CONSTELLATIONS = {
    "GP": "GPS",
    "GN": "Multi-GNSS",
    "GL": "GLONASS",
    "GA": "Galileo",
    "GB": "BeiDou",
    "BD": "BeiDou",
    "GQ": "QZSS",
    "GI": "NavIC",
}

# Header = 2-character talker ID + 3-character sentence ID
TALKER_LENGTH = 2
HEADER_LENGTH = 5

# Two-digit years in DDMMYY dates are taken to be 2000-2099.
CENTURY_BASE = 2000

_DECIMAL_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)", re.ASCII)
_INTEGER_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)
_UNSIGNED_PATTERN = re.compile(r"\d+", re.ASCII)
_TIME_PATTERN = re.compile(r"(\d{2})(\d{2})(\d{2}(?:\.\d+)?)", re.ASCII)
_DATE_PATTERN = re.compile(r"(\d{2})(\d{2})(\d{2})", re.ASCII)
_COORDINATE_PATTERN = re.compile(r"(\d+)(\.\d*)?", re.ASCII)

_MINUTES_PER_DEGREE = 60.0

EnumT = TypeVar("EnumT", bound=Enum)


def parse_float_field(value: str) -> float | None:
    """Parse a string field to float, returning None if empty.

    NMEA fields may be empty (indicated by consecutive commas like ",,").
    This function treats empty strings as "no data" rather than an error.

    Args:
        value: String value from an NMEA field

    Returns:
        Parsed float value, or None if the field is empty

    Raises:
        FieldFormatError: The field is not a plain decimal number

    Example:
        >>> parse_float_field("545.4")
        545.4
        >>> parse_float_field("")  # empty field
        None
    """
    if not value:
        return None
    if not _DECIMAL_PATTERN.fullmatch(value):
        raise FieldFormatError("not a decimal number")
    return float(value)


def parse_int_field(value: str) -> int | None:
    """Parse a string field to a signed int, returning None if empty.

    Similar to parse_float_field but for integer values like the local
    zone offset.

    Example:
        >>> parse_int_field("-05")
        -5
        >>> parse_int_field("")
        None
    """
    if not value:
        return None
    if not _INTEGER_PATTERN.fullmatch(value):
        raise FieldFormatError("not an integer")
    return int(value)


def parse_unsigned_int_field(value: str) -> int | None:
    """Parse a digits-only field such as satellite count or station ID."""
    if not value:
        return None
    if not _UNSIGNED_PATTERN.fullmatch(value):
        raise FieldFormatError("not an unsigned integer")
    return int(value)


def parse_enum_field(value: str, enum_type: type[EnumT]) -> EnumT | None:
    """Map a short code onto a member of ``enum_type``.

    Unknown codes are rejected rather than mapped to a default member.

    Example:
        >>> parse_enum_field("A", RMCStatus)
        <RMCStatus.ACTIVE: 'A'>
    """
    if not value:
        return None
    try:
        return enum_type(value)
    except ValueError:
        raise FieldFormatError(
            f"unrecognized {enum_type.__name__} code"
        ) from None


def parse_unit_field(value: str, unit: str) -> None:
    """Check a unit letter field ('M', 'T', 'N', 'K', ...).

    An empty unit is accepted: receivers leave the unit blank along with
    the value it qualifies.
    """
    if value and value != unit:
        raise FieldFormatError(f"expected unit {unit!r}")


def _parse_coordinate_parts(value: str, degree_digits: int) -> tuple[int, float]:
    """Parse NMEA coordinate into degrees and minutes components.

    NMEA coordinates use DDDMM.MMMM format where:
    - DDD (or DD for latitude) = degrees
    - MM.MMMM = decimal minutes

    The integer part must be exactly ``degree_digits + 2`` digits long; the
    2 digits before the decimal point are always minutes.

    Example:
        >>> _parse_coordinate_parts("4807.038", 2)  # 48 deg 07.038'
        (48, 7.038)
        >>> _parse_coordinate_parts("01131.000", 3)  # 11 deg 31.000'
        (11, 31.0)
    """
    match = _COORDINATE_PATTERN.fullmatch(value)
    if match is None:
        raise FieldFormatError("not a DDMM.mmmm coordinate")

    whole = match.group(1)
    if len(whole) != degree_digits + 2:
        raise FieldFormatError(
            f"expected {degree_digits} degree digits and 2 minute digits"
        )

    degrees = int(whole[:degree_digits])
    minutes = float(whole[degree_digits:] + (match.group(2) or ""))
    if minutes >= _MINUTES_PER_DEGREE:
        raise FieldFormatError("minutes out of range")

    return degrees, minutes


def convert_to_decimal_degrees(
    value: str,
    direction: str,
    degree_digits: int,
    hemispheres: tuple[str, str],
    limit: float,
) -> float | None:
    """Convert NMEA coordinate (DDDMM.MMMM) to decimal degrees.

    NMEA uses degrees-minutes format with a hemisphere indicator.
    This function converts to decimal degrees with sign convention:
    - North/East = positive
    - South/West = negative

    The conversion formula is:
        decimal_degrees = degrees + (minutes / 60)

    Args:
        value: Coordinate in DDMM.MMMM or DDDMM.MMMM format
        direction: Hemisphere indicator
        degree_digits: 2 for latitude, 3 for longitude
        hemispheres: (positive, negative) hemisphere letters
        limit: Largest valid magnitude in degrees

    Returns:
        Decimal degrees, or None if both fields are empty

    Raises:
        FieldFormatError: Malformed value (position 0) or hemisphere
            (position 1), or only one of the two fields is present
    """
    if not value and not direction:
        return None
    if not value:
        raise FieldFormatError("hemisphere without coordinate", position=0)

    degrees, minutes = _parse_coordinate_parts(value, degree_digits)
    decimal_degrees = degrees + minutes / _MINUTES_PER_DEGREE
    if decimal_degrees > limit:
        raise FieldFormatError(f"coordinate exceeds {limit:g} degrees")

    positive, negative = hemispheres
    if direction == positive:
        return decimal_degrees
    if direction == negative:
        return -decimal_degrees
    raise FieldFormatError(
        f"hemisphere must be {positive!r} or {negative!r}", position=1
    )


def parse_latitude(value: str, direction: str) -> float | None:
    """Convert a DDMM.mmmm latitude and N/S indicator to signed degrees.

    Example:
        >>> parse_latitude("3256.3952158", "N")
        32.93992026...
    """
    return convert_to_decimal_degrees(value, direction, 2, ("N", "S"), 90.0)


def parse_longitude(value: str, direction: str) -> float | None:
    """Convert a DDDMM.mmmm longitude and E/W indicator to signed degrees.

    Example:
        >>> parse_longitude("11701.6490440", "W")
        -117.02748406...
    """
    return convert_to_decimal_degrees(value, direction, 3, ("E", "W"), 180.0)


def parse_signed_direction_field(
    value: str,
    direction: str,
    positive: str = "E",
    negative: str = "W",
) -> float | None:
    """Combine a magnitude and a direction letter into a signed value.

    Used for magnetic variation, where East is positive and West negative.
    """
    if not value and not direction:
        return None
    magnitude = parse_float_field(value)
    if magnitude is None:
        raise FieldFormatError("direction without value", position=0)
    if direction == positive:
        return magnitude
    if direction == negative:
        return -magnitude
    raise FieldFormatError(
        f"direction must be {positive!r} or {negative!r}", position=1
    )


def parse_time_field(value: str) -> UTCTime | None:
    """Parse HHMMSS or HHMMSS.ss into a UTCTime.

    Example:
        >>> parse_time_field("184901.50")
        UTCTime(hour=18, minute=49, second=1.5)
    """
    if not value:
        return None

    match = _TIME_PATTERN.fullmatch(value)
    if match is None:
        raise FieldFormatError("not an HHMMSS[.ss] time")

    hour, minute, second = int(match.group(1)), int(match.group(2)), float(match.group(3))
    if hour > 23:
        raise FieldFormatError("hour out of range")
    if minute > 59:
        raise FieldFormatError("minute out of range")
    if second >= 60.0:
        raise FieldFormatError("second out of range")

    return UTCTime(hour=hour, minute=minute, second=second)


def make_date(year: int, month: int, day: int) -> date:
    """Build a calendar date, turning an impossible one into FieldFormatError."""
    try:
        return date(year, month, day)
    except ValueError as err:
        raise FieldFormatError(str(err)) from err


def parse_date_field(value: str) -> date | None:
    """Parse a DDMMYY date; two-digit years are placed in 2000-2099.

    Example:
        >>> parse_date_field("011217")
        datetime.date(2017, 12, 1)
    """
    if not value:
        return None

    match = _DATE_PATTERN.fullmatch(value)
    if match is None:
        raise FieldFormatError("not a DDMMYY date")

    day, month, year = (int(group) for group in match.groups())
    return make_date(CENTURY_BASE + year, month, day)
