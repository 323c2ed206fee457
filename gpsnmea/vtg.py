"""VTG sentence decoder.

VTG (Track Made Good and Ground Speed) provides velocity information from GNSS.
This is essential for navigation and sensor fusion applications that need
ground speed and heading data.

VTG Sentence Format:
    $GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*3B
           |     | |     | |     | |     | |
           |     | |     | |     | |     | +-- [8] Mode indicator (A/D/E/N/...)
           |     | |     | |     | +-----+-- [6,7] Speed in km/h
           |     | |     | +-----+-- [4,5] Speed in knots
           |     | +-----+-- [2,3] Track (magnetic north, degrees)
           +-----+-- [0,1] Track (true north, degrees)

Note: When stationary, the track angle may be empty (no heading when not moving).
"""

from functools import partial

from gpsnmea.fields import parse_enum_field, parse_float_field, parse_unit_field
from gpsnmea.grammar import check_sentence, convert
from gpsnmea.sentence import GenericSentence
from gpsnmea.types import ModeIndicator, VTGData

SENTENCE_ID = "VTG"

# VTG has 8 fields in basic format, 9 with FAA mode indicator
_REQUIRED_FIELD_COUNT = 8

# Conversion factor: km/h to m/s
# 1 km/h = 1000m / 3600s = 1/3.6 m/s
_KILOMETERS_PER_HOUR_TO_METERS_PER_SECOND = 3.6


def _compute_speed_meters_per_second(
    speed_kilometers_per_hour: float | None,
) -> float | None:
    """Convert speed from km/h to m/s for sensor fusion compatibility.

    Conversion: m/s = km/h / 3.6

    Example:
        >>> _compute_speed_meters_per_second(36.0)
        10.0  # 36 km/h = 10 m/s
    """
    if speed_kilometers_per_hour is None:
        return None
    return speed_kilometers_per_hour / _KILOMETERS_PER_HOUR_TO_METERS_PER_SECOND


def parse_vtg(sentence: GenericSentence) -> VTGData:
    """Decode a VTG sentence into structured data.

    Maps field indices to VTGData attributes:
        fields[0] -> track_true_degrees ('T' at fields[1])
        fields[2] -> track_magnetic_degrees ('M' at fields[3])
        fields[4] -> speed_knots ('N' at fields[5])
        fields[6] -> speed_kilometers_per_hour ('K' at fields[7])
        (computed) -> speed_meters_per_second (derived from km/h)
        fields[8] -> mode (FAA mode indicator, if present)

    Raises:
        UnknownOrMismatchedSentenceTypeError: Not a VTG sentence
        MissingFieldError: Fewer than 8 fields
        InvalidFieldValueError: A field does not parse

    Example:
        >>> vtg = parse_vtg(GenericSentence.parse("$GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*3B"))
        >>> vtg.speed_meters_per_second
        2.833...
    """
    check_sentence(sentence, SENTENCE_ID, _REQUIRED_FIELD_COUNT)

    track_true_degrees = convert(sentence, 0, parse_float_field)
    convert(sentence, 1, partial(parse_unit_field, unit="T"))
    track_magnetic_degrees = convert(sentence, 2, parse_float_field)
    convert(sentence, 3, partial(parse_unit_field, unit="M"))
    speed_knots = convert(sentence, 4, parse_float_field)
    convert(sentence, 5, partial(parse_unit_field, unit="N"))
    speed_kilometers_per_hour = convert(sentence, 6, parse_float_field)
    convert(sentence, 7, partial(parse_unit_field, unit="K"))
    mode = convert(sentence, 8, partial(parse_enum_field, enum_type=ModeIndicator))

    return VTGData(
        track_true_degrees=track_true_degrees,
        track_magnetic_degrees=track_magnetic_degrees,
        speed_knots=speed_knots,
        speed_kilometers_per_hour=speed_kilometers_per_hour,
        speed_meters_per_second=_compute_speed_meters_per_second(
            speed_kilometers_per_hour
        ),
        mode=mode,
    )
