"""RMC sentence decoder.

RMC (Recommended Minimum Specific GNSS Data) is the minimum set of data a
receiver provides: time, date, position, speed and course over ground, and
magnetic variation.

RMC Sentence Format:
    $GPRMC,184902.00,A,3256.3952143,N,11701.6490461,W,0.05,106.83,011217,11.5,E,A,S*61
           |         | |            | |             | |    |      |      |    | | |
           |         | |            | |             | |    |      |      |    | | +-- [12] Nav status (4.1+)
           |         | |            | |             | |    |      |      |    | +-- [11] Mode (2.3+)
           |         | |            | |             | |    |      |      +----+-- [9,10] Magnetic variation, E/W
           |         | |            | |             | |    |      +-- [8] Date (DDMMYY)
           |         | |            | |             | |    +-- [7] Course over ground (degrees true)
           |         | |            | |             | +-- [6] Speed over ground (knots)
           |         | |            | +-------------+-- [4,5] Longitude + E/W
           |         | +------------+-- [2,3] Latitude + N/S
           |         +-- [1] Status (A=active, V=void)
           +-- [0] UTC time (HHMMSS.ss)

Note: Fields 11 and 12 only exist on newer receivers. Sentences without them
decode with ``mode`` and ``navigational_status`` set to None.
"""

from functools import partial

from gpsnmea.fields import (
    parse_date_field,
    parse_enum_field,
    parse_float_field,
    parse_latitude,
    parse_longitude,
    parse_signed_direction_field,
    parse_time_field,
)
from gpsnmea.grammar import check_sentence, convert
from gpsnmea.sentence import GenericSentence
from gpsnmea.types import ModeIndicator, NavigationalStatus, RMCData, RMCStatus

SENTENCE_ID = "RMC"

# RMC has 11 fields up to NMEA 2.2, 12 with the mode indicator (2.3)
# and 13 with the navigational status (4.1)
_REQUIRED_FIELD_COUNT = 11


def parse_rmc(sentence: GenericSentence) -> RMCData:
    """Decode an RMC sentence.

    Magnetic variation is signed: East positive, West negative.

    Raises:
        UnknownOrMismatchedSentenceTypeError: Not an RMC sentence
        MissingFieldError: Fewer than 11 fields
        InvalidFieldValueError: A field does not parse

    Example:
        >>> rmc = parse_rmc(GenericSentence.parse(
        ...     "$GPRMC,184902.00,A,3256.3952143,N,11701.6490461,W,0.05,106.83,011217,11.5,E,A,S*61"))
        >>> rmc.magnetic_variation_degrees
        11.5
    """
    check_sentence(sentence, SENTENCE_ID, _REQUIRED_FIELD_COUNT)

    return RMCData(
        utc_time=convert(sentence, 0, parse_time_field),
        status=convert(sentence, 1, partial(parse_enum_field, enum_type=RMCStatus)),
        latitude_degrees=convert(sentence, 2, parse_latitude, width=2),
        longitude_degrees=convert(sentence, 4, parse_longitude, width=2),
        speed_knots=convert(sentence, 6, parse_float_field),
        course_degrees=convert(sentence, 7, parse_float_field),
        date=convert(sentence, 8, parse_date_field),
        magnetic_variation_degrees=convert(
            sentence, 9, parse_signed_direction_field, width=2
        ),
        mode=convert(sentence, 11, partial(parse_enum_field, enum_type=ModeIndicator)),
        navigational_status=convert(
            sentence, 12, partial(parse_enum_field, enum_type=NavigationalStatus)
        ),
    )
