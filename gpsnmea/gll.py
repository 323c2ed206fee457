"""GLL sentence decoder.

GLL (Geographic Position - Latitude/Longitude) is the position-only sentence.

GLL Sentence Format:
    $GPGLL,3256.3952158,N,11701.6490440,W,184901.50,A,A*xx
           |            | |             | |         | |
           |            | |             | |         | +-- [6] Mode indicator (2.3+)
           |            | |             | |         +-- [5] Status (A=active, V=void)
           |            | |             | +-- [4] UTC time (HHMMSS.ss)
           |            | +-------------+-- [2,3] Longitude + E/W
           +------------+-- [0,1] Latitude + N/S
"""

from functools import partial

from gpsnmea.fields import (
    parse_enum_field,
    parse_latitude,
    parse_longitude,
    parse_time_field,
)
from gpsnmea.grammar import check_sentence, convert
from gpsnmea.sentence import GenericSentence
from gpsnmea.types import GLLData, ModeIndicator, RMCStatus

SENTENCE_ID = "GLL"

_REQUIRED_FIELD_COUNT = 6


def parse_gll(sentence: GenericSentence) -> GLLData:
    """Decode a GLL sentence.

    Raises:
        UnknownOrMismatchedSentenceTypeError: Not a GLL sentence
        MissingFieldError: Fewer than 6 fields
        InvalidFieldValueError: A field does not parse
    """
    check_sentence(sentence, SENTENCE_ID, _REQUIRED_FIELD_COUNT)

    return GLLData(
        latitude_degrees=convert(sentence, 0, parse_latitude, width=2),
        longitude_degrees=convert(sentence, 2, parse_longitude, width=2),
        utc_time=convert(sentence, 4, parse_time_field),
        status=convert(sentence, 5, partial(parse_enum_field, enum_type=RMCStatus)),
        mode=convert(sentence, 6, partial(parse_enum_field, enum_type=ModeIndicator)),
    )
