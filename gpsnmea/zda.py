"""ZDA sentence decoder.

ZDA (Time and Date) carries the UTC time of day together with a full
four-digit-year date and the receiver's local zone offset.

ZDA Sentence Format:
    $GPZDA,184901.50,01,12,2017,00,00*60
           |         |  |  |    |  |
           |         |  |  |    |  +-- [5] Local zone minutes (0..59)
           |         |  |  |    +-- [4] Local zone hours (-13..13)
           |         |  |  +-- [3] Year (4 digits)
           |         |  +-- [2] Month (01-12)
           |         +-- [1] Day (01-31)
           +-- [0] UTC time (HHMMSS.ss)
"""

import re
from datetime import date

from gpsnmea.errors import FieldFormatError
from gpsnmea.fields import make_date, parse_int_field, parse_time_field
from gpsnmea.grammar import check_sentence, convert
from gpsnmea.sentence import GenericSentence
from gpsnmea.types import ZDAData

SENTENCE_ID = "ZDA"

_REQUIRED_FIELD_COUNT = 6

_TWO_DIGITS = re.compile(r"\d{1,2}", re.ASCII)
_FOUR_DIGITS = re.compile(r"\d{4}", re.ASCII)

_MAX_ZONE_HOURS = 13


def _parse_date_fields(day: str, month: str, year: str) -> date | None:
    """Combine the separate day, month and year fields into a date.

    All three empty means no date; any other mix of empty and present
    fields is rejected at the first offending field.
    """
    if not (day or month or year):
        return None
    if not _TWO_DIGITS.fullmatch(day):
        raise FieldFormatError("day must be 1-2 digits", position=0)
    if not _TWO_DIGITS.fullmatch(month) or not 1 <= int(month) <= 12:
        raise FieldFormatError("month must be 01-12", position=1)
    if not _FOUR_DIGITS.fullmatch(year):
        raise FieldFormatError("year must be 4 digits", position=2)
    return make_date(int(year), int(month), int(day))


def _parse_zone_hours(value: str) -> int | None:
    hours = parse_int_field(value)
    if hours is not None and abs(hours) > _MAX_ZONE_HOURS:
        raise FieldFormatError("local zone hours out of range")
    return hours


def _parse_zone_minutes(value: str) -> int | None:
    minutes = parse_int_field(value)
    if minutes is not None and not 0 <= minutes <= 59:
        raise FieldFormatError("local zone minutes out of range")
    return minutes


def parse_zda(sentence: GenericSentence) -> ZDAData:
    """Decode a ZDA sentence.

    Raises:
        UnknownOrMismatchedSentenceTypeError: Not a ZDA sentence
        MissingFieldError: Fewer than 6 fields
        InvalidFieldValueError: A field does not parse

    Example:
        >>> zda = parse_zda(GenericSentence.parse("$GPZDA,184901.50,01,12,2017,00,00*60"))
        >>> zda.date
        datetime.date(2017, 12, 1)
    """
    check_sentence(sentence, SENTENCE_ID, _REQUIRED_FIELD_COUNT)

    return ZDAData(
        utc_time=convert(sentence, 0, parse_time_field),
        date=convert(sentence, 1, _parse_date_fields, width=3),
        local_zone_hours=convert(sentence, 4, _parse_zone_hours),
        local_zone_minutes=convert(sentence, 5, _parse_zone_minutes),
    )
