"""Tests for ZDA sentence decoding."""

from datetime import date

import pytest

from gpsnmea import (
    GenericSentence,
    InvalidFieldValueError,
    MissingFieldError,
    UnknownOrMismatchedSentenceTypeError,
    UTCTime,
    parse_zda,
)
from tests.conftest import GGA_SENTENCE, ZDA_SENTENCE
from tests.helpers import truncated, with_checksum


def _zda(raw: str):
    return parse_zda(GenericSentence.parse(raw))


class TestParseZDA:
    """Tests for parse_zda function."""

    def test_time_and_date(self, zda_sentence):
        result = parse_zda(zda_sentence)
        assert result.utc_time == UTCTime(hour=18, minute=49, second=1.5)
        assert result.date == date(2017, 12, 1)
        assert result.local_zone_hours == 0
        assert result.local_zone_minutes == 0

    def test_negative_local_zone(self):
        result = _zda("$GPZDA,050306.00,15,03,2024,-05,30*4E")
        assert result.date == date(2024, 3, 15)
        assert result.local_zone_hours == -5
        assert result.local_zone_minutes == 30

    def test_empty_date_and_zone_are_absent(self):
        result = _zda("$GPZDA,184901.50,,,,,*66")
        assert result.utc_time == UTCTime(hour=18, minute=49, second=1.5)
        assert result.date is None
        assert result.local_zone_hours is None
        assert result.local_zone_minutes is None


class TestParseZDAErrors:
    """Tests for ZDA decode failures."""

    def test_wrong_sentence_type(self):
        with pytest.raises(UnknownOrMismatchedSentenceTypeError):
            _zda(GGA_SENTENCE)

    @pytest.mark.parametrize("field_count", range(6))
    def test_truncated_sentence(self, field_count):
        with pytest.raises(MissingFieldError) as excinfo:
            _zda(truncated(ZDA_SENTENCE, field_count))
        assert excinfo.value.index == field_count

    @pytest.mark.parametrize(
        "fields, index",
        [
            ("184901.50,,12,2017,00,00", 1),
            ("184901.50,01,13,2017,00,00", 2),
            ("184901.50,01,,2017,00,00", 2),
            ("184901.50,01,12,17,00,00", 3),
            ("184901.50,31,02,2017,00,00", 1),
            ("184901.50,001,12,2017,00,00", 1),
            ("184901.50,01,12,2017,14,00", 4),
            ("184901.50,01,12,2017,00,60", 5),
            ("184901.50,01,12,2017,00,-1", 5),
            ("186001.50,01,12,2017,00,00", 0),
            ("184901.50,01,12,\u0662\u0660\u0661\u0667,00,00", 3),
            ("184901.50,\uff10\uff11,12,2017,00,00", 1),
        ],
    )
    def test_invalid_fields(self, fields, index):
        with pytest.raises(InvalidFieldValueError) as excinfo:
            _zda(with_checksum(f"GPZDA,{fields}"))
        assert excinfo.value.index == index
