"""Tests for GLL sentence decoding."""

import pytest

from gpsnmea import (
    GenericSentence,
    InvalidFieldValueError,
    MissingFieldError,
    ModeIndicator,
    RMCStatus,
    UTCTime,
    parse_gll,
)
from tests.conftest import GLL_SENTENCE
from tests.helpers import truncated, with_checksum


def _gll(raw: str):
    return parse_gll(GenericSentence.parse(raw))


class TestParseGLL:
    """Tests for parse_gll function."""

    def test_active_position(self):
        result = _gll(GLL_SENTENCE)
        assert result.latitude_degrees == pytest.approx(32.93992026, abs=1e-8)
        assert result.longitude_degrees == pytest.approx(-117.02748407, abs=1e-8)
        assert result.utc_time == UTCTime(hour=18, minute=49, second=1.5)
        assert result.status is RMCStatus.ACTIVE
        assert result.mode is ModeIndicator.AUTONOMOUS
        assert result.valid is True

    def test_void_without_position(self):
        result = _gll("$GPGLL,,,,,184901.50,V,N*4A")
        assert result.latitude_degrees is None
        assert result.longitude_degrees is None
        assert result.status is RMCStatus.VOID
        assert result.mode is ModeIndicator.NOT_VALID
        assert result.valid is False

    def test_without_mode_indicator(self):
        body = GLL_SENTENCE[1 : GLL_SENTENCE.rindex(",")]
        result = _gll(with_checksum(body))
        assert result.mode is None
        assert result.valid is True

    @pytest.mark.parametrize("field_count", range(6))
    def test_truncated(self, field_count):
        with pytest.raises(MissingFieldError) as excinfo:
            _gll(truncated(GLL_SENTENCE, field_count))
        assert excinfo.value.index == field_count

    def test_invalid_status(self):
        with pytest.raises(InvalidFieldValueError) as excinfo:
            _gll(with_checksum("GPGLL,3256.3952158,N,11701.6490440,W,184901.50,X,A"))
        assert excinfo.value.index == 5
