"""Tests for VTG sentence decoding."""

import pytest

from gpsnmea import (
    GenericSentence,
    InvalidFieldValueError,
    MissingFieldError,
    ModeIndicator,
    UnknownOrMismatchedSentenceTypeError,
    parse_vtg,
)
from tests.conftest import GGA_SENTENCE, VTG_SENTENCE
from tests.helpers import truncated, with_checksum


def _vtg(raw: str):
    return parse_vtg(GenericSentence.parse(raw))


class TestParseVTG:
    """Tests for parse_vtg function."""

    def test_valid_vtg_autonomous(self):
        result = _vtg(VTG_SENTENCE)
        assert result.track_true_degrees == pytest.approx(54.7)
        assert result.track_magnetic_degrees == pytest.approx(34.4)
        assert result.speed_knots == pytest.approx(5.5)
        assert result.speed_kilometers_per_hour == pytest.approx(10.2)
        assert result.speed_meters_per_second == pytest.approx(10.2 / 3.6)
        assert result.mode is ModeIndicator.AUTONOMOUS
        assert result.valid is True

    def test_vtg_differential_mode(self):
        result = _vtg("$GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,D*3E")
        assert result.mode is ModeIndicator.DIFFERENTIAL and result.valid

    def test_vtg_not_valid_mode(self):
        result = _vtg("$GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,N*34")
        assert result.mode is ModeIndicator.NOT_VALID and not result.valid

    def test_vtg_stationary_empty_track(self):
        result = _vtg("$GNVTG,,T,,M,0.0,N,0.0,K,A*3D")
        assert result.track_true_degrees is None
        assert result.track_magnetic_degrees is None
        assert result.speed_knots == pytest.approx(0.0)
        assert result.speed_kilometers_per_hour == pytest.approx(0.0)
        assert result.speed_meters_per_second == pytest.approx(0.0)
        assert result.mode is ModeIndicator.AUTONOMOUS and result.valid

    def test_vtg_all_empty_fields(self):
        result = _vtg("$GNVTG,,T,,M,,N,,K,N*32")
        assert result.track_true_degrees is None
        assert result.speed_knots is None
        assert result.speed_kilometers_per_hour is None
        assert result.speed_meters_per_second is None
        assert result.mode is ModeIndicator.NOT_VALID and not result.valid

    def test_vtg_no_mode_indicator(self):
        result = _vtg("$GNVTG,054.7,T,034.4,M,005.5,N,010.2,K*56")
        assert result.mode is None and not result.valid

    def test_vtg_speed_mps_computed_correctly(self):
        result = _vtg("$GNVTG,000.0,T,000.0,M,000.0,N,036.0,K,A*38")
        assert result.speed_kilometers_per_hour == pytest.approx(36.0)
        assert result.speed_meters_per_second == pytest.approx(10.0)

    def test_vtg_speed_mps_none_when_kmh_empty(self):
        result = _vtg("$GNVTG,054.7,T,034.4,M,005.5,N,,K,A*16")
        assert result.speed_meters_per_second is None

    def test_vtg_with_crlf(self):
        assert _vtg(VTG_SENTENCE + "\r\n").speed_knots == pytest.approx(5.5)


class TestParseVTGErrors:
    """Tests for VTG decode failures."""

    def test_vtg_wrong_sentence_type(self):
        with pytest.raises(UnknownOrMismatchedSentenceTypeError):
            _vtg(GGA_SENTENCE)

    @pytest.mark.parametrize("field_count", range(8))
    def test_vtg_truncated(self, field_count):
        with pytest.raises(MissingFieldError) as excinfo:
            _vtg(truncated(VTG_SENTENCE, field_count))
        assert excinfo.value.index == field_count

    @pytest.mark.parametrize(
        "index, raw", [(0, "north"), (1, "X"), (3, "T"), (5, "K"), (7, "N"), (8, "Z")]
    )
    def test_vtg_invalid_fields(self, index, raw):
        fields = VTG_SENTENCE[1 : VTG_SENTENCE.index("*")].split(",")
        fields[index + 1] = raw

        with pytest.raises(InvalidFieldValueError) as excinfo:
            _vtg(with_checksum(",".join(fields)))

        assert excinfo.value.index == index
