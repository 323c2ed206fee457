"""Tests for NMEA checksum validation."""

import pytest

from gpsnmea import (
    ChecksumMismatchError,
    GenericSentence,
    calculate_checksum,
    validate_checksum,
)
from tests.conftest import ALL_SENTENCES, GGA_SENTENCE, VTG_SENTENCE


class TestValidateChecksum:
    """Tests for validate_checksum function."""

    def test_valid_gga_checksum(self):
        assert validate_checksum(GGA_SENTENCE) is True

    def test_valid_checksum_with_newline(self):
        assert validate_checksum(GGA_SENTENCE + "\r\n") is True

    def test_invalid_checksum(self):
        sentence = GGA_SENTENCE[:-2] + "FF"
        assert validate_checksum(sentence) is False

    def test_missing_dollar_sign(self):
        assert validate_checksum(GGA_SENTENCE[1:]) is False

    def test_missing_asterisk(self):
        sentence = GGA_SENTENCE.replace("*", "")
        assert validate_checksum(sentence) is False

    def test_empty_string(self):
        assert validate_checksum("") is False

    def test_truncated_checksum(self):
        assert validate_checksum(GGA_SENTENCE[:-1]) is False

    def test_valid_vtg_checksum(self):
        assert validate_checksum(VTG_SENTENCE) is True

    def test_lowercase_hex_digits(self):
        assert validate_checksum(VTG_SENTENCE[:-2] + "3b") is True


class TestCalculateChecksum:
    """Tests for calculate_checksum function."""

    def test_zda_content(self):
        assert calculate_checksum("GPZDA,184901.50,01,12,2017,00,00") == 0x60

    def test_empty_content(self):
        assert calculate_checksum("") == 0

    def test_single_character(self):
        assert calculate_checksum("A") == ord("A")

    @pytest.mark.parametrize("sentence", sorted(ALL_SENTENCES.values()))
    def test_matches_declared_checksum(self, sentence):
        content, declared = sentence[1:].split("*")
        assert calculate_checksum(content) == int(declared, 16)


class TestSingleCharacterCorruption:
    """Flipping any character between '$' and '*' must break the checksum."""

    @pytest.mark.parametrize("position", range(1, GGA_SENTENCE.index("*")))
    def test_flipped_character_is_detected(self, position):
        # XOR with 1 keeps the character printable and never produces '$' or '*'
        flipped = chr(ord(GGA_SENTENCE[position]) ^ 1)
        corrupted = GGA_SENTENCE[:position] + flipped + GGA_SENTENCE[position + 1 :]

        with pytest.raises(ChecksumMismatchError) as excinfo:
            GenericSentence.parse(corrupted)

        assert excinfo.value.expected == 0x57
        assert excinfo.value.calculated == 0x57 ^ 1
