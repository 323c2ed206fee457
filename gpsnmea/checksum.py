"""NMEA framing and checksum validation.

NMEA 0183 sentences use a simple XOR checksum for data integrity verification.
The checksum is calculated over all characters between '$' and '*' (exclusive),
then represented as a two-digit hexadecimal number after the '*'.

Example sentence structure:
    $GPGGA,184901.50,3256.3952158,N,11701.6490440,W,1,16,0.8,260.760,M,-32.661,M,,*57
    ^                         checksum content                                      ^^
    start                                                            checksum (0x57 = 87)
"""

import logging
import string

from gpsnmea.errors import (
    ChecksumMismatchError,
    EmptySentenceError,
    InvalidChecksumDigitsError,
    MissingChecksumDelimiterError,
    MissingStartMarkerError,
    NMEAError,
)

logger = logging.getLogger(__name__)

_START_MARKER = "$"
_CHECKSUM_DELIMITER = "*"
_CHECKSUM_LENGTH = 2
_HEX_DIGITS = frozenset(string.hexdigits)


def _extract_checksum_parts(sentence: str) -> tuple[str, str]:
    """Extract the payload content and declared checksum from an NMEA sentence.

    NMEA sentences follow the format: $<content>*<checksum>
    This function separates these components for validation.

    Args:
        sentence: Raw NMEA sentence string (e.g., "$GPZDA,...*60"), already
            stripped of surrounding whitespace.

    Returns:
        A tuple of (content, checksum_hex).

    Raises:
        EmptySentenceError: The sentence is empty.
        MissingStartMarkerError: The sentence does not begin with '$'.
        MissingChecksumDelimiterError: There is no '*' after the '$'.
        InvalidChecksumDigitsError: The text after '*' is not exactly two
            hexadecimal digits (truncated, extended or non-hex checksum).

    Example:
        >>> _extract_checksum_parts("$GPZDA,184901.50*7F")
        ('GPZDA,184901.50', '7F')
    """
    if not sentence:
        raise EmptySentenceError("empty sentence")

    if not sentence.startswith(_START_MARKER):
        raise MissingStartMarkerError(
            f"sentence must begin with {_START_MARKER!r}: {sentence[:16]!r}"
        )

    end = sentence.find(_CHECKSUM_DELIMITER, 1)
    if end < 0:
        raise MissingChecksumDelimiterError(
            f"no {_CHECKSUM_DELIMITER!r} checksum delimiter in sentence"
        )

    content = sentence[1:end]
    provided = sentence[end + 1 :]

    if len(provided) != _CHECKSUM_LENGTH or not _HEX_DIGITS.issuperset(provided):
        raise InvalidChecksumDigitsError(
            f"checksum must be two hexadecimal digits, got {provided!r}"
        )

    return content, provided


def calculate_checksum(content: str) -> int:
    """Calculate the XOR checksum of a content string.

    The NMEA checksum algorithm XORs the byte value of each character
    in the content. This is a simple error-detection mechanism that can
    detect single-bit errors and some multi-bit errors.

    Args:
        content: The string between '$' and '*' (exclusive)

    Returns:
        Integer checksum value (0-255)

    Example:
        For content "GPZDA", the calculation is:
        ord('G') ^ ord('P') ^ ord('Z') ^ ord('D') ^ ord('A')
    """
    result = 0
    for byte in content.encode("utf-8"):
        result ^= byte
    return result


def verify_checksum(sentence: str) -> tuple[str, int]:
    """Check framing and checksum of a stripped sentence.

    Returns:
        ``(content, checksum)``: the text between '$' and '*' and the
        verified checksum value.

    Raises:
        MalformedFramingError: See ``_extract_checksum_parts``.
        ChecksumMismatchError: The declared checksum differs from the
            calculated one.
    """
    content, provided = _extract_checksum_parts(sentence)

    expected = int(provided, 16)
    calculated = calculate_checksum(content)
    if calculated != expected:
        raise ChecksumMismatchError(expected, calculated)

    return content, expected


def validate_checksum(sentence: str) -> bool:
    """Validate the checksum of an NMEA sentence.

    Performs end-to-end validation by:
    1. Extracting the content between '$' and '*'
    2. Computing the XOR of all content bytes
    3. Comparing against the provided 2-digit hex checksum

    Args:
        sentence: Complete NMEA sentence including '$', '*', and checksum.
                  May include trailing whitespace/newlines (will be stripped).

    Returns:
        True if the checksum is valid, False if:
        - Sentence is malformed (missing delimiters)
        - Checksum is truncated or non-hexadecimal
        - Calculated checksum doesn't match provided checksum

    Example:
        >>> validate_checksum("$GPZDA,184901.50,01,12,2017,00,00*60")
        True
        >>> validate_checksum("$GPZDA,184901.50,01,12,2017,00,00*FF")
        False
    """
    try:
        verify_checksum(sentence.strip())
    except NMEAError as err:
        logger.debug("Checksum validation failed (%s): %s", err.stage, err)
        return False
    return True
