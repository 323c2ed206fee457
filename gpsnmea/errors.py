"""Exceptions raised while tokenizing and decoding NMEA sentences.

Every failure is reported through one closed hierarchy rooted at
``NMEAError``. Each error carries a ``stage`` attribute naming the pipeline
stage that rejected the input:

    framing   the sentence text is not ``$<content>*<HH>``
    checksum  the framing is fine but the XOR checksum disagrees
    decode    a sentence-type decoder rejected the fields

``NMEAError`` derives from ``ValueError`` so callers that only care about
"bad input" can keep catching ``ValueError``.
"""


class NMEAError(ValueError):
    """Base class for every error raised by gpsnmea."""

    stage = "decode"


class MalformedFramingError(NMEAError):
    """The sentence is missing its delimiters or has a malformed header."""

    stage = "framing"


class EmptySentenceError(MalformedFramingError):
    pass


class MissingStartMarkerError(MalformedFramingError):
    pass


class MissingChecksumDelimiterError(MalformedFramingError):
    pass


class InvalidChecksumDigitsError(MalformedFramingError):
    pass


class MalformedHeaderError(MalformedFramingError):
    pass


class ChecksumMismatchError(NMEAError):
    """Calculated XOR checksum differs from the one declared after '*'.

    Attributes:
        expected: Checksum declared in the sentence.
        calculated: Checksum computed over the sentence content.
    """

    stage = "checksum"

    def __init__(self, expected: int, calculated: int) -> None:
        self.expected = expected
        self.calculated = calculated
        super().__init__(
            f"checksum mismatch: declared {expected:02X}, calculated {calculated:02X}"
        )


class UnknownOrMismatchedSentenceTypeError(NMEAError):
    """The sentence id is unsupported or is not the one a decoder expects."""

    def __init__(self, sentence_id: str, expected: str | None = None) -> None:
        self.sentence_id = sentence_id
        self.expected = expected
        if expected is None:
            message = f"unsupported sentence type {sentence_id!r}"
        else:
            message = f"expected {expected!r} sentence, got {sentence_id!r}"
        super().__init__(message)


class MissingFieldError(NMEAError):
    """Fewer fields are present than the sentence grammar requires.

    Attributes:
        index: Position (in ``GenericSentence.fields``) of the first
            required field that is absent.
    """

    def __init__(self, index: int, sentence_id: str | None = None) -> None:
        self.index = index
        self.sentence_id = sentence_id
        where = f" in {sentence_id}" if sentence_id else ""
        super().__init__(f"missing required field {index}{where}")


class InvalidFieldValueError(NMEAError):
    """A field is present but its text does not parse as the expected type.

    The originating ``FieldFormatError`` is chained as ``__cause__``.
    """

    def __init__(
        self,
        index: int,
        raw: str,
        reason: str,
        sentence_id: str | None = None,
    ) -> None:
        self.index = index
        self.raw = raw
        self.reason = reason
        self.sentence_id = sentence_id
        where = f" of {sentence_id}" if sentence_id else ""
        super().__init__(f"invalid value {raw!r} in field {index}{where}: {reason}")


class FieldFormatError(ValueError):
    """Raised by the field converters; decoders attach the field index.

    Attributes:
        reason: Human readable description of what is wrong.
        position: Offset of the offending field for converters that read
            more than one field (0 = value, 1 = hemisphere/direction).
    """

    def __init__(self, reason: str, position: int = 0) -> None:
        self.reason = reason
        self.position = position
        super().__init__(reason)
