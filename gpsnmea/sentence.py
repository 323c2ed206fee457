"""Generic, checksum-verified NMEA sentence.

``GenericSentence.parse`` is the tokenizer: it checks framing and checksum and
splits the content into talker ID, sentence ID and raw fields. It does not
look at field contents; that is left to the sentence-type decoders.

Sentence Format:
    $GPZDA,184901.50,01,12,2017,00,00*60
     | |   |                         |
     | |   +-- fields[0..5]          +-- checksum
     | +-- sentence_id ("ZDA")
     +-- talker ("GP")
"""

import logging
from dataclasses import dataclass

from gpsnmea.checksum import calculate_checksum, verify_checksum
from gpsnmea.errors import (
    ChecksumMismatchError,
    MalformedHeaderError,
    MissingFieldError,
    NMEAError,
)
from gpsnmea.fields import HEADER_LENGTH, TALKER_CONSTELLATIONS, TALKER_LENGTH

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenericSentence:
    """One syntactically valid, checksum-verified NMEA sentence.

    Attributes:
        talker: Two-character source identifier (e.g. "GP", "GN").
        sentence_id: Sentence type code (e.g. "GGA", "RMC"). Never empty.
        fields: Raw field strings after the header, in wire order.
            An empty string means the field was omitted.
        checksum: The declared checksum, already verified.
    """

    talker: str
    sentence_id: str
    fields: tuple[str, ...]
    checksum: int

    def __post_init__(self) -> None:
        # Direct construction is held to the same rules as parse().
        if len(self.talker) != TALKER_LENGTH or not self.sentence_id:
            raise MalformedHeaderError(
                f"header {self.talker + self.sentence_id!r} needs a {TALKER_LENGTH}-character"
                " talker and a non-empty sentence ID"
            )
        object.__setattr__(self, "fields", tuple(self.fields))

        calculated = calculate_checksum(
            ",".join((self.talker + self.sentence_id, *self.fields))
        )
        if calculated != self.checksum:
            raise ChecksumMismatchError(self.checksum, calculated)

    @classmethod
    def parse(cls, raw: str) -> "GenericSentence":
        """Tokenize and verify a raw sentence.

        Surrounding whitespace (the receiver's CR LF) is stripped once; this
        is the only normalization performed.

        Raises:
            MalformedFramingError: Missing '$' or '*', bad checksum digits,
                or a header shorter than talker + sentence ID.
            ChecksumMismatchError: The declared checksum is wrong.
        """
        try:
            content, checksum = verify_checksum(raw.strip())

            header, *fields = content.split(",")
            if len(header) < HEADER_LENGTH:
                raise MalformedHeaderError(
                    f"header {header!r} is shorter than {HEADER_LENGTH} characters"
                )
        except NMEAError as err:
            logger.debug("Rejected sentence %r (%s): %s", raw, err.stage, err)
            raise

        return cls(
            talker=header[:TALKER_LENGTH],
            sentence_id=header[TALKER_LENGTH:],
            fields=tuple(fields),
            checksum=checksum,
        )

    @property
    def checksum_valid(self) -> bool:
        # __post_init__ rejects any instance whose checksum does not match.
        return True

    @property
    def constellation(self) -> str | None:
        """Satellite system named by the talker ID, None if not a GNSS talker."""
        return TALKER_CONSTELLATIONS.get(self.talker)

    def field(self, index: int) -> str:
        """Return the raw field at ``index``.

        Raises:
            MissingFieldError: The sentence has fewer than ``index + 1`` fields.
        """
        if not 0 <= index < len(self.fields):
            raise MissingFieldError(index, self.sentence_id)
        return self.fields[index]


def parse_sentence(raw: str) -> GenericSentence:
    """Shortcut for ``GenericSentence.parse``."""
    return GenericSentence.parse(raw)
