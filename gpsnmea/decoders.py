"""Conversion from a GenericSentence to a typed record.

Each supported record type registers one pure decoder keyed by its sentence
ID. Callers either let the sentence ID pick the decoder (``decode``) or ask
for a specific record type (``from_nmea``); a sentence that does not match
always raises ``UnknownOrMismatchedSentenceTypeError``.
"""

import logging
from collections.abc import Callable
from types import MappingProxyType
from typing import Any, TypeVar

from gpsnmea import gga, gll, rmc, vtg, zda
from gpsnmea.errors import UnknownOrMismatchedSentenceTypeError
from gpsnmea.sentence import GenericSentence
from gpsnmea.types import GGAData, GLLData, RMCData, VTGData, ZDAData

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT")

Record = GGAData | GLLData | RMCData | VTGData | ZDAData

DECODERS: MappingProxyType[str, Callable[[GenericSentence], Any]] = MappingProxyType(
    {
        gga.SENTENCE_ID: gga.parse_gga,
        gll.SENTENCE_ID: gll.parse_gll,
        rmc.SENTENCE_ID: rmc.parse_rmc,
        vtg.SENTENCE_ID: vtg.parse_vtg,
        zda.SENTENCE_ID: zda.parse_zda,
    }
)

RECORD_TYPES: MappingProxyType[type, str] = MappingProxyType(
    {
        GGAData: gga.SENTENCE_ID,
        GLLData: gll.SENTENCE_ID,
        RMCData: rmc.SENTENCE_ID,
        VTGData: vtg.SENTENCE_ID,
        ZDAData: zda.SENTENCE_ID,
    }
)


def supported_sentence_ids() -> list[str]:
    return sorted(DECODERS)


def decode(sentence: GenericSentence) -> Record:
    """Decode ``sentence`` with the decoder registered for its sentence ID.

    Raises:
        UnknownOrMismatchedSentenceTypeError: No decoder for the sentence ID.
        MissingFieldError, InvalidFieldValueError: From the decoder.
    """
    try:
        decoder = DECODERS[sentence.sentence_id]
    except KeyError:
        logger.debug("No decoder for %s%s", sentence.talker, sentence.sentence_id)
        raise UnknownOrMismatchedSentenceTypeError(sentence.sentence_id) from None
    return decoder(sentence)


def from_nmea(sentence: GenericSentence, record_type: type[RecordT]) -> RecordT:
    """Decode ``sentence`` as ``record_type``.

    Example:
        >>> from_nmea(GenericSentence.parse("$GPZDA,184901.50,01,12,2017,00,00*60"), ZDAData)
        ZDAData(utc_time=UTCTime(hour=18, minute=49, second=1.5), ...)

    Raises:
        UnknownOrMismatchedSentenceTypeError: ``record_type`` is not a
            supported record, or the sentence is of another type.
    """
    try:
        sentence_id = RECORD_TYPES[record_type]
    except (KeyError, TypeError):
        raise UnknownOrMismatchedSentenceTypeError(
            sentence.sentence_id, getattr(record_type, "__name__", repr(record_type))
        ) from None
    return DECODERS[sentence_id](sentence)


def parse(raw: str) -> Record:
    """Tokenize ``raw`` and decode it according to its sentence ID.

    Example:
        >>> parse("$GPZDA,184901.50,01,12,2017,00,00*60").local_zone_hours
        0
    """
    return decode(GenericSentence.parse(raw))
