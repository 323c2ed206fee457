"""NMEA 0183 decoder for GGA, GLL, RMC, VTG and ZDA sentences."""

from gpsnmea.checksum import calculate_checksum, validate_checksum
from gpsnmea.decoders import (
    DECODERS,
    decode,
    from_nmea,
    parse,
    supported_sentence_ids,
)
from gpsnmea.errors import (
    ChecksumMismatchError,
    EmptySentenceError,
    FieldFormatError,
    InvalidChecksumDigitsError,
    InvalidFieldValueError,
    MalformedFramingError,
    MalformedHeaderError,
    MissingChecksumDelimiterError,
    MissingFieldError,
    MissingStartMarkerError,
    NMEAError,
    UnknownOrMismatchedSentenceTypeError,
)
from gpsnmea.gga import parse_gga
from gpsnmea.gll import parse_gll
from gpsnmea.rmc import parse_rmc
from gpsnmea.sentence import GenericSentence, parse_sentence
from gpsnmea.types import (
    FixQuality,
    GGAData,
    GLLData,
    ModeIndicator,
    NavigationalStatus,
    RMCData,
    RMCStatus,
    UTCTime,
    VTGData,
    ZDAData,
)
from gpsnmea.vtg import parse_vtg
from gpsnmea.zda import parse_zda

__all__ = [
    "DECODERS",
    "ChecksumMismatchError",
    "EmptySentenceError",
    "FieldFormatError",
    "FixQuality",
    "GGAData",
    "GLLData",
    "GenericSentence",
    "InvalidChecksumDigitsError",
    "InvalidFieldValueError",
    "MalformedFramingError",
    "MalformedHeaderError",
    "MissingChecksumDelimiterError",
    "MissingFieldError",
    "MissingStartMarkerError",
    "ModeIndicator",
    "NMEAError",
    "NavigationalStatus",
    "RMCData",
    "RMCStatus",
    "UTCTime",
    "UnknownOrMismatchedSentenceTypeError",
    "VTGData",
    "ZDAData",
    "calculate_checksum",
    "decode",
    "from_nmea",
    "parse",
    "parse_gga",
    "parse_gll",
    "parse_rmc",
    "parse_sentence",
    "parse_vtg",
    "parse_zda",
    "supported_sentence_ids",
    "validate_checksum",
]
