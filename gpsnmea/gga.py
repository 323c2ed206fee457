"""GGA sentence decoder.

GGA (Global Positioning System Fix Data) is one of the most important NMEA
sentences, providing position fix information including coordinates, altitude,
fix quality, and satellite/accuracy metrics.

GGA Sentence Format:
    $GPGGA,184901.50,3256.3952158,N,11701.6490440,W,1,16,0.8,260.760,M,-32.661,M,,*57
           |         |            | |             | | |  |   |       | |       | ||
           |         |            | |             | | |  |   |       | |       | |+-- [13] DGPS station ID
           |         |            | |             | | |  |   |       | |       | +-- [12] DGPS age (s)
           |         |            | |             | | |  |   |       | +-------+-- [10,11] Geoid separation, M
           |         |            | |             | | |  |   +-------+-- [8,9] Altitude above MSL, M
           |         |            | |             | | |  +-- [7] HDOP (horizontal dilution)
           |         |            | |             | | +-- [6] Number of satellites
           |         |            | |             | +-- [5] Fix quality (0-8)
           |         |            | +-------------+-- [3,4] Longitude + E/W
           |         +------------+-- [1,2] Latitude + N/S
           +-- [0] UTC time (HHMMSS.ss)

Fix Quality Values:
    0 = Invalid (no fix)
    1 = GPS fix (SPS - Standard Positioning Service)
    2 = DGPS fix (Differential GPS)
    3 = PPS fix
    4 = RTK Fixed (Real-Time Kinematic, cm-level accuracy)
    5 = RTK Float (RTK converging, dm-level accuracy)
    6 = Dead reckoning mode
    7 = Manual input mode
    8 = Simulation mode
"""

from functools import partial

from gpsnmea.fields import (
    parse_enum_field,
    parse_float_field,
    parse_latitude,
    parse_longitude,
    parse_time_field,
    parse_unit_field,
    parse_unsigned_int_field,
)
from gpsnmea.grammar import check_sentence, convert
from gpsnmea.sentence import GenericSentence
from gpsnmea.types import FixQuality, GGAData

SENTENCE_ID = "GGA"

# GGA sentences have 14 standard fields (indices 0-13)
# Some receivers add extra fields, which are ignored
_REQUIRED_FIELD_COUNT = 14

_parse_meters_unit = partial(parse_unit_field, unit="M")


def parse_gga(sentence: GenericSentence) -> GGAData:
    """Decode a GGA sentence into structured data.

    Maps field indices to GGAData attributes:
        fields[0]     -> utc_time
        fields[1,2]   -> latitude_degrees
        fields[3,4]   -> longitude_degrees
        fields[5]     -> fix_quality
        fields[6]     -> num_satellites
        fields[7]     -> horizontal_dilution_of_precision
        fields[8]     -> altitude_meters (fields[9] must be 'M')
        fields[10]    -> geoid_separation_meters (fields[11] must be 'M')
        fields[12]    -> differential_age_seconds
        fields[13]    -> differential_station_id

    Args:
        sentence: Tokenized, checksum-verified sentence

    Returns:
        GGAData; ``valid`` is False when the fix quality is INVALID or empty

    Raises:
        UnknownOrMismatchedSentenceTypeError: Not a GGA sentence
        MissingFieldError: Fewer than 14 fields
        InvalidFieldValueError: A field does not parse

    Example:
        >>> gga = parse_gga(GenericSentence.parse(
        ...     "$GPGGA,184901.50,3256.3952158,N,11701.6490440,W,1,16,0.8,260.760,M,-32.661,M,,*57"))
        >>> gga.num_satellites
        16
    """
    check_sentence(sentence, SENTENCE_ID, _REQUIRED_FIELD_COUNT)

    utc_time = convert(sentence, 0, parse_time_field)
    latitude_degrees = convert(sentence, 1, parse_latitude, width=2)
    longitude_degrees = convert(sentence, 3, parse_longitude, width=2)
    fix_quality = convert(sentence, 5, partial(parse_enum_field, enum_type=FixQuality))
    num_satellites = convert(sentence, 6, parse_unsigned_int_field)
    hdop = convert(sentence, 7, parse_float_field)
    altitude_meters = convert(sentence, 8, parse_float_field)
    convert(sentence, 9, _parse_meters_unit)
    geoid_separation_meters = convert(sentence, 10, parse_float_field)
    convert(sentence, 11, _parse_meters_unit)
    differential_age_seconds = convert(sentence, 12, parse_float_field)
    differential_station_id = convert(sentence, 13, parse_unsigned_int_field)

    return GGAData(
        utc_time=utc_time,
        latitude_degrees=latitude_degrees,
        longitude_degrees=longitude_degrees,
        fix_quality=fix_quality,
        num_satellites=num_satellites,
        horizontal_dilution_of_precision=hdop,
        altitude_meters=altitude_meters,
        geoid_separation_meters=geoid_separation_meters,
        differential_age_seconds=differential_age_seconds,
        differential_station_id=differential_station_id,
    )
