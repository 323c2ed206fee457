"""NMEA data types for parsed sentences.

This module defines frozen dataclasses for structured NMEA sentence data and
the enumerations used by their coded fields.

Design Decisions:
    1. Optional fields (float | None): NMEA fields may be empty, indicated by
       consecutive commas. Using None distinguishes "no data received" from
       "measured zero" - critical for stationary detection and data quality.
       No record ever substitutes a zero default for an empty field.

    2. Derived valid property: ``valid`` reports navigation validity,
       NOT parse validity. A successfully decoded sentence may still be
       navigationally invalid (e.g., no GPS fix). Parse failures are raised
       as exceptions, so a returned record always decoded completely.

    3. Records are independent: there is no shared base class and no record
       keeps a reference to the sentence it was decoded from.
"""

from dataclasses import dataclass
from datetime import date, time
from enum import Enum, IntEnum

_MICROSECONDS_PER_SECOND = 1_000_000


class FixQuality(IntEnum):
    """GGA fix quality indicator."""

    INVALID = 0
    GPS = 1  # SPS - Standard Positioning Service
    DGPS = 2
    PPS = 3
    RTK_FIXED = 4  # centimeter-level accuracy
    RTK_FLOAT = 5  # decimeter-level accuracy, converging
    ESTIMATED = 6  # dead reckoning
    MANUAL = 7
    SIMULATION = 8

    @classmethod
    def _missing_(cls, value):
        # Wire codes arrive as text ("1"); plain integers only otherwise.
        if isinstance(value, str) and value.isascii() and value.isdigit():
            return cls(int(value))
        return None


class RMCStatus(Enum):
    """Status field of RMC and GLL sentences."""

    ACTIVE = "A"
    VOID = "V"


class ModeIndicator(Enum):
    """FAA mode indicator (NMEA 2.3+)."""

    AUTONOMOUS = "A"
    DIFFERENTIAL = "D"
    ESTIMATED = "E"
    FLOAT_RTK = "F"
    MANUAL = "M"
    NOT_VALID = "N"
    PRECISE = "P"
    RTK = "R"
    SIMULATOR = "S"


class NavigationalStatus(Enum):
    """RMC navigational status (NMEA 4.1+)."""

    SAFE = "S"
    CAUTION = "C"
    UNSAFE = "U"
    NOT_VALID = "V"


@dataclass(frozen=True)
class UTCTime:
    """UTC time of day as transmitted (HHMMSS.ss).

    Attributes:
        hour: 0-23
        minute: 0-59
        second: 0 <= second < 60, including the fractional part
    """

    hour: int
    minute: int
    second: float

    def to_time(self) -> time:
        """Return the equivalent ``datetime.time`` (microsecond resolution)."""
        whole = int(self.second)
        microsecond = round((self.second - whole) * _MICROSECONDS_PER_SECOND)
        return time(self.hour, self.minute, whole, min(microsecond, 999_999))


@dataclass(frozen=True)
class GGAData:
    """Parsed GGA (Global Positioning System Fix Data) sentence.

    GGA provides the primary position fix information from GNSS receivers,
    including coordinates, altitude, and fix quality metrics.

    Attributes:
        utc_time: UTC time of the fix. None if field was empty.

        latitude_degrees: Latitude in decimal degrees, positive=North.
            Range: -90.0 to +90.0. None if no fix or field empty.
            Converted from NMEA's DDMM.MMMM format.

        longitude_degrees: Longitude in decimal degrees, positive=East.
            Range: -180.0 to +180.0. None if no fix or field empty.
            Converted from NMEA's DDDMM.MMMM format.

        fix_quality: GPS fix quality indicator. None if field was empty.

        num_satellites: Number of satellites used in the fix solution.
            None if field was empty.

        horizontal_dilution_of_precision: HDOP value indicating position
            accuracy. Lower is better (< 1 = ideal, 1-2 = excellent,
            2-5 = good, > 10 = poor). None if field was empty.

        altitude_meters: Altitude above mean sea level (MSL) in meters.
            None if no fix or field empty.

        geoid_separation_meters: Height of geoid (MSL) above WGS84 ellipsoid.
            ellipsoid_height = altitude_meters + geoid_separation_meters.
            None if field was empty.

        differential_age_seconds: Age of the differential corrections.
            None unless the receiver uses DGPS/RTK corrections.

        differential_station_id: Reference station ID of the corrections.
            None unless the receiver uses DGPS/RTK corrections.

    Example:
        >>> gga = parse_gga(GenericSentence.parse(
        ...     "$GPGGA,184901.50,3256.3952158,N,11701.6490440,W,1,16,0.8,260.760,M,-32.661,M,,*57"))
        >>> gga.fix_quality
        <FixQuality.GPS: 1>
        >>> gga.latitude_degrees
        32.93992026...
    """

    utc_time: UTCTime | None
    latitude_degrees: float | None
    longitude_degrees: float | None
    fix_quality: FixQuality | None
    num_satellites: int | None
    horizontal_dilution_of_precision: float | None
    altitude_meters: float | None
    geoid_separation_meters: float | None
    differential_age_seconds: float | None
    differential_station_id: int | None

    @property
    def valid(self) -> bool:
        """True only if the receiver reports a fix."""
        return self.fix_quality is not None and self.fix_quality is not FixQuality.INVALID


@dataclass(frozen=True)
class ZDAData:
    """Parsed ZDA (Time and Date) sentence.

    Attributes:
        utc_time: UTC time of day. None if field was empty.
        date: UTC calendar date. None if day, month and year were all empty.
        local_zone_hours: Local zone offset hours (-13..13). None if empty.
        local_zone_minutes: Local zone offset minutes (0..59). None if empty.
    """

    utc_time: UTCTime | None
    date: date | None
    local_zone_hours: int | None
    local_zone_minutes: int | None


@dataclass(frozen=True)
class RMCData:
    """Parsed RMC (Recommended Minimum Specific GNSS Data) sentence.

    Attributes:
        utc_time: UTC time of the fix. None if field was empty.
        status: ACTIVE (valid) or VOID (navigation receiver warning).
        latitude_degrees: Latitude in decimal degrees, positive=North.
        longitude_degrees: Longitude in decimal degrees, positive=East.
        speed_knots: Speed over ground in knots.
        course_degrees: Course over ground, degrees from true north.
        date: UTC calendar date (DDMMYY on the wire, 2000-2099).
        magnetic_variation_degrees: Magnetic variation, positive=East,
            negative=West.
        mode: FAA mode indicator. None on receivers older than NMEA 2.3.
        navigational_status: None on receivers older than NMEA 4.1.
    """

    utc_time: UTCTime | None
    status: RMCStatus | None
    latitude_degrees: float | None
    longitude_degrees: float | None
    speed_knots: float | None
    course_degrees: float | None
    date: date | None
    magnetic_variation_degrees: float | None
    mode: ModeIndicator | None
    navigational_status: NavigationalStatus | None

    @property
    def valid(self) -> bool:
        return self.status is RMCStatus.ACTIVE


@dataclass(frozen=True)
class VTGData:
    """Parsed VTG (Track Made Good and Ground Speed) sentence.

    VTG provides velocity information - ground speed and heading (track).

    Attributes:
        track_true_degrees: Heading/track relative to true north in degrees.
            None when stationary (GNSS cannot determine heading without movement).

        track_magnetic_degrees: Track relative to magnetic north in degrees.
            Many receivers leave this empty.

        speed_knots: Ground speed in nautical miles per hour (knots).
            1 knot = 1.852 km/h = 0.514 m/s.

        speed_kilometers_per_hour: Ground speed in km/h.

        speed_meters_per_second: Ground speed in m/s (SI units).
            Computed from km/h. None if km/h field was empty.

        mode: FAA mode indicator. None if field was missing (older receivers).

    Note:
        Speed values may be 0.0 (measured zero) or None (no data).
    """

    track_true_degrees: float | None
    track_magnetic_degrees: float | None
    speed_knots: float | None
    speed_kilometers_per_hour: float | None
    speed_meters_per_second: float | None
    mode: ModeIndicator | None

    @property
    def valid(self) -> bool:
        """True only if mode is present and not NOT_VALID."""
        return self.mode is not None and self.mode is not ModeIndicator.NOT_VALID


@dataclass(frozen=True)
class GLLData:
    """Parsed GLL (Geographic Position - Latitude/Longitude) sentence."""

    latitude_degrees: float | None
    longitude_degrees: float | None
    utc_time: UTCTime | None
    status: RMCStatus | None
    mode: ModeIndicator | None

    @property
    def valid(self) -> bool:
        return self.status is RMCStatus.ACTIVE and self.mode is not ModeIndicator.NOT_VALID
