"""Message records for decoded NMEA sentences.

This module defines one frozen dataclass per supported message ID.

Design Decisions:
    1. Optional fields (X | None): NMEA fields may be empty, indicated by
       consecutive commas. Using None distinguishes "no data received" from
       "measured zero" - critical for stationary detection and data quality.

    2. Unit-tagged values: distances are ``Meter``, speeds ``Knot``, angles
       ``Degree`` or ``Minute``, durations ``Second``. Fields whose unit is
       carried alongside them on the wire (VTG, VLW) stay plain floats.

    3. Faithful layouts: each record mirrors its sentence's field order. RMC
       and GNS keep the unsigned coordinate and the hemisphere indicator as
       separate fields, GLL and GGA fold the sign into the coordinate.
"""

import datetime
from dataclasses import dataclass

from nmeadecode.parameters import (
    ComputationMethod,
    CourseOverGroundUnit,
    EastWest,
    Fix,
    FixQuality,
    NavigationalStatus,
    NavigationMode,
    NorthSouth,
    OperationMode,
    SpeedOverGroundUnit,
    Status,
    TextMessageType,
)
from nmeadecode.units import Degree, Knot, Meter, Minute, Second


@dataclass(frozen=True)
class DTMMessage:
    """Datum reference.

    Attributes:
        datum: Local datum code ("W84" for WGS84, "P90" for PZ-90, "999"
            for user defined).
        sub_datum: Local datum subdivision code.
        lat: Offset in latitude, in minutes.
        ns: North/South indicator for ``lat``.
        lon: Offset in longitude, in minutes.
        ew: East/West indicator for ``lon``.
        alt: Offset in altitude.
        ref_datum: Reference datum code, always "W84".
    """

    datum: str | None
    sub_datum: str | None
    lat: Minute | None
    ns: NorthSouth | None
    lon: Minute | None
    ew: EastWest | None
    alt: Meter | None
    ref_datum: str | None


@dataclass(frozen=True)
class GBQMessage:
    """Poll a standard message if the current talker ID is GB."""

    msg_id: str | None


@dataclass(frozen=True)
class GLQMessage:
    """Poll a standard message if the current talker ID is GL."""

    msg_id: str | None


@dataclass(frozen=True)
class GNQMessage:
    """Poll a standard message if the current talker ID is GN."""

    msg_id: str | None


@dataclass(frozen=True)
class GPQMessage:
    """Poll a standard message if the current talker ID is GP."""

    msg_id: str | None


@dataclass(frozen=True)
class GBSMessage:
    """GNSS satellite fault detection.

    Attributes:
        time: UTC time the RAIM solution refers to.
        err_lat: Expected error in latitude.
        err_lon: Expected error in longitude.
        err_alt: Expected error in altitude.
        svid: ID of the most likely failed satellite.
        prob: Probability of missed detection for that satellite.
        bias: Estimated bias of the most likely failed satellite.
        stddev: Standard deviation of the estimated bias.
        system_id: NMEA defined GNSS system ID.
        signal_id: NMEA defined GNSS signal ID.
    """

    time: datetime.time | None
    err_lat: Meter | None
    err_lon: Meter | None
    err_alt: Meter | None
    svid: int | None
    prob: float | None
    bias: Meter | None
    stddev: Meter | None
    system_id: int | None
    signal_id: int | None


@dataclass(frozen=True)
class GGAMessage:
    """Global positioning system fix data.

    Attributes:
        time: UTC time.
        lat: Latitude in decimal degrees, positive=North.
        lon: Longitude in decimal degrees, positive=East.
        quality: Fix quality indicator.
        num_sv: Number of satellites used in the fix solution.
        hdop: Horizontal dilution of precision. Lower is better
            (< 1 = ideal, 1-2 = excellent, 2-5 = good, > 10 = poor).
        alt: Altitude above mean sea level.
        sep: Geoid separation: height of the geoid (MSL) above the WGS84
            ellipsoid, so ellipsoid height = alt + sep.
        diff_age: Age of differential corrections.
        diff_station: ID of the station providing differential corrections.
    """

    time: datetime.time | None
    lat: Degree | None
    lon: Degree | None
    quality: FixQuality | None
    num_sv: int | None
    hdop: float | None
    alt: Meter | None
    sep: Meter | None
    diff_age: Second | None
    diff_station: int | None


@dataclass(frozen=True)
class GLLMessage:
    """Latitude and longitude, with time of position fix and status."""

    lat: Degree | None
    lon: Degree | None
    time: datetime.time | None
    status: Status | None
    pos_mode: Fix | None


@dataclass(frozen=True)
class GNSMessage:
    """GNSS fix data.

    Attributes:
        time: UTC time.
        lat: Unsigned latitude, see ``ns``.
        ns: North/South indicator.
        lon: Unsigned longitude, see ``ew``.
        ew: East/West indicator.
        pos_mode: Positioning mode, one per constellation
            (GPS, GLONASS, Galileo, BeiDou).
        num_sv: Number of satellites used.
        hdop: Horizontal dilution of precision.
        alt: Altitude above mean sea level.
        sep: Geoid separation.
        diff_age: Age of differential corrections.
        diff_station: ID of station providing differential corrections.
        nav_status: Navigational status indicator.
    """

    time: datetime.time | None
    lat: Degree | None
    ns: NorthSouth | None
    lon: Degree | None
    ew: EastWest | None
    pos_mode: tuple[Fix, ...] | None
    num_sv: int | None
    hdop: float | None
    alt: Meter | None
    sep: Meter | None
    diff_age: Second | None
    diff_station: int | None
    nav_status: Status | None


@dataclass(frozen=True)
class GRSMessage:
    """GNSS range residuals.

    ``residuals`` always holds 12 slots, one per satellite in the order of
    the matching GSA sentence; unused slots are None.
    """

    time: datetime.time | None
    mode: ComputationMethod | None
    residuals: tuple[Meter | None, ...]
    system_id: int | None
    signal_id: int | None


@dataclass(frozen=True)
class GSAMessage:
    """GNSS DOP and active satellites.

    ``svid`` always holds 12 slots; unused slots are None.
    """

    op_mode: OperationMode | None
    nav_mode: NavigationMode | None
    svid: tuple[int | None, ...]
    pdop: float | None
    hdop: float | None
    vdop: float | None
    system_id: int | None


@dataclass(frozen=True)
class GSTMessage:
    """GNSS pseudorange error statistics.

    Attributes:
        time: UTC time of associated position fix.
        range_rms: RMS value of the standard deviation of the ranges.
        std_major: Standard deviation of semi-major axis.
        std_minor: Standard deviation of semi-minor axis.
        orient: Orientation of semi-major axis.
        std_lat: Standard deviation of latitude error.
        std_lon: Standard deviation of longitude error.
        std_alt: Standard deviation of altitude error.
    """

    time: datetime.time | None
    range_rms: Meter | None
    std_major: Meter | None
    std_minor: Meter | None
    orient: Degree | None
    std_lat: Meter | None
    std_lon: Meter | None
    std_alt: Meter | None


@dataclass(frozen=True)
class SatelliteInView:
    """One satellite block of a GSV sentence.

    Attributes:
        svid: Satellite ID.
        elv: Elevation in degrees (0-90).
        az: Azimuth in degrees (0-359).
        cno: Signal strength (C/N0, 0-99 dBHz), None when not tracking.
    """

    svid: int | None
    elv: int | None
    az: int | None
    cno: int | None


@dataclass(frozen=True)
class GSVMessage:
    """GNSS satellites in view.

    A receiver splits the satellites in view over ``num_msg`` sentences of
    up to 4 satellites each.
    """

    num_msg: int | None
    msg_num: int | None
    num_sv: int | None
    satellites: tuple[SatelliteInView, ...]
    signal_id: int | None


@dataclass(frozen=True)
class RMCMessage:
    """Recommended minimum data.

    Coordinates use the compact layout: the raw value divided by 100,
    unsigned, with the hemisphere in ``ns`` and ``ew``.

    Attributes:
        time: UTC time.
        status: Data validity status.
        lat: Latitude.
        ns: North/South indicator.
        lon: Longitude.
        ew: East/West indicator.
        spd: Speed over ground.
        cog: Course over ground.
        date: Date.
        mv: Magnetic variation value.
        mv_ew: Magnetic variation E/W indicator.
        pos_mode: Mode indicator.
        nav_status: Navigational status indicator.
    """

    time: datetime.time | None
    status: Status | None
    lat: Degree | None
    ns: NorthSouth | None
    lon: Degree | None
    ew: EastWest | None
    spd: Knot | None
    cog: Degree | None
    date: datetime.date | None
    mv: Degree | None
    mv_ew: EastWest | None
    pos_mode: Fix | None
    nav_status: NavigationalStatus | None


@dataclass(frozen=True)
class SignedRMCMessage:
    """Recommended minimum data, with the hemisphere folded into the sign.

    Same sentence as :class:`RMCMessage`, decoded the way GLL decodes
    coordinates: DDMM.MMMM converted to decimal degrees, negative for
    South and West. Produced only by ``parse_rmc_signed``.
    """

    time: datetime.time | None
    status: Status | None
    lat: Degree | None
    lon: Degree | None
    spd: Knot | None
    cog: Degree | None
    date: datetime.date | None
    mv: Degree | None
    mv_ew: EastWest | None
    pos_mode: Fix | None
    nav_status: NavigationalStatus | None


@dataclass(frozen=True)
class TXTMessage:
    """Text transmission."""

    num_msg: int | None
    msg_num: int | None
    msg_type: TextMessageType | None
    text: str | None


@dataclass(frozen=True)
class VLWMessage:
    """Dual ground/water distance, in nautical miles.

    Attributes:
        twd: Total cumulative water distance.
        wd: Water distance since reset.
        tgd: Total cumulative ground distance.
        gd: Ground distance since reset.
    """

    twd: float | None
    wd: float | None
    tgd: float | None
    gd: float | None


@dataclass(frozen=True)
class VTGMessage:
    """Course over ground and ground speed.

    Attributes:
        cogt: Course over ground (true north), in degrees.
            None when stationary (GNSS cannot determine heading without movement).
        cogt_unit: Unit of ``cogt``, always degrees true.
        cogm: Course over ground (magnetic north), in degrees.
        cogm_unit: Unit of ``cogm``, always degrees magnetic.
        sogn: Speed over ground in knots.
        sogn_unit: Unit of ``sogn``.
        sogk: Speed over ground in km/h.
        sogk_unit: Unit of ``sogk``.
        pos_mode: Mode indicator.
    """

    cogt: float | None
    cogt_unit: CourseOverGroundUnit | None
    cogm: float | None
    cogm_unit: CourseOverGroundUnit | None
    sogn: float | None
    sogn_unit: SpeedOverGroundUnit | None
    sogk: float | None
    sogk_unit: SpeedOverGroundUnit | None
    pos_mode: Fix | None


@dataclass(frozen=True)
class ZDAMessage:
    """Time and date.

    Attributes:
        time: UTC time.
        day: UTC day (1-31).
        month: UTC month (1-12).
        year: UTC year, four digits.
        ltzh: Local time zone hours (-13 to 13).
        ltzn: Local time zone minutes (0-59).
    """

    time: datetime.time | None
    day: int | None
    month: int | None
    year: int | None
    ltzh: int | None
    ltzn: int | None
