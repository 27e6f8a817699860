"""RMC sentence decoder.

RMC (Recommended Minimum data) carries time, date, position, speed and
course in one sentence.

RMC Sentence Format:
    $GPRMC,083559.00,A,4717.11437,N,00833.91522,E,0.004,77.52,091202,,,A,V*2D
           |         | |          | |           | |     |     |      ||| |
           |         | |          | |           | |     |     |      ||| +-- Nav status
           |         | |          | |           | |     |     |      ||+-- Mode indicator
           |         | |          | |           | |     |     |      |+-- Variation E/W
           |         | |          | |           | |     |     |      +-- Magnetic variation
           |         | |          | |           | |     |     +-- Date (DDMMYY)
           |         | |          | |           | |     +-- Course over ground (degrees)
           |         | |          | |           | +-- Speed over ground (knots)
           |         | |          | +-----------+-- Longitude + E/W
           |         | +----------+-- Latitude + N/S
           |         +-- Status (A=valid, V=invalid)
           +-- UTC time (HHMMSS.ss)

Receivers disagree on how RMC coordinates should be read. ``parse_rmc``,
the decoder registered for "RMC", divides the coordinate by 100 and keeps
the hemisphere indicators as separate fields. ``parse_rmc_signed`` reads
them as DDMM.MMMM with the hemisphere folded into the sign, like GLL.
"""

from nmeadecode.coordinates import (
    parse_degree,
    parse_latitude,
    parse_longitude,
    parse_raw_degree,
)
from nmeadecode.fields import FieldReader
from nmeadecode.measures import parse_knot
from nmeadecode.messages.types import RMCMessage, SignedRMCMessage
from nmeadecode.parameters import (
    parse_east_west_indicator,
    parse_navigational_status,
    parse_north_south_indicator,
    parse_pos_mode,
    parse_status,
)
from nmeadecode.timefields import parse_date, parse_time


def parse_rmc(fields: FieldReader) -> RMCMessage:
    """Decode an RMC payload with unsigned, scaled coordinates.

    Example:
        "083559.00,A,4717.11437,N,..." -> lat=Degree(47.1711437), ns=NORTH
    """
    return RMCMessage(
        time=parse_time(fields),
        status=parse_status(fields),
        lat=parse_degree(fields),
        ns=parse_north_south_indicator(fields),
        lon=parse_degree(fields),
        ew=parse_east_west_indicator(fields),
        spd=parse_knot(fields),
        cog=parse_raw_degree(fields),
        date=parse_date(fields),
        mv=parse_degree(fields),
        mv_ew=parse_east_west_indicator(fields),
        pos_mode=parse_pos_mode(fields),
        nav_status=parse_navigational_status(fields),
    )


def parse_rmc_signed(fields: FieldReader) -> SignedRMCMessage:
    """Decode an RMC payload with signed decimal-degree coordinates.

    Example:
        "083559.00,A,4717.11437,S,..." -> lat=Degree(-47.2852395)
    """
    return SignedRMCMessage(
        time=parse_time(fields),
        status=parse_status(fields),
        lat=parse_latitude(fields),
        lon=parse_longitude(fields),
        spd=parse_knot(fields),
        cog=parse_raw_degree(fields),
        date=parse_date(fields),
        mv=parse_degree(fields),
        mv_ew=parse_east_west_indicator(fields),
        pos_mode=parse_pos_mode(fields),
        nav_status=parse_navigational_status(fields),
    )
