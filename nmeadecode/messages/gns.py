"""GNS sentence decoder.

GNS (GNSS fix data) is the multi-constellation successor of GGA. Its mode
field carries one indicator per constellation, e.g. "ANNN" for an
autonomous GPS fix with GLONASS, Galileo and BeiDou unused.

GNS Sentence Format:
    $GNGNS,103600.01,5114.51176,N,00012.29380,W,ANNN,07,1.18,111.5,45.6,,,V*00
           |         |          | |           | |    |  |    |     |    ||| |
           |         |          | |           | |    |  |    |     |    ||| +-- Nav status
           |         |          | |           | |    |  |    |     |    ||+-- DGPS station ID
           |         |          | |           | |    |  |    |     |    |+-- DGPS age
           |         |          | |           | |    |  |    |     +-- Geoid separation
           |         |          | |           | |    |  |    +-- Altitude above MSL
           |         |          | |           | |    |  +-- HDOP
           |         |          | |           | |    +-- Number of satellites
           |         |          | |           | +-- Mode per constellation
           |         |          | +-----------+-- Longitude + E/W
           |         +----------+-- Latitude + N/S
           +-- UTC time

Coordinates are the raw value divided by 100, unsigned, with the hemisphere
indicators kept as separate fields.
"""

from nmeadecode.coordinates import parse_degree
from nmeadecode.fields import FieldReader, parse_float, parse_int, parse_u8
from nmeadecode.measures import parse_meter, parse_second
from nmeadecode.messages.types import GNSMessage
from nmeadecode.parameters import (
    parse_east_west_indicator,
    parse_north_south_indicator,
    parse_pos_mode_vec,
    parse_status,
)
from nmeadecode.timefields import parse_time


def parse_gns(fields: FieldReader) -> GNSMessage:
    return GNSMessage(
        time=parse_time(fields),
        lat=parse_degree(fields),
        ns=parse_north_south_indicator(fields),
        lon=parse_degree(fields),
        ew=parse_east_west_indicator(fields),
        pos_mode=parse_pos_mode_vec(fields),
        num_sv=parse_u8(fields),
        hdop=parse_float(fields),
        alt=parse_meter(fields),
        sep=parse_meter(fields),
        diff_age=parse_second(fields),
        diff_station=parse_int(fields),
        nav_status=parse_status(fields),
    )
