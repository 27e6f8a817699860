"""GLL sentence decoder.

GLL (Latitude and Longitude, with time of position fix and status) is the
shortest position sentence.

GLL Sentence Format:
    $GPGLL,4717.11364,N,00833.91565,E,092321.00,A,A*60
           |          | |           | |         | |
           |          | |           | |         | +-- Positioning mode
           |          | |           | |         +-- Status (A=valid, V=invalid)
           |          | |           | +-- UTC time (HHMMSS.ss)
           |          | +-----------+-- Longitude + E/W
           +----------+-- Latitude + N/S

Coordinates are DDMM.MMMM with the hemisphere folded into the sign.
"""

from nmeadecode.coordinates import parse_latitude, parse_longitude
from nmeadecode.fields import FieldReader
from nmeadecode.messages.types import GLLMessage
from nmeadecode.parameters import parse_pos_mode, parse_status
from nmeadecode.timefields import parse_time


def parse_gll(fields: FieldReader) -> GLLMessage:
    """Decode a GLL payload.

    Example:
        >>> parse_gll(FieldReader("4717.11364,N,00833.91565,E,092321.00,A,A"))
        GLLMessage(lat=Degree(value=47.285227333333324), ...)
    """
    return GLLMessage(
        lat=parse_latitude(fields),
        lon=parse_longitude(fields),
        time=parse_time(fields),
        status=parse_status(fields),
        pos_mode=parse_pos_mode(fields),
    )
