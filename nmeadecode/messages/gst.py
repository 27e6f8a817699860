"""GST sentence decoder (GNSS pseudorange error statistics)."""

from nmeadecode.coordinates import parse_degree
from nmeadecode.fields import FieldReader
from nmeadecode.measures import parse_meter
from nmeadecode.messages.types import GSTMessage
from nmeadecode.timefields import parse_time


def parse_gst(fields: FieldReader) -> GSTMessage:
    """Decode a GST payload.

    Example:
        "082356.00,1.8,,,,1.7,1.3,2.2" -> range_rms=Meter(1.8), orient=None
    """
    return GSTMessage(
        time=parse_time(fields),
        range_rms=parse_meter(fields),
        std_major=parse_meter(fields),
        std_minor=parse_meter(fields),
        orient=parse_degree(fields),
        std_lat=parse_meter(fields),
        std_lon=parse_meter(fields),
        std_alt=parse_meter(fields),
    )
