"""GBS sentence decoder.

GBS (GNSS Satellite Fault Detection) carries the receiver autonomous
integrity monitoring (RAIM) results.

GBS Sentence Format:
    $GPGBS,235458.00,1.4,1.3,3.1,03,,-21.4,3.8,1,0*5A
           |         |   |   |   |  | |     |   | |
           |         |   |   |   |  | |     |   | +-- Signal ID
           |         |   |   |   |  | |     |   +-- System ID
           |         |   |   |   |  | |     +-- Standard deviation of bias
           |         |   |   |   |  | +-- Estimated bias (meters)
           |         |   |   |   |  +-- Probability of missed detection
           |         |   |   |   +-- Most likely failed satellite
           |         +---+---+-- Expected error in lat, lon, alt (meters)
           +-- UTC time
"""

from nmeadecode.fields import FieldReader, parse_float
from nmeadecode.identity import parse_satellite_id, parse_signal_id, parse_system_id
from nmeadecode.measures import parse_meter
from nmeadecode.messages.types import GBSMessage
from nmeadecode.timefields import parse_time


def parse_gbs(fields: FieldReader) -> GBSMessage:
    return GBSMessage(
        time=parse_time(fields),
        err_lat=parse_meter(fields),
        err_lon=parse_meter(fields),
        err_alt=parse_meter(fields),
        svid=parse_satellite_id(fields),
        prob=parse_float(fields),
        bias=parse_meter(fields),
        stddev=parse_meter(fields),
        system_id=parse_system_id(fields),
        signal_id=parse_signal_id(fields),
    )
