"""GRS sentence decoder.

GRS (GNSS Range Residuals) reports the range residual of each satellite
used in the navigation solution.

GRS Sentence Format:
    $GPGRS,104148.00,1,2.6,2.2,-1.6,-1.1,-1.7,-1.5,5.8,1.7,,,,,1,1*4C
           |         | |                                   |    | |
           |         | +-----------------------------------+    | +-- Signal ID
           |         | 12 residuals (meters), empty if unused   +-- System ID
           |         +-- Computation method (0/1)
           +-- UTC time of associated position fix

The residual block is always 12 fields long.
"""

from nmeadecode.fields import FieldReader
from nmeadecode.identity import parse_signal_id, parse_system_id
from nmeadecode.measures import parse_residuals
from nmeadecode.messages.types import GRSMessage
from nmeadecode.parameters import parse_computation_method
from nmeadecode.timefields import parse_time


def parse_grs(fields: FieldReader) -> GRSMessage:
    return GRSMessage(
        time=parse_time(fields),
        mode=parse_computation_method(fields),
        residuals=parse_residuals(fields),
        system_id=parse_system_id(fields),
        signal_id=parse_signal_id(fields),
    )
