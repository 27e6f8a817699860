"""GSA sentence decoder.

GSA (GNSS DOP and Active Satellites) lists the satellites used in the
navigation solution and the resulting dilution of precision.

GSA Sentence Format:
    $GPGSA,A,3,23,29,07,08,09,18,26,,,,,,1.94,1.18,1.54,1*1A
           | | |                      |    |    |    |
           | | +----------------------+    |    |    +-- System ID
           | | 12 satellite IDs            |    +-- VDOP
           | |                             +-- HDOP (preceded by PDOP)
           | +-- Navigation mode (1=no fix, 2=2D, 3=3D)
           +-- Operation mode (M=manual, A=automatic)

The satellite block is always 12 fields long; unused slots are empty.
"""

from nmeadecode.fields import FieldReader, parse_float
from nmeadecode.identity import parse_satellite_id, parse_system_id
from nmeadecode.messages.types import GSAMessage
from nmeadecode.parameters import parse_navigation_mode, parse_operation_mode

SATELLITE_ID_COUNT = 12


def parse_gsa(fields: FieldReader) -> GSAMessage:
    op_mode = parse_operation_mode(fields)
    nav_mode = parse_navigation_mode(fields)
    svid = tuple(parse_satellite_id(fields) for _ in range(SATELLITE_ID_COUNT))

    return GSAMessage(
        op_mode=op_mode,
        nav_mode=nav_mode,
        svid=svid,
        pdop=parse_float(fields),
        hdop=parse_float(fields),
        vdop=parse_float(fields),
        system_id=parse_system_id(fields),
    )
