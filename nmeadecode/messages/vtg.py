"""VTG sentence decoder.

VTG (Track Made Good and Ground Speed) provides velocity information from GNSS.

VTG Sentence Format:
    $GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*3B
           |     | |     | |     | |     | |
           |     | |     | |     | |     | +-- Mode indicator (A/D/E/N/...)
           |     | |     | |     | +-----+-- Speed in km/h
           |     | |     | +-----+-- Speed in knots
           |     | +-----+-- Track (magnetic north, degrees)
           +-----+-- Track (true north, degrees)

Each value keeps the unit field that follows it on the wire.

Note: When stationary, the track angle may be empty (no heading when not moving).
"""

from nmeadecode.fields import FieldReader, parse_float
from nmeadecode.messages.types import VTGMessage
from nmeadecode.parameters import (
    parse_course_over_ground_unit,
    parse_pos_mode,
    parse_speed_over_ground_unit,
)


def parse_vtg(fields: FieldReader) -> VTGMessage:
    return VTGMessage(
        cogt=parse_float(fields),
        cogt_unit=parse_course_over_ground_unit(fields),
        cogm=parse_float(fields),
        cogm_unit=parse_course_over_ground_unit(fields),
        sogn=parse_float(fields),
        sogn_unit=parse_speed_over_ground_unit(fields),
        sogk=parse_float(fields),
        sogk_unit=parse_speed_over_ground_unit(fields),
        pos_mode=parse_pos_mode(fields),
    )
