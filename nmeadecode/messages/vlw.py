"""VLW sentence decoder.

VLW (Dual ground/water distance) reports distances travelled, in nautical
miles. Every value is followed by a unit field that must be "N".

VLW Sentence Format:
    $GPVLW,,N,,N,15.8,N,1.2,N*65
           | | | | |    | |   |
           | | | | |    | +---+-- Ground distance since reset
           | | | | +----+-- Total cumulative ground distance
           | | +-+-- Water distance since reset
           +-+-- Total cumulative water distance
"""

from nmeadecode.fields import FieldReader, parse_float
from nmeadecode.measures import parse_nautical_mile_unit
from nmeadecode.messages.types import VLWMessage


def _parse_distance(fields: FieldReader) -> float | None:
    distance = parse_float(fields)
    parse_nautical_mile_unit(fields)
    return distance


def parse_vlw(fields: FieldReader) -> VLWMessage:
    return VLWMessage(
        twd=_parse_distance(fields),
        wd=_parse_distance(fields),
        tgd=_parse_distance(fields),
        gd=_parse_distance(fields),
    )
