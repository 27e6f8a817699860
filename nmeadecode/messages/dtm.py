"""DTM sentence decoder.

DTM (Datum Reference) names the local datum in use and its offset from
the reference datum.

DTM Sentence Format:
    $GPDTM,W84,,0.0,N,0.0,E,0.0,W84*6F
           |   | |   | |   | |   |
           |   | |   | |   | |   +-- Reference datum
           |   | |   | |   | +-- Altitude offset (meters)
           |   | |   | +---+-- Longitude offset (minutes) + E/W
           |   | +---+-- Latitude offset (minutes) + N/S
           |   +-- Sub-datum
           +-- Local datum
"""

from nmeadecode.coordinates import parse_minute
from nmeadecode.fields import FieldReader, parse_string
from nmeadecode.measures import parse_meter
from nmeadecode.messages.types import DTMMessage
from nmeadecode.parameters import (
    parse_east_west_indicator,
    parse_north_south_indicator,
)


def parse_dtm(fields: FieldReader) -> DTMMessage:
    return DTMMessage(
        datum=parse_string(fields),
        sub_datum=parse_string(fields),
        lat=parse_minute(fields),
        ns=parse_north_south_indicator(fields),
        lon=parse_minute(fields),
        ew=parse_east_west_indicator(fields),
        alt=parse_meter(fields),
        ref_datum=parse_string(fields),
    )
