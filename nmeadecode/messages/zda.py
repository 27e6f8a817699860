"""ZDA sentence decoder (time and date).

Example:
    $GPZDA,082710.00,16,09,2002,00,00*64
"""

from nmeadecode.fields import FieldReader, parse_int, parse_signed_int, parse_u8
from nmeadecode.messages.types import ZDAMessage
from nmeadecode.timefields import parse_time


def parse_zda(fields: FieldReader) -> ZDAMessage:
    return ZDAMessage(
        time=parse_time(fields),
        day=parse_u8(fields),
        month=parse_u8(fields),
        year=parse_int(fields),
        ltzh=parse_signed_int(fields),
        ltzn=parse_u8(fields),
    )
