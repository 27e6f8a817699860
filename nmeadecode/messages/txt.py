"""TXT sentence decoder.

TXT (Text Transmission) carries human-readable receiver messages such as
the firmware banner or antenna status.

TXT Sentence Format:
    $GPTXT,01,01,02,u-blox ag - www.u-blox.com*50
           |  |  |  |
           |  |  |  +-- Text
           |  |  +-- Message type (00=error, 01=warning, 02=notice, 07=user)
           |  +-- Sentence number
           +-- Number of sentences
"""

from nmeadecode.fields import FieldReader, parse_string, parse_u8
from nmeadecode.messages.types import TXTMessage
from nmeadecode.parameters import parse_text_message_type


def parse_txt(fields: FieldReader) -> TXTMessage:
    return TXTMessage(
        num_msg=parse_u8(fields),
        msg_num=parse_u8(fields),
        msg_type=parse_text_message_type(fields),
        text=parse_string(fields),
    )
