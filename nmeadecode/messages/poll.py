"""Poll request decoders (GBQ, GLQ, GNQ, GPQ).

A poll request asks the receiver to output one standard message with the
talker ID named by the poll, e.g. ``$EIGNQ,RMC*24`` requests ``GNRMC``.
The single field is the message ID to be polled.
"""

from nmeadecode.fields import FieldReader, parse_string
from nmeadecode.messages.types import GBQMessage, GLQMessage, GNQMessage, GPQMessage


def parse_gbq(fields: FieldReader) -> GBQMessage:
    return GBQMessage(msg_id=parse_string(fields))


def parse_glq(fields: FieldReader) -> GLQMessage:
    return GLQMessage(msg_id=parse_string(fields))


def parse_gnq(fields: FieldReader) -> GNQMessage:
    return GNQMessage(msg_id=parse_string(fields))


def parse_gpq(fields: FieldReader) -> GPQMessage:
    return GPQMessage(msg_id=parse_string(fields))
