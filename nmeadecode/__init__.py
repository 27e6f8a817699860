"""NMEA 0183 sentence decoder.

Decodes one complete sentence into a typed, unit-tagged record::

    from nmeadecode import parse_sentence

    sentence = parse_sentence("$GPGLL,4717.11364,N,00833.91565,E,092321.00,A,A*60\r\n")
    sentence.message.lat  # Degree(value=47.285227333333324)
"""

from nmeadecode.checksum import calculate_checksum
from nmeadecode.errors import (
    ChecksumMismatch,
    DecodeError,
    EmptyInput,
    IncompleteInput,
    InvalidEnvelope,
    MalformedChecksum,
    MalformedField,
    TrailingData,
    UnrecognizedTalkerLength,
    UnsupportedMessageType,
)
from nmeadecode.identity import MESSAGE_TYPES, Talker, UnknownTalker
from nmeadecode.parameters import (
    ComputationMethod,
    CourseOverGroundUnit,
    EastWest,
    Fix,
    FixQuality,
    NavigationalStatus,
    NavigationMode,
    NorthSouth,
    OperationMode,
    SentenceType,
    SpeedOverGroundUnit,
    Status,
    TextMessageType,
)
from nmeadecode.sentence import (
    DECODERS,
    Message,
    Sentence,
    decode_payload,
    parse_sentence,
    try_parse_sentence,
)
from nmeadecode.units import Degree, Knot, Meter, Minute, Second

__all__ = [
    "DECODERS",
    "MESSAGE_TYPES",
    "ChecksumMismatch",
    "ComputationMethod",
    "CourseOverGroundUnit",
    "DecodeError",
    "Degree",
    "EastWest",
    "EmptyInput",
    "Fix",
    "FixQuality",
    "IncompleteInput",
    "InvalidEnvelope",
    "Knot",
    "MalformedChecksum",
    "MalformedField",
    "Message",
    "Meter",
    "Minute",
    "NavigationMode",
    "NavigationalStatus",
    "NorthSouth",
    "OperationMode",
    "Second",
    "Sentence",
    "SentenceType",
    "SpeedOverGroundUnit",
    "Status",
    "Talker",
    "TextMessageType",
    "TrailingData",
    "UnknownTalker",
    "UnrecognizedTalkerLength",
    "UnsupportedMessageType",
    "calculate_checksum",
    "decode_payload",
    "parse_sentence",
    "try_parse_sentence",
]
