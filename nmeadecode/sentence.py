"""Sentence framing and message dispatch.

This is the main entry point for decoding. :func:`parse_sentence` performs:
1. Envelope check ('$' parametric or '!' encapsulation)
2. Checksum validation
3. CRLF terminator check
4. Talker and message ID extraction
5. Dispatch to the message decoder registered for the message ID
6. A check that the decoder consumed every payload field

Sentence Format:
    $GPGLL,4717.11364,N,00833.91565,E,092321.00,A,A*60\\r\\n
    ||||||                                          |  |
    |||||+-- payload (comma-separated fields)       |  +-- terminator
    ||+++-- message ID                              +-- checksum
    |++-- talker ID
    +-- envelope

Adding a message kind means adding its record, its decoder and one entry
in ``DECODERS``; the dispatch code does not change.
"""

import logging
import types
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Union

from nmeadecode.checksum import CHECKSUM_LENGTH, decode_checksum, verify_checksum
from nmeadecode.errors import (
    DecodeError,
    EmptyInput,
    InvalidEnvelope,
    TrailingData,
    UnsupportedMessageType,
)
from nmeadecode.fields import FieldReader
from nmeadecode.identity import AnyTalker, parse_message_type, parse_talker
from nmeadecode.messages import (
    DTMMessage,
    GBQMessage,
    GBSMessage,
    GGAMessage,
    GLLMessage,
    GLQMessage,
    GNQMessage,
    GNSMessage,
    GPQMessage,
    GRSMessage,
    GSAMessage,
    GSTMessage,
    GSVMessage,
    RMCMessage,
    TXTMessage,
    VLWMessage,
    VTGMessage,
    ZDAMessage,
    parse_dtm,
    parse_gbq,
    parse_gbs,
    parse_gga,
    parse_gll,
    parse_glq,
    parse_gnq,
    parse_gns,
    parse_gpq,
    parse_grs,
    parse_gsa,
    parse_gst,
    parse_gsv,
    parse_rmc,
    parse_txt,
    parse_vlw,
    parse_vtg,
    parse_zda,
)
from nmeadecode.parameters import SentenceType, parse_sentence_type

logger = logging.getLogger(__name__)

_TERMINATOR = "\r\n"

Message = Union[
    DTMMessage,
    GBQMessage,
    GBSMessage,
    GGAMessage,
    GLLMessage,
    GLQMessage,
    GNQMessage,
    GNSMessage,
    GPQMessage,
    GRSMessage,
    GSAMessage,
    GSTMessage,
    GSVMessage,
    RMCMessage,
    TXTMessage,
    VLWMessage,
    VTGMessage,
    ZDAMessage,
]

DECODERS: Mapping[str, Callable[[FieldReader], Message]] = types.MappingProxyType({
    "DTM": parse_dtm,
    "GBQ": parse_gbq,
    "GBS": parse_gbs,
    "GGA": parse_gga,
    "GLL": parse_gll,
    "GLQ": parse_glq,
    "GNQ": parse_gnq,
    "GNS": parse_gns,
    "GPQ": parse_gpq,
    "GRS": parse_grs,
    "GSA": parse_gsa,
    "GST": parse_gst,
    "GSV": parse_gsv,
    "RMC": parse_rmc,
    "TXT": parse_txt,
    "VLW": parse_vlw,
    "VTG": parse_vtg,
    "ZDA": parse_zda,
})


@dataclass(frozen=True)
class Sentence:
    """A decoded NMEA sentence.

    Attributes:
        sentence_type: Envelope of the sentence ('$' or '!').
        talker: Device that produced the sentence; ``UnknownTalker`` when
            the talker ID is not a registered one.
        message: The decoded message record. Its class identifies the
            message ID (``GLLMessage`` for "GLL", ...).

    Example:
        >>> sentence = parse_sentence("$GPGLL,4717.11364,N,00833.91565,E,092321.00,A,A*60\\r\\n")
        >>> sentence.talker
        <Talker.GPS: 'GP'>
        >>> sentence.message.lat
        Degree(value=47.285227333333324)
    """

    sentence_type: SentenceType
    talker: AnyTalker
    message: Message


def decode_payload(message_type: str, payload: str) -> Message:
    """Decode the payload of a sentence whose frame was already checked.

    Args:
        message_type: Three-character message ID, e.g. "GLL".
        payload: Fields after the address field, without the checksum,
            e.g. "4717.11364,N,00833.91565,E,092321.00,A,A".

    Raises:
        UnsupportedMessageType: If no decoder is registered for the ID.
        IncompleteInput: If the payload has fewer fields than the layout.
        MalformedField: If a field has the wrong shape.
        TrailingData: If fields are left over after decoding.
    """
    decoder = DECODERS.get(message_type)
    if decoder is None:
        raise UnsupportedMessageType(message_type)

    fields = FieldReader(payload)
    message = decoder(fields)

    if not fields.exhausted:
        raise TrailingData(
            f"{fields.remaining} unread field(s) after {message_type} payload, "
            f"starting at field {fields.position}."
        )
    return message


def _parse_envelope(sentence: str) -> SentenceType:
    if not sentence:
        raise EmptyInput()
    if not sentence.isascii():
        raise InvalidEnvelope("Sentence contains non-ASCII characters.")
    try:
        return parse_sentence_type(sentence[0])
    except ValueError as e:
        raise InvalidEnvelope(
            f"Expected '$' or '!' at start of sentence, got {sentence[0]!r}"
        ) from e


def parse_sentence(sentence: str) -> Sentence:
    """Decode one complete NMEA sentence.

    Args:
        sentence: Exactly one sentence including the envelope character,
            the checksum and the CRLF terminator, e.g.
            "$GPGLL,4717.11364,N,00833.91565,E,092321.00,A,A*60\\r\\n".

    Returns:
        The decoded sentence. Decoding is all-or-nothing: a malformed
        sentence never yields a partially filled record.

    Raises:
        DecodeError: The subclass names the first problem found, see
            :mod:`nmeadecode.errors`.
    """
    sentence_type = _parse_envelope(sentence)

    data, delimiter, after_data = sentence[1:].partition("*")
    if not delimiter:
        raise InvalidEnvelope("Missing '*' checksum delimiter.")

    verify_checksum(data, decode_checksum(after_data))

    terminator = after_data[CHECKSUM_LENGTH:]
    if terminator != _TERMINATOR:
        raise TrailingData(
            f"Expected CRLF after checksum, got {terminator!r}"
        )

    talker, address_rest = parse_talker(data)
    message_type, payload = parse_message_type(address_rest)

    return Sentence(
        sentence_type=sentence_type,
        talker=talker,
        message=decode_payload(message_type, payload),
    )


def try_parse_sentence(sentence: str) -> Sentence | None:
    """Decode a sentence, returning None instead of raising.

    Convenient for reader loops that skip bad lines. The reason a sentence
    was rejected is logged at DEBUG level.

    Example:
        >>> try_parse_sentence("$GNGGA,123519.00,...*FF\\r\\n")  # wrong checksum
        None
    """
    try:
        return parse_sentence(sentence)
    except DecodeError as e:
        logger.debug("Rejected NMEA sentence %r: %s", sentence, e)
        return None
