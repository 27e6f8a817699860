"""Talker and message identifier registries.

The address field of a sentence, e.g. ``GPGLL``, is a two-character
talker ID naming the device that produced it followed by a
three-character message ID naming the sentence layout.

Both registries are fixed at import time. An unknown talker is not an
error (proprietary and vendor-specific talkers are common) and is kept
verbatim as :class:`UnknownTalker`; an unknown message ID is rejected
because there is no decoder for it.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from nmeadecode.errors import (
    IncompleteInput,
    InvalidEnvelope,
    UnrecognizedTalkerLength,
    UnsupportedMessageType,
)
from nmeadecode.fields import FieldReader, parse_hex_field, parse_u8_field

TALKER_ID_LENGTH = 2
MESSAGE_ID_LENGTH = 3

# Signal IDs share the byte range of system and satellite IDs
_SIGNAL_ID_MAX = 0xFF

# Every message ID that has a decoder in nmeadecode.sentence.DECODERS
MESSAGE_TYPES = frozenset((
    "DTM", "GBQ", "GBS", "GGA", "GLL", "GLQ", "GNQ", "GNS", "GPQ",
    "GRS", "GSA", "GST", "GSV", "RMC", "TXT", "VLW", "VTG", "ZDA",
))


class Talker(Enum):
    """Known NMEA 0183 talker IDs.

    Satellite systems:
        GP = GPS (USA)
        GN = Multi-GNSS (combined solution)
        GL = GLONASS (Russia)
        GA = Galileo (Europe)
        GB, BD = BeiDou (China)
        GQ = QZSS (Japan)
        GI = NavIC / IRNSS (India)
    """

    AIS_BASE_STATION = "AB"
    AIS_DEPENDENT_BASE_STATION = "AD"
    AUTOPILOT_GENERAL = "AG"
    AUTOPILOT_MAGNETIC = "AP"
    AIS_MOBILE_STATION = "AI"
    BEIDOU_LEGACY = "BD"
    BRIDGE_NAVIGATIONAL_WATCH_ALARM = "BN"
    COMMUNICATIONS_DSC = "CD"
    COMMUNICATIONS_DATA_RECEIVER = "CR"
    COMMUNICATIONS_SATELLITE = "CS"
    COMMUNICATIONS_RADIO_TELEPHONE_MF_HF = "CT"
    COMMUNICATIONS_RADIO_TELEPHONE_VHF = "CV"
    COMMUNICATIONS_SCANNING_RECEIVER = "CX"
    DECCA_NAVIGATION = "DE"
    DIRECTION_FINDER = "DF"
    DUPLEX_REPEATER_STATION = "DU"
    ECDIS = "EC"
    ECS = "EI"
    EPIRB = "EP"
    ENGINE_ROOM_MONITORING = "ER"
    GALILEO = "GA"
    BEIDOU = "GB"
    NAVIC = "GI"
    GLONASS = "GL"
    GNSS = "GN"
    GPS = "GP"
    QZSS = "GQ"
    HEADING_MAGNETIC_COMPASS = "HC"
    HEADING_NORTH_SEEKING_GYRO = "HE"
    HEADING_NON_NORTH_SEEKING_GYRO = "HN"
    INTEGRATED_INSTRUMENTATION = "II"
    INTEGRATED_NAVIGATION = "IN"
    LORAN_A = "LA"
    LORAN_C = "LC"
    MICROWAVE_POSITIONING = "MP"
    NAVIGATION_LIGHT_CONTROLLER = "NL"
    OMEGA_NAVIGATION = "OM"
    DISTRESS_ALARM = "OS"
    RADAR = "RA"
    SOUNDER_DEPTH = "SD"
    ELECTRONIC_POSITIONING_OTHER = "SN"
    SOUNDER_SCANNING = "SS"
    TURN_RATE_INDICATOR = "TI"
    TRANSIT_NAVIGATION = "TR"
    MICROPROCESSOR_CONTROLLER = "UP"
    VELOCITY_SENSOR_DOPPLER = "VD"
    VELOCITY_SENSOR_WATER_MAGNETIC = "VM"
    VELOCITY_SENSOR_WATER_MECHANICAL = "VW"
    VOYAGE_DATA_RECORDER = "VR"
    WEATHER_INSTRUMENTS = "WI"
    TRANSDUCER = "YX"
    TIMEKEEPER_ATOMIC_CLOCK = "ZA"
    TIMEKEEPER_CHRONOMETER = "ZC"
    TIMEKEEPER_QUARTZ = "ZQ"
    TIMEKEEPER_RADIO_UPDATE = "ZV"


@dataclass(frozen=True)
class UnknownTalker:
    """A talker ID that is not in :class:`Talker`, kept as received."""

    code: str


AnyTalker = Union[Talker, UnknownTalker]

_TALKERS_BY_CODE = {talker.value: talker for talker in Talker}


def lookup_talker(code: str) -> AnyTalker:
    """Return the ``Talker`` for *code*, or ``UnknownTalker(code)``.

    Example:
        >>> lookup_talker("HN")
        <Talker.HEADING_NON_NORTH_SEEKING_GYRO: 'HN'>
        >>> lookup_talker("PA")
        UnknownTalker(code='PA')
    """
    talker = _TALKERS_BY_CODE.get(code)
    if talker is None:
        return UnknownTalker(code)
    return talker


def parse_talker(data: str) -> tuple[AnyTalker, str]:
    """Split the talker ID off the front of a sentence data span.

    Args:
        data: Sentence text between the envelope character and ``*``,
            e.g. ``"GPGLL,4717.11364,N,..."``.

    Returns:
        The talker and the text following it.

    Raises:
        UnrecognizedTalkerLength: If *data* is shorter than two characters.
    """
    if len(data) < TALKER_ID_LENGTH:
        raise UnrecognizedTalkerLength(data)
    code, rest = data[:TALKER_ID_LENGTH], data[TALKER_ID_LENGTH:]
    return lookup_talker(code), rest


def parse_message_type(data: str) -> tuple[str, str]:
    """Split the message ID and its trailing comma off *data*.

    Args:
        data: Text following the talker ID, e.g. ``"GLL,4717.11364,..."``.

    Returns:
        The three-character message ID and the payload after the comma.

    Raises:
        IncompleteInput: If fewer than four characters remain.
        InvalidEnvelope: If the message ID is not followed by a comma.
        UnsupportedMessageType: If the message ID is not registered.
    """
    if len(data) < MESSAGE_ID_LENGTH + 1:
        raise IncompleteInput(f"Address field too short: {data!r}")
    code = data[:MESSAGE_ID_LENGTH]
    if data[MESSAGE_ID_LENGTH] != ",":
        raise InvalidEnvelope(f"Expected ',' after message ID in {data!r}")
    if code not in MESSAGE_TYPES:
        raise UnsupportedMessageType(code)
    return code, data[MESSAGE_ID_LENGTH + 1:]


def parse_system_id(fields: FieldReader) -> int | None:
    """Decode an NMEA 4.10 GNSS system ID (1 = GPS, 2 = GLONASS, ...)."""
    return fields.read(parse_u8_field)


def _parse_signal_id_field(value: str) -> int | None:
    number = parse_hex_field(value)
    if number is not None and number > _SIGNAL_ID_MAX:
        raise ValueError(f"out of range for a signal ID: {value!r}")
    return number


def parse_signal_id(fields: FieldReader) -> int | None:
    """Decode an NMEA 4.10 GNSS signal ID, transmitted as a hex digit."""
    return fields.read(_parse_signal_id_field)


def parse_satellite_id(fields: FieldReader) -> int | None:
    return fields.read(parse_u8_field)
