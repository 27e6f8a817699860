"""Enumerated NMEA parameters and their field decoders.

Each enum member's value is the token it has on the wire, so a token is
converted with a plain ``Enum`` lookup. An unknown token makes that lookup
raise ``ValueError``, which :meth:`FieldReader.read` reports as a
``MalformedField``. An empty field decodes to None.
"""

from collections.abc import Callable
from enum import Enum
from typing import TypeVar

from nmeadecode.fields import FieldReader

E = TypeVar("E", bound=Enum)


class SentenceType(Enum):
    """Sentence envelope, chosen by the first character."""

    PARAMETRIC = "$"
    ENCAPSULATION = "!"


class NorthSouth(Enum):
    NORTH = "N"
    SOUTH = "S"


class EastWest(Enum):
    EAST = "E"
    WEST = "W"


class Fix(Enum):
    """Positioning mode indicator (FAA mode, NMEA 2.3+).

    GNS packs one of these per constellation into a single field.
    """

    NO_FIX = "N"
    AUTONOMOUS_GNSS_FIX = "A"
    DIFFERENTIAL_GNSS_FIX = "D"
    ESTIMATED_DEAD_RECKONING_FIX = "E"
    RTK_FLOAT = "F"
    RTK_FIXED = "R"
    MANUAL_INPUT = "M"
    PRECISE = "P"
    SIMULATOR = "S"


class Status(Enum):
    """Data validity status."""

    DATA_VALID = "A"
    DATA_INVALID = "V"


class NavigationalStatus(Enum):
    """RMC navigational status indicator (NMEA 4.10)."""

    SAFE = "S"
    CAUTION = "C"
    UNSAFE = "U"
    NOT_VALID = "V"


class ComputationMethod(Enum):
    """How GRS range residuals were computed."""

    # Residuals were used to calculate the position given in the matching GGA
    USED_IN_GGA = "0"
    # Residuals were recomputed after the GGA position was computed
    AFTER_GGA = "1"


class FixQuality(Enum):
    """GGA quality indicator.

    Values:
        0 = Invalid (no fix)
        1 = GPS fix (SPS - Standard Positioning Service)
        2 = DGPS fix (Differential GPS)
        4 = RTK Fixed (centimeter-level accuracy)
        5 = RTK Float (decimeter-level accuracy, converging)
        6 = Dead reckoning mode
    """

    INVALID = "0"
    GPS_FIX = "1"
    DGPS_FIX = "2"
    PPS_FIX = "3"
    RTK_FIXED = "4"
    RTK_FLOAT = "5"
    DEAD_RECKONING = "6"
    MANUAL_INPUT = "7"
    SIMULATION = "8"


class OperationMode(Enum):
    """GSA operation mode."""

    MANUAL = "M"
    AUTOMATIC = "A"


class NavigationMode(Enum):
    """GSA navigation mode."""

    FIX_NOT_AVAILABLE = "1"
    FIX_2D = "2"
    FIX_3D = "3"


class CourseOverGroundUnit(Enum):
    DEGREES_TRUE = "T"
    DEGREES_MAGNETIC = "M"


class SpeedOverGroundUnit(Enum):
    KNOTS = "N"
    KILOMETERS_PER_HOUR = "K"


class TextMessageType(Enum):
    """TXT message severity."""

    ERROR = "00"
    WARNING = "01"
    NOTICE = "02"
    USER = "07"


def _optional_member(enum_type: type[E]) -> Callable[[str], E | None]:
    def parse(value: str) -> E | None:
        if not value:
            return None
        return enum_type(value)

    return parse


_parse_sentence_type = _optional_member(SentenceType)
_parse_north_south = _optional_member(NorthSouth)
_parse_east_west = _optional_member(EastWest)
_parse_fix = _optional_member(Fix)
_parse_status = _optional_member(Status)
_parse_navigational_status = _optional_member(NavigationalStatus)
_parse_computation_method = _optional_member(ComputationMethod)
_parse_fix_quality = _optional_member(FixQuality)
_parse_operation_mode = _optional_member(OperationMode)
_parse_navigation_mode = _optional_member(NavigationMode)
_parse_course_over_ground_unit = _optional_member(CourseOverGroundUnit)
_parse_speed_over_ground_unit = _optional_member(SpeedOverGroundUnit)
_parse_text_message_type = _optional_member(TextMessageType)


def _parse_fix_sequence(value: str) -> tuple[Fix, ...] | None:
    if not value:
        return None
    return tuple(Fix(character) for character in value)


def parse_north_south_indicator(fields: FieldReader) -> NorthSouth | None:
    return fields.read(_parse_north_south)


def parse_east_west_indicator(fields: FieldReader) -> EastWest | None:
    return fields.read(_parse_east_west)


def parse_pos_mode(fields: FieldReader) -> Fix | None:
    return fields.read(_parse_fix)


def parse_pos_mode_vec(fields: FieldReader) -> tuple[Fix, ...] | None:
    """Decode a GNS mode field holding one indicator per constellation.

    Example:
        "ANNN" -> (AUTONOMOUS_GNSS_FIX, NO_FIX, NO_FIX, NO_FIX)
    """
    return fields.read(_parse_fix_sequence)


def parse_status(fields: FieldReader) -> Status | None:
    return fields.read(_parse_status)


def parse_navigational_status(fields: FieldReader) -> NavigationalStatus | None:
    return fields.read(_parse_navigational_status)


def parse_computation_method(fields: FieldReader) -> ComputationMethod | None:
    return fields.read(_parse_computation_method)


def parse_fix_quality(fields: FieldReader) -> FixQuality | None:
    return fields.read(_parse_fix_quality)


def parse_operation_mode(fields: FieldReader) -> OperationMode | None:
    return fields.read(_parse_operation_mode)


def parse_navigation_mode(fields: FieldReader) -> NavigationMode | None:
    return fields.read(_parse_navigation_mode)


def parse_course_over_ground_unit(
    fields: FieldReader,
) -> CourseOverGroundUnit | None:
    return fields.read(_parse_course_over_ground_unit)


def parse_speed_over_ground_unit(
    fields: FieldReader,
) -> SpeedOverGroundUnit | None:
    return fields.read(_parse_speed_over_ground_unit)


def parse_text_message_type(fields: FieldReader) -> TextMessageType | None:
    return fields.read(_parse_text_message_type)


def parse_sentence_type(character: str) -> SentenceType | None:
    """Map an envelope character to its ``SentenceType``.

    Returns None for an empty string and raises ``ValueError`` for any
    character other than ``$`` or ``!``.
    """
    return _parse_sentence_type(character)
