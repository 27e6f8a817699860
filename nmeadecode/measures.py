"""Distance, speed and duration field decoders."""

from collections.abc import Callable

from nmeadecode.fields import FieldReader, parse_float_field
from nmeadecode.units import Knot, Meter, Second

# GRS always carries 12 residual slots, used or not
RESIDUAL_COUNT = 12

_METER_UNIT = "M"
_NAUTICAL_MILE_UNIT = "N"


def parse_meter(fields: FieldReader) -> Meter | None:
    value = fields.read(parse_float_field)
    if value is None:
        return None
    return Meter(value)


def parse_knot(fields: FieldReader) -> Knot | None:
    value = fields.read(parse_float_field)
    if value is None:
        return None
    return Knot(value)


def parse_second(fields: FieldReader) -> Second | None:
    value = fields.read(parse_float_field)
    if value is None:
        return None
    return Second(value)


def parse_residuals(fields: FieldReader) -> tuple[Meter | None, ...]:
    """Decode the GRS range residual block.

    Always consumes exactly 12 fields and returns 12 slots; empty fields
    (satellites not used) become None in their position.
    """
    return tuple(parse_meter(fields) for _ in range(RESIDUAL_COUNT))


def _unit_marker(unit: str) -> Callable[[str], None]:
    def parse(value: str) -> None:
        if value and value != unit:
            raise ValueError(f"expected unit {unit!r}, got {value!r}")

    return parse


_check_meter_unit = _unit_marker(_METER_UNIT)
_check_nautical_mile_unit = _unit_marker(_NAUTICAL_MILE_UNIT)


def parse_meter_unit(fields: FieldReader) -> None:
    """Consume a unit field that must be "M" (meters) or empty."""
    fields.read(_check_meter_unit)


def parse_nautical_mile_unit(fields: FieldReader) -> None:
    """Consume a unit field that must be "N" (nautical miles) or empty."""
    fields.read(_check_nautical_mile_unit)
