"""Unit-tagged scalar types.

Each unit is its own frozen dataclass wrapping a float. Dataclass equality
compares the class as well as the value, so ``Meter(1.0) != Knot(1.0)``
and a type checker rejects passing one where the other is expected.

Equality is exact float equality. Values converted from NMEA's
degrees-and-minutes layout carry the rounding of that conversion, so
compare them with a tolerance.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Degree:
    """Angle in decimal degrees."""

    value: float

    def __float__(self) -> float:
        return self.value


@dataclass(frozen=True)
class Minute:
    """Angle in minutes of arc."""

    value: float

    def __float__(self) -> float:
        return self.value


@dataclass(frozen=True)
class Second:
    """Duration in seconds."""

    value: float

    def __float__(self) -> float:
        return self.value


@dataclass(frozen=True)
class Meter:
    """Distance in meters."""

    value: float

    def __float__(self) -> float:
        return self.value


@dataclass(frozen=True)
class Knot:
    """Speed in nautical miles per hour.

    1 knot = 1.852 km/h = 0.514 m/s.
    """

    value: float

    def __float__(self) -> float:
        return self.value
