"""Units of measure and conversion helpers."""
from __future__ import annotations

from enum import StrEnum

from boxsize.config import MAX_BOX_SIZE_M


# ------------------------------------------------------------------------------
# Enums
# ------------------------------------------------------------------------------
class UnitOfMeasure(StrEnum):
    MILLIMETER = "mm"
    CENTIMETER = "cm"
    METER = "m"

    @property
    def filler(self) -> float:
        """Value used in place of dimensions omitted from the constructor."""
        return _FILLERS[self]

    @property
    def max_value(self) -> float:
        """The maximum box size expressed in this unit."""
        return MAX_BOX_SIZE_M * _PER_METER[self]


# Not a physical default, only what the shorter constructors fill in.
_FILLERS: dict[UnitOfMeasure, float] = {
    UnitOfMeasure.MILLIMETER: 100,
    UnitOfMeasure.CENTIMETER: 10,
    UnitOfMeasure.METER: 0.1,
}

_PER_METER: dict[UnitOfMeasure, int] = {
    UnitOfMeasure.MILLIMETER: 1000,
    UnitOfMeasure.CENTIMETER: 100,
    UnitOfMeasure.METER: 1,
}


# ------------------------------------------------------------------------------
# Conversions
# ------------------------------------------------------------------------------
def round_to(value: float, digits: int = 0) -> float:
    """
    Round half to even at `digits` decimal places.

    The value is scaled first and the scaled value is rounded, so 0.05 at
    one decimal is a tie (and rounds to 0.0) even though its binary value
    is slightly above 0.05.
    """
    scale = 10 ** digits
    return round(value * scale) / scale


def to_meters(value: float, unit: UnitOfMeasure) -> float:
    """Convert a value given in `unit` to meters."""
    match unit:
        case UnitOfMeasure.MILLIMETER:
            return value / 1000
        case UnitOfMeasure.CENTIMETER:
            return value / 100
        case _:
            return value


def to_centimeters(value: float, unit: UnitOfMeasure) -> float:
    """Convert to centimeters, rounded to one decimal place."""
    match unit:
        case UnitOfMeasure.MILLIMETER:
            return round_to(value / 10, 1)
        case UnitOfMeasure.CENTIMETER:
            return round_to(value, 1)
        case _:
            return round_to(value * 100, 1)


def to_millimeters(value: float, unit: UnitOfMeasure) -> float:
    """Convert to whole millimeters."""
    match unit:
        case UnitOfMeasure.MILLIMETER:
            return round_to(value)
        case UnitOfMeasure.CENTIMETER:
            return round_to(value * 10)
        case _:
            return round_to(value * 1000)
