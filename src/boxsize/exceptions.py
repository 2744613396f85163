"""Exception types raised by the box model."""
from __future__ import annotations

from typing import Sequence


class BoxError(Exception):
    """Base class for all errors raised by boxsize."""


class OutOfRangeError(BoxError, ValueError):
    """
    Raised when a box dimension is not positive or larger than the maximum
    box size after unit-specific rounding.
    """

    def __init__(self, dimensions: Sequence[float], unit: str) -> None:
        self.dimensions = tuple(dimensions)
        self.unit = unit
        dims = ", ".join(str(d) for d in self.dimensions)
        super().__init__(f"Box dimensions ({dims}) [{unit}] are out of range.")


class UnsupportedFormatError(BoxError, ValueError):
    """Raised for a format selector other than 'm', 'cm' or 'mm'."""

    def __init__(self, format_spec: str) -> None:
        self.format_spec = format_spec
        super().__init__(f"Format '{format_spec}' is not supported.")
