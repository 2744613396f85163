"""
Box Value Type
==============
Defines the immutable three-dimensional box used across the package.

A Box keeps its dimensions exactly as they were given, together with the
unit they were given in. Everything that needs a common scale (equality,
the default text form) goes through the normalized A/B/C properties, which
are always in meters.

Classes:
    Box: The value type itself.

Functions:
    as_box: Accept either a Box or a (a, b, c) millimeter triple.
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
import logging
import math
import operator
from numbers import Real
from typing import Iterator, Optional, Sequence, Union, TYPE_CHECKING

import numpy as np

from boxsize.config import DEFAULT_FORMAT, DEFAULT_UNIT
from boxsize.exceptions import OutOfRangeError, UnsupportedFormatError
from boxsize.model.units import UnitOfMeasure, round_to, to_meters, to_centimeters, to_millimeters

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

UnitLike = Union[UnitOfMeasure, str]


def _fixed(value: float, places: int) -> str:
    """
    Fixed-point text for `value`, taken to 15 significant digits first and
    then rounded half away from zero, so 1.0005 renders as 1.001.
    """
    exponent = Decimal(1).scaleb(-places)
    return format(Decimal(f"{value:.15g}").quantize(exponent, rounding=ROUND_HALF_UP), "f")


@dataclass(frozen=True, init=False, eq=False)
class Box:
    """
    A rectangular box with three dimensions and a unit of measure.

    Construction mirrors four overloads, the unit is always the last
    positional argument (or the `unit` keyword) and defaults to meters:

        Box(a, b, c, unit)
        Box(a, b, unit)      # c = unit.filler
        Box(a, unit)         # b = c = unit.filler
        Box(unit)            # a = b = c = unit.filler

    The filler is 100 mm, 10 cm or 0.1 m depending on the unit.

    Raises:
        OutOfRangeError: If any dimension is not positive or exceeds 10 m.
        TypeError: For non-numeric dimensions or more than three of them.
    """
    a: float
    b: float
    c: float
    unit: UnitOfMeasure

    def __init__(self, *dimensions: Union[float, UnitLike], unit: Optional[UnitLike] = None) -> None:
        dims = list(dimensions)
        if dims and isinstance(dims[-1], str):
            if unit is not None:
                raise TypeError("Unit given both positionally and as a keyword.")
            unit = dims.pop()

        unit = UnitOfMeasure(unit if unit is not None else DEFAULT_UNIT)

        if len(dims) > 3:
            raise TypeError(f"Box takes at most 3 dimensions ({len(dims)} given).")
        for value in dims:
            if isinstance(value, bool) or not isinstance(value, Real):
                raise TypeError(f"Box dimensions must be real numbers, got {value!r}.")

        while len(dims) < 3:
            dims.append(unit.filler)

        a, b, c = dims
        if not self._is_correct_size(a, b, c, unit):
            logger.debug(f"Rejected box dimensions {a}, {b}, {c} [{unit}].")
            raise OutOfRangeError((a, b, c), unit)

        object.__setattr__(self, "a", a)
        object.__setattr__(self, "b", b)
        object.__setattr__(self, "c", c)
        object.__setattr__(self, "unit", unit)

    @staticmethod
    def _is_correct_size(a: float, b: float, c: float, unit: UnitOfMeasure) -> bool:
        if not all(math.isfinite(d) and d > 0 for d in (a, b, c)):
            return False

        max_value = unit.max_value
        match unit:
            case UnitOfMeasure.MILLIMETER:
                if round_to(a) <= 0 or round_to(b) <= 0 or round_to(c) <= 0:
                    return False
                # Bound is checked on the raw values, not the rounded ones
            case UnitOfMeasure.CENTIMETER:
                rounded = [round_to(d, 1) for d in (a, b, c)]
                if any(r <= 0 for r in rounded):
                    return False
                return all(r <= max_value for r in rounded)

        return a <= max_value and b <= max_value and c <= max_value

    # --------------------------------------------------------------------------
    # Normalized dimensions (meters)
    # --------------------------------------------------------------------------
    @property
    def A(self) -> float:
        return to_meters(self.a, self.unit)

    @property
    def B(self) -> float:
        return to_meters(self.b, self.unit)

    @property
    def C(self) -> float:
        return to_meters(self.c, self.unit)

    # --------------------------------------------------------------------------
    # Equality
    # --------------------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Box):
            return NotImplemented
        return self.A == other.A and self.B == other.B and self.C == other.C

    def __hash__(self) -> int:
        return hash((self.A, self.B, self.C))

    # --------------------------------------------------------------------------
    # Formatting
    # --------------------------------------------------------------------------
    def to_string(self, fmt: Optional[str] = None) -> str:
        """
        Render the box as text.

        Args:
            fmt: "m" (or None/"") for meters with 3 decimals, "cm" for
                centimeters with 1 decimal, "mm" for whole millimeters.

        Raises:
            UnsupportedFormatError: For any other selector.
        """
        try:
            unit = UnitOfMeasure(DEFAULT_FORMAT if fmt in (None, "") else fmt)
        except ValueError:
            raise UnsupportedFormatError(fmt) from None

        match unit:
            case UnitOfMeasure.METER:
                values, places = (self.A, self.B, self.C), 3
            case UnitOfMeasure.CENTIMETER:
                values, places = [to_centimeters(d, self.unit) for d in self], 1
            case _:
                values, places = [to_millimeters(d, self.unit) for d in self], 0
        return " × ".join(f"{_fixed(v, places)} {unit}" for v in values)

    def __str__(self) -> str:
        return self.to_string()

    def __format__(self, format_spec: str) -> str:
        return self.to_string(format_spec)

    # --------------------------------------------------------------------------
    # Sequence access (raw dimensions, original unit)
    # --------------------------------------------------------------------------
    def __iter__(self) -> Iterator[float]:
        yield self.a
        yield self.b
        yield self.c

    def __len__(self) -> int:
        return 3

    def __getitem__(self, index: int) -> float:
        return self.dimension(index)

    def dimension(self, index: int, strict: bool = False) -> float:
        """
        Return dimension `index` (0, 1 or 2) in the original unit.

        Any other index yields 0 unless `strict` is set, in which case
        an IndexError is raised.
        """
        match operator.index(index):
            case 0:
                return self.a
            case 1:
                return self.b
            case 2:
                return self.c
            case _:
                if strict:
                    raise IndexError(f"Box dimension index out of range: {index}")
                return 0

    # --------------------------------------------------------------------------
    # Conversions
    # --------------------------------------------------------------------------
    def to_array(self) -> npt.NDArray[np.float64]:
        """Raw dimensions [a, b, c] in the original unit."""
        return np.array([self.a, self.b, self.c], dtype=np.float64)

    def __array__(self, dtype=None, copy=None) -> npt.NDArray:
        if copy is False:
            raise ValueError("A Box cannot be viewed as an array without copying.")
        array = self.to_array()
        if dtype is not None:
            array = array.astype(dtype)
        return array

    @classmethod
    def from_tuple(cls, values: Sequence[float]) -> Box:
        """
        Build a Box from an (a, b, c) triple.

        The values are always read as MILLIMETERS, so (1, 1, 1) is a 1 mm
        cube and not a 1 m one.
        """
        values = tuple(values)
        if len(values) != 3:
            raise ValueError(f"Expected 3 values, got {len(values)}.")
        return cls(*values, unit=UnitOfMeasure.MILLIMETER)


def as_box(value: Union[Box, Sequence[float]]) -> Box:
    """Return `value` if it is a Box, otherwise read it as a millimeter triple."""
    if isinstance(value, Box):
        return value
    return Box.from_tuple(value)
