"""
boxsize - An immutable, unit-aware three dimensional box value type.
"""

__version__ = "0.1.0"

from boxsize.exceptions import BoxError, OutOfRangeError, UnsupportedFormatError
from boxsize.model import Box, UnitOfMeasure, as_box

__all__ = [
    "Box",
    "UnitOfMeasure",
    "as_box",
    "BoxError",
    "OutOfRangeError",
    "UnsupportedFormatError",
]
