"""
The MODEL layer contains pure data structures and business logic.
It has NO knowledge of the command line or of logging setup.
It deals with units and box geometry.
"""
from boxsize.model.units import UnitOfMeasure
from boxsize.model.box import Box, as_box

__all__ = ["Box", "UnitOfMeasure", "as_box"]
