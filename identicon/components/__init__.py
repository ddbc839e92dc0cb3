"""Value components threaded through the identicon pipeline.

All components are frozen dataclasses. :class:`Cell` is one square of the
5x5 grid, :class:`Point` a pixel coordinate and :class:`Rect` the pair of
corners a cell is rasterized to.
"""

from .cell import Cell
from .point import Point
from .rect import Rect

__all__ = [
    "Cell",
    "Point",
    "Rect",
]
