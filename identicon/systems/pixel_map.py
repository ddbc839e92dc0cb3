"""Pixel map system.

Converts every remaining grid cell into the pixel rectangle it covers on the
output canvas. Cell ``i`` sits at ``row = i // 5``, ``col = i % 5`` and covers
``(col * 50, row * 50)`` to ``(col * 50 + 50, row * 50 + 50)``.
"""

from dataclasses import replace
from pyrsistent import pvector

from identicon.components import Point, Rect
from identicon.state import Image
from identicon.utils.grid import index_to_coords

GRID_WIDTH = 5
CELL_SIZE = 50
IMAGE_SIZE = GRID_WIDTH * CELL_SIZE


def cell_rect(index: int) -> Rect:
    """Return the pixel rectangle for the cell at flat ``index``."""
    col, row = index_to_coords(index, GRID_WIDTH)
    x, y = col * CELL_SIZE, row * CELL_SIZE
    return Rect(Point(x, y), Point(x + CELL_SIZE, y + CELL_SIZE))


def pixel_map_system(image: Image) -> Image:
    """Populate ``pixel_map`` with one rectangle per grid cell, in grid order.

    Raises:
        ValueError: If the grid has not been built yet.
    """
    if image.grid is None:
        raise ValueError("Grid must be built before mapping pixels")
    pixel_map = pvector(cell_rect(cell.index) for cell in image.grid)
    return replace(image, pixel_map=pixel_map)
