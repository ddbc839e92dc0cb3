"""Filter system.

Drops the odd squares of the grid. Only cells whose value is *even* are kept
and later colored; odd cells stay blank.
"""

from dataclasses import replace
from pyrsistent import pvector

from identicon.state import Image


def filter_odd_squares(image: Image) -> Image:
    """Keep only even-valued cells, preserving their order.

    An empty result is valid and renders as a blank image.

    Raises:
        ValueError: If the grid has not been built yet.
    """
    if image.grid is None:
        raise ValueError("Grid must be built before filtering")
    grid = pvector(cell for cell in image.grid if cell.value % 2 == 0)
    return replace(image, grid=grid)
