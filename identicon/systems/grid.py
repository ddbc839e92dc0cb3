"""Grid system.

Builds the mirrored grid from the digest:

1. Split ``hash_bytes`` into groups of 3 (a short trailing group is dropped;
    16 bytes give 5 groups and 1 unused byte).
2. Mirror every group ``[a, b, c]`` into ``[a, b, c, b, a]``.
3. Flatten the rows and pair each value with its flat index.

The mirroring gives every row left/right symmetry.
"""

import logging
from dataclasses import replace
from pyrsistent import pvector

from identicon.components import Cell
from identicon.state import Image
from identicon.utils.grid import chunk, mirror_row

logger = logging.getLogger(__name__)

ROW_SOURCE_SIZE = 3


def grid_system(image: Image) -> Image:
    """Populate ``grid`` with the mirrored cells of ``image.hash_bytes``.

    Arguments:
        image:
            Record with ``hash_bytes`` set.

    Returns:
        Image
            Updated record whose ``grid`` holds ``5 * groups`` cells indexed
            from 0 in row-major order.
    """
    values = [
        value
        for row in chunk(image.hash_bytes, ROW_SOURCE_SIZE)
        for value in mirror_row(row)
    ]
    grid = pvector(Cell(value, index) for index, value in enumerate(values))
    logger.debug("Built grid of %d cells", len(grid))
    return replace(image, grid=grid)
