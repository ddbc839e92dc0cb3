"""Grid helpers.

Pure functions used by the grid and pixel map systems to split a digest into
rows, mirror them and convert flat indices back to grid coordinates.
"""

from typing import List, Sequence, Tuple, TypeVar
from pyrsistent import pvector
from pyrsistent.typing import PVector

T = TypeVar("T")


def chunk(values: Sequence[T], size: int) -> List[PVector[T]]:
    """Split ``values`` into consecutive groups of ``size``.

    A trailing group shorter than ``size`` is discarded, never padded.
    """
    if size <= 0:
        raise ValueError("Chunk size must be positive")
    full = len(values) - len(values) % size
    return [pvector(values[i : i + size]) for i in range(0, full, size)]


def mirror_row(row: Sequence[int]) -> PVector[int]:
    """Reflect a row around its last value.

    ``[a, b, c]`` becomes ``[a, b, c, b, a]``.

    Raises:
        ValueError: If ``row`` has fewer than two values.
    """
    if len(row) < 2:
        raise ValueError(f"Cannot mirror a row of {len(row)} values")
    first, second = row[0], row[1]
    return pvector(row).extend([second, first])


def rows(values: Sequence[T], width: int) -> List[PVector[T]]:
    """Split a flat row-major grid back into rows of ``width``."""
    return chunk(values, width)


def index_to_coords(index: int, width: int) -> Tuple[int, int]:
    """Return ``(col, row)`` for a flat row-major ``index``."""
    row, col = divmod(index, width)
    return col, row
