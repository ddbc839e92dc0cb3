"""Cell component.

A single grid square: the digest byte that decides whether it is colored and
its flat position in the 5x5 grid.
"""

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Cell:
    """Grid square.

    Attributes:
        value: Digest byte (0-255) mirrored into this square.
        index: Flat 0-based position, row-major (0..24 for a 5x5 grid).
    """

    value: int
    index: int

    def __iter__(self) -> Iterator[int]:
        yield self.value
        yield self.index
