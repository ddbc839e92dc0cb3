from dataclasses import dataclass
from typing import Iterator

from identicon.components.point import Point


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle given by its top-left and bottom-right corners."""

    top_left: Point
    bottom_right: Point

    def __iter__(self) -> Iterator[Point]:
        yield self.top_left
        yield self.bottom_right
