"""Point component.

Immutable integer pixel coordinates on the output canvas.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """Pixel coordinate.

    Attributes:
        x: Column in pixels (0 at left).
        y: Row in pixels (0 at top).
    """

    x: int
    y: int
