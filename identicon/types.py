"""Common type aliases.

``HashFn``, ``WriteFn`` and ``CanvasFactory`` are the extension points used
to swap the external collaborators (digest, file write, drawing surface)
for tests or alternative backends.
"""

from typing import Any, Callable, ContextManager, Protocol, Tuple, TYPE_CHECKING


if TYPE_CHECKING:
    from identicon.components import Point

Color = Tuple[int, int, int]

HashFn = Callable[[bytes], bytes]
WriteFn = Callable[[str, bytes], None]


class Canvas(Protocol):
    """Drawing surface consumed by the renderer."""

    def color(self, rgb: Color) -> Any: ...

    def fill_rectangle(self, start: "Point", stop: "Point", fill: Any) -> None: ...

    def encode(self) -> bytes: ...


CanvasFactory = Callable[[int, int], ContextManager[Canvas]]
