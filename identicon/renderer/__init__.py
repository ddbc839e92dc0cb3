"""Rendering subpackage.

Turns a fully built :class:`~identicon.state.Image` into pixels. The renderer
only needs a small drawing surface (see :class:`identicon.types.Canvas`):

* Create a blank canvas of fixed size.
* Fill axis-aligned rectangles with a single color.
* Encode the result to image bytes.

:mod:`identicon.renderer.canvas` provides the Pillow backed surface and the
``draw_image`` / ``render`` entry points.
"""

from .canvas import (
    IdenticonRenderer,
    PillowCanvas,
    draw_image,
    open_canvas,
    render,
    to_array,
)

__all__ = [
    "IdenticonRenderer",
    "PillowCanvas",
    "draw_image",
    "open_canvas",
    "render",
    "to_array",
]
