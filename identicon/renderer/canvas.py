from contextlib import contextmanager
from functools import partial
import io
import logging
from typing import Iterator, Tuple

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage, ImageDraw

from identicon.components import Point
from identicon.config import DEFAULT_CONFIG, DEFAULT_IMAGE_FORMAT, WHITE, IdenticonConfig
from identicon.state import Image
from identicon.systems.pixel_map import IMAGE_SIZE
from identicon.types import Canvas, CanvasFactory, Color

logger = logging.getLogger(__name__)

UInt8Array = npt.NDArray[np.uint8]


class PillowCanvas:
    """Pillow backed drawing surface.

    Fills are inclusive of both corners, so a ``(0, 0)``-``(50, 50)`` rectangle
    covers 51x51 pixels; anything past the canvas edge is clipped.
    """

    image: PILImage.Image
    image_format: str

    def __init__(
        self,
        width: int,
        height: int,
        background: Color = WHITE,
        image_format: str = DEFAULT_IMAGE_FORMAT,
    ):
        self.image = PILImage.new("RGB", (width, height), background)
        self.image_format = image_format
        self._draw = ImageDraw.Draw(self.image)

    def color(self, rgb: Color) -> Tuple[int, int, int]:
        r, g, b = rgb
        return (int(r), int(g), int(b))

    def fill_rectangle(self, start: Point, stop: Point, fill: Tuple[int, int, int]) -> None:
        self._draw.rectangle((start.x, start.y, stop.x, stop.y), fill=fill)

    def encode(self) -> bytes:
        buffer = io.BytesIO()
        self.image.save(buffer, format=self.image_format)
        return buffer.getvalue()

    def close(self) -> None:
        self.image.close()


@contextmanager
def open_canvas(
    width: int,
    height: int,
    background: Color = WHITE,
    image_format: str = DEFAULT_IMAGE_FORMAT,
) -> Iterator[PillowCanvas]:
    """Yield a blank canvas and release its pixel buffer on exit."""
    canvas = PillowCanvas(width, height, background, image_format)
    try:
        yield canvas
    finally:
        canvas.close()


def paint(canvas: Canvas, image: Image) -> int:
    """Fill every rectangle of ``image.pixel_map`` with ``image.color``.

    Returns:
        int: Number of rectangles drawn.

    Raises:
        ValueError: If the color or pixel map has not been computed.
    """
    if image.color is None:
        raise ValueError("Color must be picked before drawing")
    if image.pixel_map is None:
        raise ValueError("Pixel map must be built before drawing")

    fill = canvas.color(image.color)
    for start, stop in image.pixel_map:
        canvas.fill_rectangle(start, stop, fill)
    return len(image.pixel_map)


def draw_image(image: Image, canvas_factory: CanvasFactory = open_canvas) -> bytes:
    """Rasterize ``image`` onto a fresh canvas and return the encoded bytes."""
    with canvas_factory(IMAGE_SIZE, IMAGE_SIZE) as canvas:
        count = paint(canvas, image)
        data = canvas.encode()
    logger.debug("Drew %d squares into %d bytes", count, len(data))
    return data


def render(image: Image, background: Color = WHITE) -> PILImage.Image:
    """Rasterize ``image`` and return the Pillow image without encoding it."""
    with open_canvas(IMAGE_SIZE, IMAGE_SIZE, background) as canvas:
        paint(canvas, image)
        return canvas.image.copy()


def to_array(image: PILImage.Image) -> UInt8Array:
    """Return an ``(H, W, 3)`` uint8 array of the image's RGB pixels."""
    return np.array(image.convert("RGB"), dtype=np.uint8)


class IdenticonRenderer:
    config: IdenticonConfig

    def __init__(self, config: IdenticonConfig = DEFAULT_CONFIG):
        self.config = config

    def canvas_factory(self) -> CanvasFactory:
        return partial(
            open_canvas,
            background=self.config.background,
            image_format=self.config.image_format,
        )

    def render(self, image: Image) -> PILImage.Image:
        return render(image, background=self.config.background)

    def draw(self, image: Image) -> bytes:
        return draw_image(image, canvas_factory=self.canvas_factory())
