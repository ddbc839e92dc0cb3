"""Generation settings.

Only the output location and the surface the squares are drawn on can be
changed. Grid width, cell size and image size are fixed constants in
:mod:`identicon.systems.pixel_map`.
"""

from dataclasses import dataclass

from identicon.types import Color

WHITE: Color = (255, 255, 255)
DEFAULT_OUTPUT_DIR = "img"
DEFAULT_IMAGE_FORMAT = "PNG"


@dataclass(frozen=True)
class IdenticonConfig:
    """Settings for rendering and saving identicons.

    Attributes:
        output_dir: Directory images are written to. Must already exist.
        background: RGB color of blank cells.
        image_format: Pillow encoder name; also used as the file extension.
    """

    output_dir: str = DEFAULT_OUTPUT_DIR
    background: Color = WHITE
    image_format: str = DEFAULT_IMAGE_FORMAT

    @property
    def extension(self) -> str:
        return self.image_format.lower()


DEFAULT_CONFIG = IdenticonConfig()
