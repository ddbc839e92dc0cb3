"""Pipeline orchestration.

Chains the stages in their fixed order:

1. ``hash_input`` digests the string into a new :class:`Image`.
2. ``color_system`` picks the fill color from the first three bytes.
3. ``grid_system`` builds the mirrored 5x5 grid.
4. ``filter_odd_squares`` keeps the even-valued cells.
5. ``pixel_map_system`` maps the kept cells to pixel rectangles.
6. ``draw_image`` rasterizes and encodes the result.
7. ``save_image`` writes it to ``<output_dir>/<text>.png``.

Stages 1-5 are pure; :func:`build` runs only those. :func:`generate` runs the
whole chain and is the library's main entry point.
"""

import logging
from typing import Optional

from identicon.config import DEFAULT_CONFIG, IdenticonConfig
from identicon.persist import save_image, write_bytes
from identicon.renderer.canvas import IdenticonRenderer, draw_image
from identicon.state import Image
from identicon.systems.color import color_system
from identicon.systems.filter import filter_odd_squares
from identicon.systems.grid import grid_system
from identicon.systems.hash import hash_input, md5_digest
from identicon.systems.pixel_map import pixel_map_system
from identicon.types import CanvasFactory, HashFn, WriteFn

logger = logging.getLogger(__name__)


def build(text: str, hash_fn: HashFn = md5_digest) -> Image:
    """Run the pure stages and return the fully populated record."""
    image = hash_input(text, hash_fn)
    image = color_system(image)
    image = grid_system(image)
    image = filter_odd_squares(image)
    image = pixel_map_system(image)
    return image


def generate(
    text: str,
    config: IdenticonConfig = DEFAULT_CONFIG,
    hash_fn: HashFn = md5_digest,
    canvas_factory: Optional[CanvasFactory] = None,
    write_fn: WriteFn = write_bytes,
) -> str:
    """Generate the identicon for ``text`` and write it to disk.

    Arguments:
        text:
            Input string; also the output file stem.
        config:
            Output directory, background and encoder settings.
        hash_fn:
            Digest function, MD5 by default.
        canvas_factory:
            Drawing surface factory. Defaults to a Pillow canvas built from
            ``config``.
        write_fn:
            File writer.

    Returns:
        str
            Path of the written image.

    Raises:
        OSError: If the image cannot be written.
    """
    if canvas_factory is None:
        canvas_factory = IdenticonRenderer(config).canvas_factory()
    image = build(text, hash_fn)
    logger.debug("Built %r: %d of 25 squares filled", text, len(image.pixel_map or ()))
    data = draw_image(image, canvas_factory)
    return save_image(
        data,
        text,
        output_dir=config.output_dir,
        extension=config.extension,
        write_fn=write_fn,
    )


main = generate
