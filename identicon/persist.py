"""File persistence for rendered identicons.

The file name is the input string used verbatim: no sanitization is applied,
so inputs containing path separators resolve to nested paths. Write failures
(``OSError``) reach the caller unchanged; nothing is retried and the output
directory is never created.
"""

import logging
import os

from identicon.config import DEFAULT_OUTPUT_DIR
from identicon.types import WriteFn

logger = logging.getLogger(__name__)


def write_bytes(path: str, data: bytes) -> None:
    """Default ``WriteFn``: write ``data`` to ``path``, replacing any existing file."""
    with open(path, "wb") as fh:
        fh.write(data)


def image_path(text: str, output_dir: str = DEFAULT_OUTPUT_DIR, extension: str = "png") -> str:
    """Return ``<output_dir>/<text>.<extension>``."""
    return os.path.join(output_dir, f"{text}.{extension}")


def save_image(
    data: bytes,
    text: str,
    output_dir: str = DEFAULT_OUTPUT_DIR,
    extension: str = "png",
    write_fn: WriteFn = write_bytes,
) -> str:
    """Write encoded image ``data`` to the path derived from ``text``.

    Returns:
        str: The path written.

    Raises:
        OSError: If the write fails.
    """
    path = image_path(text, output_dir, extension)
    write_fn(path, data)
    logger.info("Saved identicon for %r to %s", text, path)
    return path
