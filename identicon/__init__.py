"""Deterministic identicon generation.

An input string is hashed, mirrored into a 5x5 grid of colored and blank
squares and drawn as a 250x250 PNG. The same string always yields the same
image.

>>> from identicon import build
>>> build("elixir").color
(116, 181, 101)
"""

from identicon.pipeline import build, generate
from identicon.state import Image

__version__ = "0.1.0"

__all__ = [
    "Image",
    "build",
    "generate",
]
