"""Color system: picks the fill color from the head of the digest."""

from dataclasses import replace

from identicon.state import Image


def color_system(image: Image) -> Image:
    """Set ``color`` to the first three digest bytes as ``(r, g, b)``.

    Raises:
        ValueError: If fewer than three digest bytes are available.
    """
    if len(image.hash_bytes) < 3:
        raise ValueError(
            f"Need at least 3 hash bytes to pick a color, got {len(image.hash_bytes)}"
        )
    r, g, b = image.hash_bytes[:3]
    return replace(image, color=(r, g, b))
