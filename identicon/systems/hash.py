"""Hash system.

Entry stage of the pipeline: turns the input string into a fresh
:class:`~identicon.state.Image` holding only its digest bytes.
"""

import hashlib
import logging
from pyrsistent import pvector

from identicon.state import Image
from identicon.types import HashFn

logger = logging.getLogger(__name__)

ENCODING = "utf-8"


def md5_digest(data: bytes) -> bytes:
    """Default ``HashFn``: 16 byte MD5 digest."""
    return hashlib.md5(data).digest()


def hash_input(text: str, hash_fn: HashFn = md5_digest) -> Image:
    """Hash ``text`` into a new image record.

    Arguments:
        text:
            Any string, including the empty string. Encoded as UTF-8.
        hash_fn:
            Digest function. Defaults to MD5.

    Returns:
        Image
            Record with ``hash_bytes`` set and every other field empty.
    """
    digest = hash_fn(text.encode(ENCODING))
    logger.debug("Hashed %r into %d bytes", text, len(digest))
    return Image(hash_bytes=pvector(digest))
