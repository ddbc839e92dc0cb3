"""Core immutable ``Image`` record.

This module defines the frozen :class:`Image` object threaded through the
identicon pipeline. Every stage is a pure function that takes an ``Image``
and returns a *new* ``Image`` with one more field populated; nothing is
mutated in place. That keeps generation deterministic and lets each stage be
tested on its own.

Design notes:

* Sequences are **persistent vectors** (``pyrsistent.PVector``) so a stage
    can never alter the output of an earlier one.
* ``color``, ``grid`` and ``pixel_map`` are ``None`` until the stage that
    owns them has run. Later stages raise ``ValueError`` when a field they
    depend on is still missing.
* ``grid`` is overwritten by the filter stage with the even-valued subset of
    the full 25 cell grid, in the original order.

See :mod:`identicon.pipeline` for how the stages are chained.
"""

from dataclasses import dataclass
from typing import Any, Optional
from pyrsistent import PMap, pmap, pvector
from pyrsistent.typing import PVector

from identicon.components import Cell, Rect
from identicon.types import Color


@dataclass(frozen=True)
class Image:
    """Immutable identicon accumulator.

    Attributes:
        hash_bytes (PVector[int]): Digest of the input string, one int (0-255)
            per byte. 16 values for the default MD5 hash.
        color (Color | None): RGB fill taken from the first three digest bytes.
        grid (PVector[Cell] | None): Mirrored 5x5 grid, or its even-valued
            subset once filtered.
        pixel_map (PVector[Rect] | None): One rectangle per remaining cell.
    """

    hash_bytes: PVector[int] = pvector()
    color: Optional[Color] = None
    grid: Optional[PVector[Cell]] = None
    pixel_map: Optional[PVector[Rect]] = None

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse serialization of populated fields.

        Returns:
            PMap[str, Any]: Persistent map of field name to value for every
            field that has been set by a stage.
        """
        description: PMap[str, Any] = pmap()
        for field in self.__dataclass_fields__:
            value = getattr(self, field)
            if value is None:
                continue
            description = description.set(field, value)
        return description
