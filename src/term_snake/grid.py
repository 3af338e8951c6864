"""Playfield bounds and cell-level board snapshots."""

from __future__ import annotations

import enum
from collections.abc import Iterable

import numpy as np

Cell = tuple[int, int]


class GlyphKind(enum.IntEnum):
    """What occupies a cell, as drawn by a render sink."""

    BACKGROUND = 0
    BODY = 1
    FOOD = 2


class Playfield:
    """Immutable ``width × height`` board.

    Legal coordinates are ``0 <= x < width`` and ``0 <= y < height``.
    """

    __slots__ = ("_width", "_height")

    def __init__(self, width: int, height: int) -> None:
        if width < 1 or height < 1:
            raise ValueError("Playfield dimensions must be at least 1×1.")
        self._width = width
        self._height = height

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def area(self) -> int:
        return self._width * self._height

    def in_bounds(self, cell: Cell) -> bool:
        """Check whether a coordinate lies within the board."""
        x, y = cell
        return 0 <= x < self._width and 0 <= y < self._height

    def random_cell(self, rng: np.random.Generator) -> Cell:
        """Draw a uniformly random in-bounds cell."""
        x = int(rng.integers(0, self._width))
        y = int(rng.integers(0, self._height))
        return x, y

    def snapshot(
        self,
        body: Iterable[Cell] = (),
        food: Iterable[Cell] = (),
    ) -> np.ndarray:
        """Return a ``(height, width)`` int8 array of glyph codes."""
        cells = np.zeros((self._height, self._width), dtype=np.int8)
        for x, y in food:
            cells[y, x] = GlyphKind.FOOD
        for x, y in body:
            cells[y, x] = GlyphKind.BODY
        return cells

    def free_cells(
        self,
        body: Iterable[Cell] = (),
        food: Iterable[Cell] = (),
    ) -> list[Cell]:
        """Return every cell holding neither body nor food."""
        ys, xs = np.where(self.snapshot(body, food) == GlyphKind.BACKGROUND)
        return list(zip(xs.tolist(), ys.tolist(), strict=True))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Playfield):
            return NotImplemented
        return (self._width, self._height) == (other._width, other._height)

    def __hash__(self) -> int:
        return hash((self._width, self._height))

    def __repr__(self) -> str:
        return f"Playfield({self._width}x{self._height})"

    def to_dict(self) -> dict:
        """Serialize playfield bounds to a dictionary."""
        return {"width": self._width, "height": self._height}
