"""Render sink contract and an in-memory sink."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

import numpy as np

from term_snake.grid import GlyphKind

if TYPE_CHECKING:
    from term_snake.engine import GameResult

Cell = tuple[int, int]


class RenderSink(Protocol):
    """Receives cell-level draw instructions from the game loop.

    ``draw`` must be idempotent; the loop never relies on the order of
    draws between different cells.
    """

    def draw(self, cell: Cell, glyph: GlyphKind) -> None: ...

    def finish(self, result: GameResult) -> None: ...


class FrameBuffer:
    """NumPy-backed sink that records the last glyph drawn on each cell.

    Used for headless runs and tests.
    """

    def __init__(self, width: int, height: int) -> None:
        self.cells = np.zeros((height, width), dtype=np.int8)
        self.draw_count = 0
        self.result: GameResult | None = None

    def draw(self, cell: Cell, glyph: GlyphKind) -> None:
        x, y = cell
        self.cells[y, x] = glyph
        self.draw_count += 1

    def finish(self, result: GameResult) -> None:
        self.result = result

    def get(self, cell: Cell) -> GlyphKind:
        """Return the glyph last drawn at *cell*."""
        x, y = cell
        return GlyphKind(self.cells[y, x])

    def to_dict(self) -> dict:
        """Serialize the frame to a dictionary."""
        return {"cells": self.cells.tolist()}
