"""Food placement logic."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from term_snake.grid import Playfield
    from term_snake.snake import Snake

logger = logging.getLogger(__name__)

Cell = tuple[int, int]

DEFAULT_MAX_ATTEMPTS = 10_000


def food_target(playfield: Playfield, density: float, body_length: int) -> int:
    """Number of food cells wanted for the current body length.

    Scales with ``width + height`` rather than the area, which keeps large
    boards sparse.
    """
    raw = (playfield.width + playfield.height - body_length) * density
    return max(0, math.floor(raw))


class FoodSet:
    """A deduplicated set of food cells placed by rejection sampling.

    Uses a seeded NumPy RNG for reproducible placement.
    """

    def __init__(
        self,
        rng: np.random.Generator | None = None,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1.")
        self.rng = rng if rng is not None else np.random.default_rng()
        self.max_attempts = max_attempts
        self.cells: set[Cell] = set()

    def initialize(
        self, playfield: Playfield, density: float, body: Snake,
    ) -> list[Cell]:
        """Fill the set up to its starting target.

        Returns the list of placed positions.
        """
        placed: list[Cell] = []
        for _ in range(food_target(playfield, density, len(body))):
            cell = self._place_one(playfield, body)
            if cell is None:
                break
            placed.append(cell)
        logger.debug("Placed %d initial food cells.", len(placed))
        return placed

    def replenish(
        self, playfield: Playfield, density: float, body: Snake,
    ) -> Cell | None:
        """Place at most one cell if the set is below its target.

        The target never drops below one while the board has room.
        """
        target = max(1, food_target(playfield, density, len(body)))
        if len(self.cells) >= target:
            return None
        return self._place_one(playfield, body)

    def consume(self, cell: Cell) -> None:
        """Remove a food cell; absent cells are ignored."""
        self.cells.discard(cell)

    def _place_one(self, playfield: Playfield, body: Snake) -> Cell | None:
        for _ in range(self.max_attempts):
            cell = playfield.random_cell(self.rng)
            if cell not in body and cell not in self.cells:
                self.cells.add(cell)
                return cell

        free = playfield.free_cells(body, self.cells)
        if not free:
            logger.warning("No free cells available for food placement.")
            return None
        logger.warning(
            "Rejection sampling gave up after %d attempts; "
            "choosing among %d free cells.",
            self.max_attempts, len(free),
        )
        cell = free[int(self.rng.integers(0, len(free)))]
        self.cells.add(cell)
        return cell

    def __contains__(self, cell: object) -> bool:
        return cell in self.cells

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(sorted(self.cells))

    def to_dict(self) -> dict:
        """Serialize food state to a dictionary."""
        return {"positions": [list(p) for p in sorted(self.cells)]}
