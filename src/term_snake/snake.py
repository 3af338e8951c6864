"""Snake body representation and movement logic."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator

from term_snake.direction import Direction

Cell = tuple[int, int]


class Snake:
    """A snake represented as an ordered deque of (x, y) body segments.

    The head is ``body[0]``; the tail is ``body[-1]``. A companion set
    mirrors the deque so membership tests stay O(1).
    """

    def __init__(
        self,
        tail_x: int,
        tail_y: int,
        direction: Direction = Direction.RIGHT,
        length: int = 3,
    ) -> None:
        if length < 1:
            raise ValueError("Snake length must be at least 1.")
        dx, dy = direction.value
        # Laid out from the tail forward, so the head ends up at the front.
        self.body: deque[Cell] = deque()
        for i in range(length):
            self.body.appendleft((tail_x + dx * i, tail_y + dy * i))
        self._cells: set[Cell] = set(self.body)

    @classmethod
    def from_cells(cls, cells: Iterable[Cell]) -> Snake:
        """Build a snake from explicit head-first cells."""
        segments = [tuple(c) for c in cells]
        if not segments:
            raise ValueError("Snake length must be at least 1.")
        if len(set(segments)) != len(segments):
            raise ValueError("Snake cells must not repeat.")
        snake = cls.__new__(cls)
        snake.body = deque(segments)
        snake._cells = set(segments)
        return snake

    @property
    def head(self) -> Cell:
        """Return the head coordinate."""
        return self.body[0]

    @property
    def tail(self) -> Cell:
        """Return the tail coordinate."""
        return self.body[-1]

    def advance(self, direction: Direction) -> Cell:
        """Compute the next head position without moving."""
        dx, dy = direction.value
        x, y = self.head
        return x + dx, y + dy

    def commit(self, head: Cell, grow: bool = False) -> Cell | None:
        """Move onto an already validated *head* cell.

        Returns the vacated tail cell, or ``None`` if the snake grew.
        """
        vacated = None
        if not grow:
            vacated = self.body.pop()
            self._cells.discard(vacated)
        if head in self._cells:
            if vacated is not None:
                self.body.append(vacated)
                self._cells.add(vacated)
            raise ValueError(f"Cannot move onto occupied cell {head}.")
        self.body.appendleft(head)
        self._cells.add(head)
        return vacated

    def contains(self, cell: Cell) -> bool:
        """Check whether the snake occupies a given cell."""
        return cell in self._cells

    def __contains__(self, cell: object) -> bool:
        return cell in self._cells

    def __len__(self) -> int:
        return len(self.body)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.body)

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "body": [list(seg) for seg in self.body],
            "length": len(self.body),
        }
