"""Movement directions and the shared, thread-safe direction state."""

from __future__ import annotations

import enum
import threading


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values.

    Screen coordinates: ``y`` grows downward.
    """

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @classmethod
    def parse(cls, name: str) -> Direction:
        """Look a direction up by case-insensitive name."""
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"Unknown direction: {name!r}.") from None


# 90° rotations. There is deliberately no reverse table.
_LEFT_OF: dict[Direction, Direction] = {
    Direction.RIGHT: Direction.UP,
    Direction.LEFT: Direction.DOWN,
    Direction.UP: Direction.LEFT,
    Direction.DOWN: Direction.RIGHT,
}

_RIGHT_OF: dict[Direction, Direction] = {
    Direction.RIGHT: Direction.DOWN,
    Direction.LEFT: Direction.UP,
    Direction.UP: Direction.RIGHT,
    Direction.DOWN: Direction.LEFT,
}


def turned_left(direction: Direction) -> Direction:
    return _LEFT_OF[direction]


def turned_right(direction: Direction) -> Direction:
    return _RIGHT_OF[direction]


class DirectionState:
    """The one value shared between the game loop and the input listener.

    Every read and every turn happens under a lock, and a turn replaces the
    whole value at once, so a reader never observes a half-applied update.
    """

    def __init__(self, direction: Direction = Direction.RIGHT) -> None:
        self._direction = direction
        self._lock = threading.Lock()

    @property
    def current(self) -> Direction:
        """Return a snapshot of the current direction."""
        with self._lock:
            return self._direction

    def turn_left(self) -> Direction:
        """Rotate 90° counter-clockwise and return the new direction."""
        with self._lock:
            self._direction = _LEFT_OF[self._direction]
            return self._direction

    def turn_right(self) -> Direction:
        """Rotate 90° clockwise and return the new direction."""
        with self._lock:
            self._direction = _RIGHT_OF[self._direction]
            return self._direction

    def __repr__(self) -> str:
        return f"DirectionState({self.current.name})"
