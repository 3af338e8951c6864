"""Collision and food rules for a proposed head position."""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from term_snake.food import FoodSet
    from term_snake.grid import Playfield
    from term_snake.snake import Snake

Cell = tuple[int, int]


class Outcome(enum.Enum):
    """Result of evaluating one move."""

    VALID = "valid"
    WALL_COLLISION = "wall_collision"
    SELF_COLLISION = "self_collision"
    FOOD_CONSUMED = "food_consumed"

    @property
    def is_terminal(self) -> bool:
        return self in (Outcome.WALL_COLLISION, Outcome.SELF_COLLISION)


def evaluate(
    head: Cell,
    playfield: Playfield,
    body: Snake,
    food: FoodSet,
) -> Outcome:
    """Classify moving the snake's head onto *head*.

    Checks run in order: walls, own body, food. Landing on the current
    tail is legal when the move does not grow, since the tail leaves that
    cell in the same tick.
    """
    if not playfield.in_bounds(head):
        return Outcome.WALL_COLLISION

    will_grow = head in food
    if head in body and (will_grow or head != body.tail):
        return Outcome.SELF_COLLISION

    if will_grow:
        return Outcome.FOOD_CONSUMED
    return Outcome.VALID
