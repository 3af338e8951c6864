"""Tick-based game loop composing playfield, snake, food, and rules."""

from __future__ import annotations

import enum
import logging
import threading
from collections.abc import Iterable
from dataclasses import dataclass

import numpy as np

from term_snake.config import GameConfig
from term_snake.direction import DirectionState
from term_snake.exceptions import BackendError
from term_snake.food import FoodSet
from term_snake.grid import GlyphKind
from term_snake.input import InputEvent, InputListener
from term_snake.render import RenderSink
from term_snake.rules import Outcome, evaluate
from term_snake.snake import Snake

logger = logging.getLogger(__name__)

Cell = tuple[int, int]

_LISTENER_JOIN_TIMEOUT = 1.0  # seconds


class GameStatus(enum.Enum):
    RUNNING = "running"
    TERMINATED = "terminated"


@dataclass(frozen=True)
class GameResult:
    """How a finished game ended.

    ``outcome`` is the terminal collision, or ``None`` if the player quit.
    """

    outcome: Outcome | None
    ticks: int
    eaten: int
    length: int

    @property
    def quit(self) -> bool:
        return self.outcome is None

    def summary(self) -> str:
        if self.outcome is None:
            ending = "quit"
        else:
            ending = self.outcome.value.replace("_", " ")
        return (
            f"Game over ({ending}) after {self.ticks} ticks: "
            f"ate {self.eaten}, length {self.length}."
        )


class GameEngine:
    """Single-snake, tick-based game engine.

    The engine owns the snake and food set outright; only the direction
    state is shared with the input listener. Each call to :meth:`step`
    advances the game by one tick and sends the changed cells to the
    render sink. :meth:`run` repeats that at the configured cadence.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        sink: RenderSink | None = None,
        snake: Snake | None = None,
    ) -> None:
        cfg = config or GameConfig()
        self.config = cfg
        self.playfield = cfg.playfield
        self.sink = sink
        self.rng = np.random.default_rng(cfg.seed)

        if snake is None:
            snake = Snake(
                cfg.start_x, cfg.effective_start_y, cfg.heading,
                cfg.initial_length,
            )
        self.snake = snake
        self.direction = DirectionState(cfg.heading)

        self.food = FoodSet(rng=self.rng, max_attempts=cfg.max_placement_attempts)
        self.food.initialize(self.playfield, cfg.food_density, self.snake)

        self.status = GameStatus.RUNNING
        self.outcome: Outcome | None = None
        self.tick = 0
        self.eaten = 0
        self.quit_event = threading.Event()
        self._draw_failures = 0

    @property
    def running(self) -> bool:
        return self.status == GameStatus.RUNNING

    def draw_board(self) -> None:
        """Send the full board: background, then food, then the snake."""
        for y in range(self.playfield.height):
            for x in range(self.playfield.width):
                self._draw((x, y), GlyphKind.BACKGROUND)
        for cell in self.food:
            self._draw(cell, GlyphKind.FOOD)
        for cell in self.snake:
            self._draw(cell, GlyphKind.BODY)

    def step(self) -> Outcome | None:
        """Advance the game by one tick and return the move's outcome.

        Once terminated the game no longer moves; the terminal outcome is
        returned again (``None`` after a quit).
        """
        if not self.running:
            return self.outcome

        self._maybe_wander()
        direction = self.direction.current
        head = self.snake.advance(direction)
        outcome = evaluate(head, self.playfield, self.snake, self.food)
        self.tick += 1

        if outcome.is_terminal:
            self.status = GameStatus.TERMINATED
            self.outcome = outcome
            logger.info(
                "Snake died (%s) at tick %d with length %d.",
                outcome.value, self.tick, len(self.snake),
            )
            return outcome

        grow = outcome is Outcome.FOOD_CONSUMED
        vacated = self.snake.commit(head, grow=grow)
        if vacated is not None:
            self._draw(vacated, GlyphKind.BACKGROUND)
        self._draw(head, GlyphKind.BODY)

        if grow:
            self.eaten += 1
            self.food.consume(head)
            placed = self.food.replenish(
                self.playfield, self.config.food_density, self.snake,
            )
            if placed is not None:
                self._draw(placed, GlyphKind.FOOD)
            logger.debug("Ate food at %s; length now %d.", head, len(self.snake))

        return outcome

    def run(self, source: Iterable[InputEvent] | None = None) -> GameResult:
        """Play until a collision or a quit event.

        When *source* is given, an :class:`InputListener` consumes it on a
        background thread for the duration of the game. The listener is
        stopped and the sink's final render requested however the game
        ends, including on a :class:`BackendError`.
        """
        listener = None
        if source is not None:
            listener = InputListener(
                source,
                self.direction,
                quit_event=self.quit_event,
                max_failures=self.config.max_io_failures,
            )

        logger.info(
            "Starting game on %s, snake length %d, %d food.",
            self.playfield, len(self.snake), len(self.food),
        )
        try:
            self.draw_board()
            if listener is not None:
                listener.start()
            self._loop(listener)
        finally:
            self.status = GameStatus.TERMINATED
            self.quit_event.set()
            if listener is not None:
                listener.join(_LISTENER_JOIN_TIMEOUT)
                if listener.alive:
                    logger.warning("Input listener did not stop in time.")
            result = self.result()
            logger.info("%s", result.summary())
            self._finish(result)
        return result

    def _loop(self, listener: InputListener | None) -> None:
        interval = self.config.tick_interval
        while self.running:
            if listener is not None and listener.error is not None:
                raise listener.error
            if self.quit_event.is_set():
                self.status = GameStatus.TERMINATED
                break
            self.step()
            if self.running:
                self.quit_event.wait(interval)

    def _finish(self, result: GameResult) -> None:
        if self.sink is None:
            return
        try:
            self.sink.finish(result)
        except OSError as exc:
            logger.warning("Final render failed: %s", exc)

    def result(self) -> GameResult:
        return GameResult(
            outcome=self.outcome,
            ticks=self.tick,
            eaten=self.eaten,
            length=len(self.snake),
        )

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "tick": self.tick,
            "eaten": self.eaten,
            "status": self.status.value,
            "outcome": self.outcome.value if self.outcome else None,
            "direction": self.direction.current.name.lower(),
            "playfield": self.playfield.to_dict(),
            "snake": self.snake.to_dict(),
            "food": self.food.to_dict(),
        }

    def _maybe_wander(self) -> None:
        """Occasionally turn on the player's behalf."""
        chance = self.config.wander_chance
        if chance <= 0.0 or self.rng.random() >= chance:
            return
        if self.rng.integers(0, 2) == 1:
            self.direction.turn_left()
        else:
            self.direction.turn_right()

    def _draw(self, cell: Cell, glyph: GlyphKind) -> None:
        if self.sink is None:
            return
        try:
            self.sink.draw(cell, glyph)
        except OSError as exc:
            self._draw_failures += 1
            logger.warning(
                "Dropped draw of %s at %s (%d/%d): %s",
                glyph.name, cell, self._draw_failures,
                self.config.max_io_failures, exc,
            )
            if self._draw_failures >= self.config.max_io_failures:
                raise BackendError(
                    f"Render sink failed {self._draw_failures} times in a row.",
                ) from exc
            return
        self._draw_failures = 0
