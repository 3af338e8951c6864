"""Input events and the background thread that applies them."""

from __future__ import annotations

import enum
import logging
import threading
from collections.abc import Iterable

from term_snake.direction import DirectionState
from term_snake.exceptions import BackendError

logger = logging.getLogger(__name__)


class InputEvent(enum.Enum):
    """Discrete events produced by an input source."""

    TURN_LEFT = "turn_left"
    TURN_RIGHT = "turn_right"
    QUIT = "quit"
    OTHER = "other"


class InputListener:
    """Feeds events from an input source into the shared direction state.

    Runs on a daemon thread. Turn events rotate the direction; a quit event
    sets :attr:`quit_event`, which the game loop watches. Transient
    ``OSError`` reads are skipped; after *max_failures* consecutive ones the
    listener stops and records a :class:`BackendError` for the loop to
    raise.
    """

    def __init__(
        self,
        source: Iterable[InputEvent],
        direction: DirectionState,
        quit_event: threading.Event | None = None,
        max_failures: int = 5,
    ) -> None:
        if max_failures < 1:
            raise ValueError("max_failures must be at least 1.")
        self.source = source
        self.direction = direction
        self.quit_event = quit_event if quit_event is not None else threading.Event()
        self.max_failures = max_failures
        self.error: BackendError | None = None
        self._thread: threading.Thread | None = None

    def start(self) -> None:
        """Start listening in the background."""
        if self._thread is not None:
            raise RuntimeError("Input listener already started.")
        self._thread = threading.Thread(
            target=self.run, name="input-listener", daemon=True,
        )
        self._thread.start()

    @property
    def alive(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def join(self, timeout: float | None = None) -> None:
        if self._thread is not None:
            self._thread.join(timeout)

    def handle(self, event: InputEvent) -> None:
        """Apply a single event."""
        if event is InputEvent.TURN_LEFT:
            logger.debug("Turned left to %s.", self.direction.turn_left().name)
        elif event is InputEvent.TURN_RIGHT:
            logger.debug("Turned right to %s.", self.direction.turn_right().name)
        elif event is InputEvent.QUIT:
            logger.info("Quit requested.")
            self.quit_event.set()

    def run(self) -> None:
        """Consume the source until it ends, quit is requested, or it breaks."""
        events = iter(self.source)
        failures = 0
        while not self.quit_event.is_set():
            try:
                event = next(events)
            except StopIteration:
                logger.debug("Input source exhausted.")
                return
            except OSError as exc:
                failures += 1
                logger.warning(
                    "Input read failed (%d/%d): %s",
                    failures, self.max_failures, exc,
                )
                if failures >= self.max_failures:
                    self.error = BackendError(
                        f"Input source failed {failures} times in a row.",
                    )
                    return
                continue
            failures = 0
            self.handle(event)
