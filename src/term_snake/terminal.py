"""Terminal front end: a blessed-backed render sink and key reader."""

from __future__ import annotations

import threading
from collections.abc import Iterator
from typing import TYPE_CHECKING

import blessed

from term_snake.grid import GlyphKind
from term_snake.input import InputEvent

if TYPE_CHECKING:
    from term_snake.engine import GameResult

Cell = tuple[int, int]

_KEY_EVENTS: dict[str, InputEvent] = {
    "KEY_LEFT": InputEvent.TURN_LEFT,
    "KEY_RIGHT": InputEvent.TURN_RIGHT,
    "KEY_ESCAPE": InputEvent.QUIT,
}

_CHAR_EVENTS: dict[str, InputEvent] = {
    "a": InputEvent.TURN_LEFT,
    "d": InputEvent.TURN_RIGHT,
    "q": InputEvent.QUIT,
}


def key_to_event(key: blessed.keyboard.Keystroke) -> InputEvent:
    """Translate a keystroke into a game input event."""
    if key.is_sequence:
        return _KEY_EVENTS.get(key.name, InputEvent.OTHER)
    return _CHAR_EVENTS.get(str(key).lower(), InputEvent.OTHER)


class TerminalSink:
    """Draws cells straight to the terminal with cursor addressing."""

    def __init__(self, term: blessed.Terminal, height: int) -> None:
        self.term = term
        self.height = height
        self.glyphs: dict[GlyphKind, str] = {
            GlyphKind.BODY: term.cyan("o"),
            GlyphKind.FOOD: term.red("x"),
            GlyphKind.BACKGROUND: ".",
        }

    def clear(self) -> None:
        print(self.term.home + self.term.clear, end="", flush=True)

    def draw(self, cell: Cell, glyph: GlyphKind) -> None:
        x, y = cell
        print(self.term.move_xy(x, y) + self.glyphs[glyph], end="", flush=True)

    def finish(self, result: GameResult) -> None:
        print(self.term.move_xy(0, self.height) + result.summary(), flush=True)


class TerminalInput:
    """Stream of input events read from the keyboard.

    Must be consumed while the terminal is in cbreak mode. Ends once
    *stop* is set, so a reader thread lets go of the terminal before the
    terminal mode is restored.
    """

    def __init__(
        self,
        term: blessed.Terminal,
        stop: threading.Event | None = None,
        poll_interval: float = 0.1,
    ) -> None:
        self.term = term
        self.stop = stop if stop is not None else threading.Event()
        self.poll_interval = poll_interval

    def __iter__(self) -> Iterator[InputEvent]:
        return self

    def __next__(self) -> InputEvent:
        while not self.stop.is_set():
            key = self.term.inkey(timeout=self.poll_interval)
            if key:
                return key_to_event(key)
        raise StopIteration
