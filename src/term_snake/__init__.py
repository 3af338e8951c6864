"""Term Snake — terminal snake game core."""

from term_snake.config import GameConfig
from term_snake.direction import Direction, DirectionState
from term_snake.engine import GameEngine, GameResult, GameStatus
from term_snake.exceptions import BackendError, ConfigError
from term_snake.food import FoodSet
from term_snake.grid import GlyphKind, Playfield
from term_snake.input import InputEvent, InputListener
from term_snake.render import FrameBuffer, RenderSink
from term_snake.rules import Outcome, evaluate
from term_snake.snake import Snake

__all__ = [
    "BackendError",
    "ConfigError",
    "Direction",
    "DirectionState",
    "FoodSet",
    "FrameBuffer",
    "GameConfig",
    "GameEngine",
    "GameResult",
    "GameStatus",
    "GlyphKind",
    "InputEvent",
    "InputListener",
    "Outcome",
    "Playfield",
    "RenderSink",
    "Snake",
    "evaluate",
]
