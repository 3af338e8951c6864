"""Game configuration, fixed for the lifetime of a game."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from term_snake.direction import Direction
from term_snake.exceptions import ConfigError
from term_snake.food import DEFAULT_MAX_ATTEMPTS, food_target
from term_snake.grid import Playfield

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Start-up parameters for a single game.

    ``start_x``/``start_y`` locate the snake's tail; the body extends from
    there in ``direction``. Supports JSON serialization.
    """

    # Playfield
    width: int = 100
    height: int = 15

    # Timing
    tick_ms: int = 100

    # Snake
    initial_length: int = 7
    start_x: int = 0
    start_y: int | None = None
    direction: str = "right"

    # Food
    food_density: float = 0.3
    max_placement_attempts: int = DEFAULT_MAX_ATTEMPTS

    # Behaviour
    wander_chance: float = 0.0
    max_io_failures: int = 5
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ConfigError("width and height must each be at least 1.")
        if self.tick_ms < 1:
            raise ConfigError("tick_ms must be at least 1.")
        if self.initial_length < 1:
            raise ConfigError("initial_length must be at least 1.")
        if not 0.0 <= self.food_density <= 1.0:
            raise ConfigError("food_density must be between 0 and 1.")
        if not 0.0 <= self.wander_chance <= 1.0:
            raise ConfigError("wander_chance must be between 0 and 1.")
        if self.max_placement_attempts < 1:
            raise ConfigError("max_placement_attempts must be at least 1.")
        if self.max_io_failures < 1:
            raise ConfigError("max_io_failures must be at least 1.")
        try:
            heading = Direction.parse(self.direction)
        except ValueError as exc:
            raise ConfigError(str(exc)) from None

        area = self.width * self.height
        if area <= self.initial_length:
            raise ConfigError(
                "initial_length leaves no free cells on a "
                f"{self.width}x{self.height} playfield."
            )

        dx, dy = heading.value
        tail = (self.start_x, self.effective_start_y)
        head = (
            tail[0] + dx * (self.initial_length - 1),
            tail[1] + dy * (self.initial_length - 1),
        )
        if not (self.playfield.in_bounds(tail) and self.playfield.in_bounds(head)):
            raise ConfigError(
                "initial_length does not fit the playfield from the start "
                "position; move the start or shorten the snake."
            )

        wanted = food_target(self.playfield, self.food_density, self.initial_length)
        if wanted > area - self.initial_length:
            raise ConfigError(
                f"food_density asks for {wanted} food cells but only "
                f"{area - self.initial_length} are free."
            )

    @property
    def effective_start_y(self) -> int:
        if self.start_y is not None:
            return self.start_y
        return self.height // 2

    @property
    def heading(self) -> Direction:
        return Direction.parse(self.direction)

    @property
    def playfield(self) -> Playfield:
        return Playfield(self.width, self.height)

    @property
    def tick_interval(self) -> float:
        """Tick interval in seconds."""
        return self.tick_ms / 1000.0

    def to_dict(self) -> dict:
        """Serialize to a plain dict."""
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        try:
            raw = json.loads(Path(path).read_text())
        except (OSError, json.JSONDecodeError) as exc:
            raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
        if not isinstance(raw, dict):
            raise ConfigError(f"Config file {path} must hold a JSON object.")
        try:
            return cls(**raw)
        except TypeError as exc:
            raise ConfigError(f"Invalid config file {path}: {exc}") from None
