"""CLI launcher for the terminal snake game."""

from __future__ import annotations

import argparse
import logging
import sys

from term_snake.config import GameConfig
from term_snake.exceptions import BackendError, ConfigError

logger = logging.getLogger(__name__)

_EXIT_CONFIG_ERROR = 2
_EXIT_BACKEND_ERROR = 3


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="term-snake",
        description="Play snake in the terminal. Left/right arrows turn, q quits.",
    )
    parser.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file (flags override its values).",
    )
    parser.add_argument("--width", type=int, default=None)
    parser.add_argument("--height", type=int, default=None)
    parser.add_argument("--tick-ms", type=int, default=None)
    parser.add_argument("--length", type=int, default=None)
    parser.add_argument("--density", type=float, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--wander", type=float, default=None,
        help="Chance per tick of an unprompted random turn.",
    )
    parser.add_argument(
        "--log-file", type=str, default=None,
        help="Write logs here; nothing is logged without it.",
    )
    parser.add_argument(
        "--save-config", type=str, default=None,
        help="Write the effective config to this path and exit.",
    )
    return parser


def _build_config(args: argparse.Namespace) -> GameConfig:
    config = GameConfig.load(args.config) if args.config else GameConfig()

    overrides: dict = {}
    flag_map = {
        "width": "width",
        "height": "height",
        "tick_ms": "tick_ms",
        "length": "initial_length",
        "density": "food_density",
        "seed": "seed",
        "wander": "wander_chance",
    }
    for cli_name, cfg_name in flag_map.items():
        val = getattr(args, cli_name, None)
        if val is not None:
            overrides[cfg_name] = val

    if overrides:
        d = config.to_dict()
        d.update(overrides)
        config = GameConfig(**d)
    return config


def _play(config: GameConfig) -> int:
    import blessed

    from term_snake.engine import GameEngine
    from term_snake.terminal import TerminalInput, TerminalSink

    term = blessed.Terminal()
    sink = TerminalSink(term, config.height)
    engine = GameEngine(config, sink=sink)
    with term.cbreak(), term.hidden_cursor():
        sink.clear()
        engine.run(TerminalInput(term, stop=engine.quit_event))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``term-snake`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.log_file:
        logging.basicConfig(
            filename=args.log_file,
            level=logging.INFO,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )
    else:
        logging.getLogger("term_snake").addHandler(logging.NullHandler())

    try:
        config = _build_config(args)
    except ConfigError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)  # noqa: T201
        return _EXIT_CONFIG_ERROR

    if args.save_config:
        config.save(args.save_config)
        return 0

    try:
        return _play(config)
    except BackendError:
        logger.exception("Terminal backend failed.")
        print("Terminal I/O failed repeatedly; giving up.", file=sys.stderr)  # noqa: T201
        return _EXIT_BACKEND_ERROR


if __name__ == "__main__":
    sys.exit(main())
