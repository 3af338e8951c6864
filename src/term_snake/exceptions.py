"""Exception types raised by the game core."""

from __future__ import annotations


class ConfigError(ValueError):
    """A game configuration that cannot produce a playable board."""


class BackendError(RuntimeError):
    """The render sink or input source kept failing past the allowed limit."""
