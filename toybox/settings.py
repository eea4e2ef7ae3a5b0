"""Environment-driven settings for toybox.

Reads TOYBOX_* variables once and returns a frozen Settings value.
CLI options take precedence over anything read here.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from toybox.errors import ConfigError

SEED_VAR = "TOYBOX_SEED"
LOG_LEVEL_VAR = "TOYBOX_LOG_LEVEL"

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    """Runtime configuration.

    Attributes:
        seed: Fixed seed for the guessing game. None means seed from the clock.
        log_level: Name of the logging level for the toybox logger.
    """

    seed: Optional[int] = None
    log_level: str = "WARNING"

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from environment variables.

    Args:
        env: Mapping to read from. Defaults to os.environ.

    Raises:
        ConfigError: if TOYBOX_SEED is not an integer or TOYBOX_LOG_LEVEL
            is not a known level name.
    """
    env = os.environ if env is None else env

    seed = None
    raw_seed = env.get(SEED_VAR, "").strip()
    if raw_seed:
        try:
            seed = int(raw_seed)
        except ValueError:
            raise ConfigError(f"{SEED_VAR} must be an integer, got {raw_seed!r}") from None

    log_level = env.get(LOG_LEVEL_VAR, "WARNING").strip().upper() or "WARNING"
    if log_level not in _LEVELS:
        raise ConfigError(
            f"{LOG_LEVEL_VAR} must be one of {', '.join(_LEVELS)}, got {log_level!r}"
        )

    return Settings(seed=seed, log_level=log_level)
