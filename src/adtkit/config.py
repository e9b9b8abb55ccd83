"""Library configuration: log level and log format."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from adtkit._logging import configure_logging

__all__ = [
    "Config",
    "get_config",
    "init",
    "reset",
]

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_FORMATS = ("json", "console")


@dataclass(frozen=True)
class Config:
    """Configuration for adtkit.

    Configuration only affects logging. What the ``from_throwable`` and
    ``from_awaitable`` constructors capture is fixed.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
        log_format: "json" or "console" output when log_level is set.
    """

    log_level: str | None = None
    log_format: str = "json"


_DEFAULT = Config()

# Global configuration (set by init())
_config: Config = _DEFAULT


def _resolve_log_level(log_level: str | None) -> str | None:
    """Resolve the log level from the argument or ADTKIT_LOG_LEVEL."""
    level = log_level if log_level is not None else os.environ.get("ADTKIT_LOG_LEVEL")
    if not level:
        return None
    level = level.upper()
    if level not in _LEVELS:
        logging.warning("Unknown log level '%s', defaulting to INFO", level)
        return "INFO"
    return level


def _resolve_log_format(log_format: str | None) -> str:
    """Resolve the log format from the argument or ADTKIT_LOG_FORMAT."""
    fmt = log_format if log_format is not None else os.environ.get("ADTKIT_LOG_FORMAT", "json")
    fmt = fmt.lower()
    if fmt not in _FORMATS:
        msg = f"log_format must be one of {_FORMATS}, got {fmt!r}"
        raise ValueError(msg)
    return fmt


def init(
    log_level: str | None = None,
    log_format: str | None = None,
) -> Config:
    """Install the adtkit configuration.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). Falls back to the
            ADTKIT_LOG_LEVEL environment variable; None = leave logging alone.
        log_format: "json" or "console". Falls back to ADTKIT_LOG_FORMAT,
            then "json".

    Returns:
        The Config that was set.

    Raises:
        ValueError: If the log format is not recognised.

    Example:
        ```python
        from adtkit import config

        config.init(log_level="DEBUG", log_format="console")
        ```
    """
    global _config  # noqa: PLW0603

    _config = Config(
        log_level=_resolve_log_level(log_level),
        log_format=_resolve_log_format(log_format),
    )

    if _config.log_level is not None:
        configure_logging(_config.log_level, json_output=_config.log_format == "json")

    return _config


def get_config() -> Config:
    """Get the current configuration, or the defaults if init() was never called."""
    return _config


def reset() -> None:
    """Restore the default configuration."""
    global _config  # noqa: PLW0603
    _config = _DEFAULT
