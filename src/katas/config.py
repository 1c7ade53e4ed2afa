from __future__ import annotations

import logging
from dataclasses import dataclass


@dataclass(frozen=True)
class KatasConfig:
    log_level: str = "WARNING"
    log_format: str = "%(levelname)s %(name)s: %(message)s"
    json_indent: int | None = None  # None renders compact JSON


def configure_logging(config: KatasConfig) -> None:
    """Set the root logger level from *config*, adding a stderr handler if none exists."""
    level = logging.getLevelName(config.log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {config.log_level!r}")
    logging.basicConfig(format=config.log_format)
    logging.getLogger().setLevel(level)
    logging.getLogger(__name__).debug("Logging configured at %s", config.log_level)
