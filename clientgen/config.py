"""Per-run generator settings."""

from __future__ import annotations

import logging
from dataclasses import dataclass

# Retry policy baked into generated clients
DEFAULT_MAX_ATTEMPTS = 3
DEFAULT_BACKOFF_UNIT = 0.1  # seconds; wait before attempt n+1 is n * unit


@dataclass(frozen=True)
class GeneratorConfig:
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    backoff_unit: float = DEFAULT_BACKOFF_UNIT
    client_class: str = "Client"
    # Raise instead of warning when two operations share a generated name
    strict_names: bool = False

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {self.max_attempts}")
        if self.backoff_unit < 0:
            raise ValueError(f"backoff_unit must not be negative, got {self.backoff_unit}")
        if not self.client_class.isidentifier():
            raise ValueError(f"client_class must be an identifier, got {self.client_class!r}")


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
