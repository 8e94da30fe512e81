"""Service settings from environment variables, and logging setup."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


@dataclass(frozen=True)
class Settings:
    """Bind address and log level for the API process."""

    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"


def load_settings() -> Settings:
    """Read MORTGAGE_API_HOST, MORTGAGE_API_PORT and MORTGAGE_LOG_LEVEL, with defaults."""
    port = os.environ.get("MORTGAGE_API_PORT", "3000")
    try:
        port_number = int(port)
    except ValueError:
        raise ValueError(f"MORTGAGE_API_PORT must be an integer, got {port!r}") from None
    return Settings(
        host=os.environ.get("MORTGAGE_API_HOST", "0.0.0.0"),
        port=port_number,
        log_level=os.environ.get("MORTGAGE_LOG_LEVEL", "INFO").upper(),
    )


def configure_logging(level: str = "INFO") -> None:
    """Install a stream handler on the root logger (no-op if one is already configured)."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
