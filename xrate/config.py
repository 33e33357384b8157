from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from xrate.errors import ConfigurationError, MissingAccessKeyError
from xrate.logging_conf import setup_logging

if TYPE_CHECKING:
    from xrate.reader import ExchangeRateReader

# ---------- Environment ----------
ACCESS_KEY_VAR = "FIXER_IO_ACCESS_KEY"
DEFAULT_API_BASE = "http://data.fixer.io/api/"
DEFAULT_TIMEOUT = 6.0


def load_access_key(variable: str = ACCESS_KEY_VAR) -> str:
    access_key = os.getenv(variable)
    if not access_key:
        raise MissingAccessKeyError(variable)
    return access_key


def load_api_base() -> str:
    return os.getenv("FX_API_BASE", DEFAULT_API_BASE)


def load_timeout() -> float:
    raw = os.getenv("HTTP_TIMEOUT", str(DEFAULT_TIMEOUT))
    try:
        return float(raw)
    except ValueError as e:
        raise ConfigurationError(f"HTTP_TIMEOUT must be a number of seconds, got {raw!r}") from e


def load_log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO")


def setup_logging_from_env() -> logging.Logger:
    return setup_logging(load_log_level())


def reader_from_env() -> ExchangeRateReader:
    """Build a reader entirely from environment settings."""
    from xrate.reader import ExchangeRateReader

    return ExchangeRateReader(load_api_base(), access_key=load_access_key(), timeout=load_timeout())
