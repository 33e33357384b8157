from __future__ import annotations

import logging
import sys
from typing import TextIO

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str = "INFO", stream: TextIO | None = None) -> logging.Logger:
    """Attach a single stream handler to the ``xrate`` logger.

    Calling it again replaces the handler it added earlier instead of stacking
    another one; records still propagate to the root logger.
    """
    logger = logging.getLogger("xrate")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    for handler in list(logger.handlers):
        if getattr(handler, "_xrate_handler", False):
            logger.removeHandler(handler)
    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._xrate_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    return logger


def mask_access_key(url: str, access_key: str) -> str:
    """Return ``url`` with the ``access_key`` query value replaced, safe for log records."""
    if not access_key:
        return url
    return url.replace(f"access_key={access_key}", "access_key=***")
