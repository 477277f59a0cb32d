"""
Logging setup for the storefront.

    from storefront.logging import get_logger
    logger = get_logger(__name__)

The root logger is configured once, on first import. LOG_LEVEL picks the
level; STOREFRONT_ENV=production switches to the short line format that the
hosting platform already timestamps.
"""

import logging
import os
import sys
from functools import cache

DETAILED_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
PRODUCTION_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

# Supabase (postgrest) and Upstash both log every HTTP round trip at INFO
NOISY_LOGGERS = ("httpx", "httpcore", "hpack", "postgrest", "supabase")

# CR/LF/TAB would let user input forge extra log lines (CWE-117)
_LOG_ESCAPES = str.maketrans({"\n": "\\n", "\r": "\\r", "\t": "\\t", "\x00": None})


def configure_logging(level: str | None = None, production: bool | None = None) -> None:
    """Attach a stdout handler to the root logger unless one is already there."""
    root = logging.getLogger()
    if root.handlers:
        return

    level_name = (level or os.environ.get("LOG_LEVEL", "INFO")).upper()
    if production is None:
        production = os.environ.get("STOREFRONT_ENV") == "production"

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(PRODUCTION_FORMAT if production else DETAILED_FORMAT))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level_name, logging.INFO))

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


configure_logging()


@cache
def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def _clip(value: str, limit: int, marker: str = "") -> str:
    return value if len(value) <= limit else value[:limit] + marker


def sanitize_id_for_logging(id_value: str | None) -> str:
    """Session/order ids are logged by their first 8 characters only."""
    if not id_value:
        return "N/A"
    return _clip(str(id_value).translate(_LOG_ESCAPES), 8)


def sanitize_string_for_logging(value: str | None, max_length: int = 50) -> str:
    """Customer-supplied text (names, search terms), escaped and shortened."""
    if not value:
        return "N/A"
    return _clip(str(value).translate(_LOG_ESCAPES), max_length, "...")
