"""Configuration utilities for the infrastructure layer.

Every setting is read from the environment at call time so tests and
the CLI can override it without import-order tricks.
"""

import os
from pathlib import Path

# src/kitchenpos/infrastructure/config.py -> repo root
_PROJECT_ROOT = Path(__file__).resolve().parents[3]


def get_data_dir() -> Path:
    """
    Directory holding the JSON data files.

    Returns:
        Path from KITCHENPOS_DATA_DIR, defaults to "<repo>/data"
    """
    raw = os.getenv("KITCHENPOS_DATA_DIR")
    if raw:
        return Path(raw).expanduser()
    return _PROJECT_ROOT / "data"


def get_purgomalum_url() -> str:
    """Base URL of the PurgoMalum profanity service."""
    return os.getenv("KITCHENPOS_PURGOMALUM_URL", "https://www.purgomalum.com").rstrip("/")


def get_http_timeout() -> float:
    """
    Timeout in seconds for outbound HTTP calls.

    Falls back to 5.0 when KITCHENPOS_HTTP_TIMEOUT is unset or not a number.
    """
    raw = os.getenv("KITCHENPOS_HTTP_TIMEOUT")
    if not raw:
        return 5.0
    try:
        return float(raw)
    except ValueError:
        return 5.0


_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def get_log_level() -> str:
    """
    Root log level name for the CLI.

    Falls back to "WARNING" when KITCHENPOS_LOG_LEVEL is unset or not a
    standard level name.
    """
    level = os.getenv("KITCHENPOS_LOG_LEVEL", "WARNING").strip().upper()
    if level not in _LOG_LEVELS:
        return "WARNING"
    return level
