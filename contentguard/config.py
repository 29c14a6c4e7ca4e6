"""Environment-driven settings for contentguard.

Every setting has a default so the engine works with no environment at all.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_MAX_INPUT_CHARS = 5000


def _int_env(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


@dataclass(frozen=True)
class Settings:
    """Process-wide configuration."""

    catalog_path: str | None = None
    max_input_chars: int = DEFAULT_MAX_INPUT_CHARS
    log_level: str = "INFO"
    log_format: str = "text"  # "text" | "json"

    @classmethod
    def from_env(cls) -> Settings:
        log_format = os.environ.get("CONTENTGUARD_LOG_FORMAT", "text").strip().lower()
        return cls(
            catalog_path=os.environ.get("CONTENTGUARD_CATALOG_PATH") or None,
            max_input_chars=_int_env("CONTENTGUARD_MAX_INPUT_CHARS", DEFAULT_MAX_INPUT_CHARS),
            log_level=os.environ.get("CONTENTGUARD_LOG_LEVEL", "INFO").strip() or "INFO",
            log_format=log_format if log_format in ("text", "json") else "text",
        )


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings for this process."""
    return Settings.from_env()
