"""Logging setup for the CLI and the web app.

The library modules only create loggers; handlers are installed here, once,
by whichever entry point is running.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

from rich.console import Console
from rich.logging import RichHandler

_EXTRA_FIELDS = ("decision", "score", "category", "content_type", "catalog_path", "degraded")


class JSONFormatter(logging.Formatter):
    """Render a log record as a single JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


_configured = False


def setup_logging(level: str = "INFO", fmt: str = "text") -> None:
    """Install one stream handler on the ``contentguard`` logger.

    Repeated calls only adjust the level.
    """
    global _configured
    root = logging.getLogger("contentguard")
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    if _configured:
        return

    handler: logging.Handler
    if fmt == "json":
        handler = logging.StreamHandler()
        handler.setFormatter(JSONFormatter())
    else:
        handler = RichHandler(console=Console(stderr=True), show_path=False)
    root.addHandler(handler)
    _configured = True
