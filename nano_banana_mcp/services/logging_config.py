"""
Logging configuration for nano-banana-mcp.

Three sinks, set up once by `configure_logging()`:
- stderr console (stdout is reserved for the MCP stdio transport)
- `nano-banana-mcp.log`, human-readable and rotated
- `events.jsonl`, one JSON object per line, written through `log_event()`

Files go to `NANO_BANANA_MCP_LOG_DIR`, else `OUTPUT_DIR/logs`, else
`~/Downloads/images/logs`.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from ..config.paths import get_log_directory
from ..config.settings import Settings, get_settings

EVENTS_LOGGER = "nano_banana_mcp.events"
LOG_FILENAME = "nano-banana-mcp.log"
EVENTS_FILENAME = "events.jsonl"

# httpx logs full request URLs at INFO, and the API key travels in the query string
_NOISY_LOGGERS = ("httpx", "httpcore")

_CONFIGURED = False


class EventFormatter(logging.Formatter):
    """Render an event record as a single JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "event": record.getMessage(),
            **getattr(record, "event_fields", {}),
        }
        return json.dumps(payload, ensure_ascii=False, default=str)


def _rotating_handler(path: Path, settings: Settings, formatter: logging.Formatter) -> RotatingFileHandler:
    handler = RotatingFileHandler(
        path,
        maxBytes=settings.log_max_bytes,
        backupCount=settings.log_backup_count,
        encoding="utf-8",
    )
    handler.setFormatter(formatter)
    return handler


def _writes_to(logger: logging.Logger, path: Path) -> bool:
    return any(
        isinstance(handler, RotatingFileHandler) and handler.baseFilename == str(path)
        for handler in logger.handlers
    )


def configure_logging() -> None:
    """Attach console, file and events handlers (idempotent)."""
    global _CONFIGURED
    if _CONFIGURED:
        return

    settings = get_settings()
    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    formatter = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S%z",
    )

    if not any(type(handler) is logging.StreamHandler for handler in root_logger.handlers):
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(formatter)
        root_logger.addHandler(console)

    events_logger = logging.getLogger(EVENTS_LOGGER)
    events_logger.setLevel(logging.INFO)
    events_logger.propagate = False

    try:
        log_dir = get_log_directory()
        log_file = log_dir / LOG_FILENAME
        events_file = log_dir / EVENTS_FILENAME

        if not _writes_to(root_logger, log_file):
            root_logger.addHandler(_rotating_handler(log_file, settings, formatter))
        if not _writes_to(events_logger, events_file):
            events_logger.addHandler(_rotating_handler(events_file, settings, EventFormatter()))
    except OSError:
        root_logger.exception("Failed to initialize file logging; continuing with console logging only")

    _CONFIGURED = True


def log_event(event: str, **fields: Any) -> None:
    """Record a structured event on the events logger."""
    logging.getLogger(EVENTS_LOGGER).info(event, extra={"event_fields": fields})
