from __future__ import annotations

from datetime import datetime, timezone
import json
import logging
import sys

from .config import settings

_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
# Attributes passed through ``extra=`` that end up in the JSON line.
CONTEXT_FIELDS = ("event", "count", "reason", "path", "method", "status", "db_backend", "seed_version")


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        entry.update(
            (field, getattr(record, field))
            for field in CONTEXT_FIELDS
            if getattr(record, field, None) is not None
        )
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=True)


def configure_logging(level: str | None = None) -> None:
    """Install the JSON stdout handler once; later calls are no-ops."""
    root = logging.getLogger()
    if root.handlers:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter())
    root.addHandler(handler)
    level_name = (level or settings.log_level).upper()
    root.setLevel(logging.getLevelName(level_name) if level_name in _LEVELS else logging.INFO)
