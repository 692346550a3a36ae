"""JSON logging for the lead qualification bot.

Every line is one JSON object. Conversation-scoped log calls pass
``extra={"conversation_id": ..., "step": ...}`` and those keys appear as
top-level fields, so one customer's dialogue can be filtered out of the
combined log.
"""

import json
import logging
import logging.config
from datetime import datetime, timezone
from pathlib import Path

from .config import DEFAULT_LOG_PATH

CONVERSATION_FIELDS = ("conversation_id", "step", "context")

# Chatty third-party loggers; the bot logs its own gateway calls.
_QUIET_LOGGERS = ("httpx", "httpcore", "uvicorn.access")


class JSONFormatter(logging.Formatter):
    """Render a record as a single JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.module}.{record.funcName}:{record.lineno}",
        }
        entry.update(
            (name, getattr(record, name))
            for name in CONVERSATION_FIELDS
            if getattr(record, name, None) is not None
        )
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        # Customer replies and templates carry emoji and non-Latin scripts.
        return json.dumps(entry, ensure_ascii=False, default=str)


def setup_logging(
    log_level: str = "INFO",
    log_file: str | Path | None = None,
    console: bool = True,
) -> None:
    """
    Route all logging through the JSON formatter.

    Args:
        log_level: Root level name, usually ``Settings.log_level``.
        log_file: Rotating log file. Defaults to 04_logs/app.log.
        console: Also write to stdout.
    """
    log_path = Path(log_file) if log_file is not None else DEFAULT_LOG_PATH
    log_path.parent.mkdir(parents=True, exist_ok=True)

    handlers = {
        "file": {
            "class": "logging.handlers.RotatingFileHandler",
            "filename": str(log_path),
            "maxBytes": 10 * 1024 * 1024,
            "backupCount": 5,
            "formatter": "json",
            "encoding": "utf-8",
        },
    }
    if console:
        handlers["console"] = {
            "class": "logging.StreamHandler",
            "formatter": "json",
            "stream": "ext://sys.stdout",
        }

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {"json": {"()": JSONFormatter}},
            "handlers": handlers,
            "root": {"level": log_level.upper(), "handlers": list(handlers)},
            "loggers": {name: {"level": "WARNING"} for name in _QUIET_LOGGERS},
        }
    )


def get_logger(name: str) -> logging.Logger:
    """Module logger; configuration is applied once by ``setup_logging``."""
    return logging.getLogger(name)
