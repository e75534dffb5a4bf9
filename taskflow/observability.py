"""Structured logging: JSON formatter and setup, called once on startup."""

import json
import logging
from datetime import datetime, timezone

_EXTRA_FIELDS = (
    "user_id", "board_id", "column_id", "task_id", "error_code", "path",
)


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

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


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Configure logging for the application. Repeated calls only adjust the level."""
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    if any(getattr(h, "_taskflow_handler", False) for h in logging.root.handlers):
        return

    handler = logging.StreamHandler()
    handler._taskflow_handler = True
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    logging.root.addHandler(handler)
