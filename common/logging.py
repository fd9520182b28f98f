"""
JSON formatter for structured logging.
"""
import json
import logging
from datetime import datetime, timezone

EXTRA_FIELDS = ("order_id", "actor", "action", "status", "recipient", "view", "error")


class JsonFormatter(logging.Formatter):
    """Render each log record as a single JSON object."""

    def format(self, record):
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        for name in EXTRA_FIELDS:
            if hasattr(record, name):
                log_data[name] = getattr(record, name)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False, default=str)
