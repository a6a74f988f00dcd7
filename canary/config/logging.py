# canary/config/logging.py

import json
import logging
import sys
from datetime import datetime, timezone

from canary.core.context import action_ctx, pid_ctx

# Attributes every LogRecord carries; anything else arrived through extra=.
_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime", "taskName"}


class JsonFormatter(logging.Formatter):
    def format(self, record):
        log_record = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "pid": pid_ctx.get(),
            "action": action_ctx.get(),
        }
        for key, value in vars(record).items():
            if key not in _RECORD_ATTRS and key not in log_record:
                log_record[key] = value
        if record.exc_info:
            log_record["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(log_record, default=str)


def configure_logging(log_level: str, stream=None):
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Re-configuring replaces our handler instead of stacking duplicates.
    for existing in list(root_logger.handlers):
        if isinstance(existing.formatter, JsonFormatter):
            root_logger.removeHandler(existing)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(JsonFormatter())
    root_logger.addHandler(handler)
    return handler
