"""
Logging setup for scripts and applications embedding the client
"""

import json as _json
import logging


class JSONFormatter(logging.Formatter):
    """Emit each log record as a single JSON line."""

    # Request context the client attaches to its log calls
    _EXTRA_KEYS = ("method", "url", "status_code")

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "function": record.funcName,
        }
        log_data.update(
            (key, getattr(record, key))
            for key in self._EXTRA_KEYS
            if getattr(record, key, None) is not None
        )
        if record.exc_info and record.exc_info[0] is not None:
            log_data["exception"] = self.formatException(record.exc_info)
        return _json.dumps(log_data)


_HANDLER_NAME = "wowza_rest"


def configure_logging(debug: bool = False) -> logging.Handler:
    """Set up root logger with JSON formatter for production, human-readable for debug."""
    root = logging.getLogger()
    root.setLevel(logging.DEBUG if debug else logging.INFO)

    # Calling twice replaces the handler instead of duplicating output
    for existing in list(root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    if debug:
        handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    else:
        handler.setFormatter(JSONFormatter())
    root.addHandler(handler)
    return handler
