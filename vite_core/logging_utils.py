from __future__ import annotations

import json
import logging
import os
from typing import Any, Optional


LOGGER_NAME = "vite_core"

# Extras attached by vite_core loggers via ``extra={...}``
_EXTRA_KEYS = ("config", "url", "mode", "path")


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        data: dict[str, Any] = {
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            data["exc_info"] = self.formatException(record.exc_info)  # type: ignore[arg-type]
        for key in _EXTRA_KEYS:
            if hasattr(record, key):
                data[key] = str(getattr(record, key))
        return json.dumps(data, ensure_ascii=False)


def configure_json_logging(level: int = logging.INFO) -> logging.Logger:
    """Send ``vite_core.*`` records as JSON lines, leaving the host's root logger alone."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    # Replace a previously installed JSON handler instead of stacking them
    for h in list(logger.handlers):
        if isinstance(h.formatter, JsonFormatter):
            logger.removeHandler(h)
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def maybe_enable_json_logging(enabled: Optional[bool] = None) -> bool:
    """Enable JSON logs when ``enabled`` is true, or when JSON_LOGS is set and ``enabled`` is None."""
    if enabled is None:
        enabled = (os.environ.get("JSON_LOGS") or "").strip().lower() in {"1", "true", "yes", "on"}
    if enabled:
        configure_json_logging()
    return bool(enabled)
