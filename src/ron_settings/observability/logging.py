"""Logging setup for applications using ron_settings

The library itself only emits records through ``logging.getLogger(__name__)``
loggers under ``ron_settings``. Applications that want to see them can call
``setup_logging``.
"""

import logging
import json
import os
import sys
from datetime import datetime, timezone
from typing import Optional, Dict, Any

LOGGER_NAME = "ron_settings"

# Record attributes that are part of every LogRecord
_RESERVED_ATTRS = set(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging"""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        # Fields passed through ``extra=``
        for key, value in vars(record).items():
            if key not in _RESERVED_ATTRS and not key.startswith("_"):
                log_data[key] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


def setup_logging(
    level: str = "INFO",
    json_output: bool = False,
    log_file: Optional[str] = None,
) -> None:
    """Attach handlers to the ``ron_settings`` logger

    ``LOG_LEVEL`` and ``LOG_FORMAT=json`` in the environment override the
    arguments.
    """
    log_level_str = os.getenv("LOG_LEVEL", level).upper()
    log_level = getattr(logging, log_level_str, logging.INFO)

    handlers = []

    console_handler = logging.StreamHandler(sys.stderr)
    if json_output or os.getenv("LOG_FORMAT", "").lower() == "json":
        console_handler.setFormatter(JSONFormatter())
    else:
        console_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
    handlers.append(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(JSONFormatter())
        handlers.append(file_handler)

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(log_level)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance"""
    return logging.getLogger(name)
