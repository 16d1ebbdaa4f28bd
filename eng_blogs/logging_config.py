"""Logging setup for eng_blogs.

Configures the ``eng_blogs`` logger namespace. Modules log through
``logging.getLogger(__name__)`` and inherit these handlers.
"""

import json
import logging
import sys
from typing import Optional

from eng_blogs.config import AppConfig, get_config

TEXT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


class JsonFormatter(logging.Formatter):
    """Formats each record as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


logger = logging.getLogger("eng_blogs")


def setup_logging(config: Optional[AppConfig] = None) -> logging.Logger:
    """Configure the eng_blogs logger.

    Calling this again replaces the handlers installed by a previous call.

    Args:
        config: Optional configuration (process configuration if not provided)

    Returns:
        The configured package logger
    """
    if config is None:
        config = get_config()

    if config.log_format == "json":
        formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(TEXT_FORMAT)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(config.log_level)
    logger.propagate = False

    return logger
