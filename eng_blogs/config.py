"""Configuration for eng_blogs.

Settings are read from environment variables. Only the command line reads
configuration; the fetch and parse services take everything as arguments.
"""

import os
from dataclasses import dataclass
from typing import Optional

ENGINEERING_BLOGS_OPML_URL = (
    "https://raw.githubusercontent.com/kilimchoi/engineering-blogs/master/engineering_blogs.opml"
)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("text", "json")


@dataclass
class AppConfig:
    """Application configuration."""

    log_level: str = "INFO"
    log_format: str = "text"
    opml_url: str = ENGINEERING_BLOGS_OPML_URL


def load_config() -> AppConfig:
    """Load configuration from the environment.

    Environment variables:
        ENG_BLOGS_LOG_LEVEL: logging level name (default INFO)
        ENG_BLOGS_LOG_FORMAT: "text" or "json" (default text)
        ENG_BLOGS_OPML_URL: OPML document listing the blogs

    Returns:
        AppConfig instance

    Raises:
        ValueError: If the log level or format is not recognized
    """
    log_level = os.environ.get("ENG_BLOGS_LOG_LEVEL", "INFO").upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(f"Invalid ENG_BLOGS_LOG_LEVEL '{log_level}'. Allowed: {', '.join(LOG_LEVELS)}")

    log_format = os.environ.get("ENG_BLOGS_LOG_FORMAT", "text").lower()
    if log_format not in LOG_FORMATS:
        raise ValueError(f"Invalid ENG_BLOGS_LOG_FORMAT '{log_format}'. Allowed: {', '.join(LOG_FORMATS)}")

    return AppConfig(
        log_level=log_level,
        log_format=log_format,
        opml_url=os.environ.get("ENG_BLOGS_OPML_URL") or ENGINEERING_BLOGS_OPML_URL,
    )


_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """Get or create the process-wide configuration."""
    global _config

    if _config is None:
        _config = load_config()

    return _config
