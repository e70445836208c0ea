"""Central logging configuration for Daily Training."""

from __future__ import annotations

from logging.config import dictConfig

_configured = False

VALID_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _default_config(level: str) -> dict:
    fmt = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": fmt,
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "standard",
                "level": level,
                "stream": "ext://sys.stderr",
            },
        },
        "root": {
            "level": level,
            "handlers": ["console"],
        },
    }


def normalize_level(value: str) -> str:
    upper = value.strip().upper()
    if upper not in VALID_LEVELS:
        raise ValueError(f"Log level must be one of {', '.join(VALID_LEVELS)}")
    return upper


def configure_logging(level: str = "WARNING") -> None:
    """Configure application logging once per process."""

    global _configured
    if _configured:
        return

    dictConfig(_default_config(normalize_level(level)))
    _configured = True
