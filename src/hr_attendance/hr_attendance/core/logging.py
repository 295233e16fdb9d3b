from __future__ import annotations

import logging
import logging.config

from .constants import LOG_FORMAT


def get_logging_config(level: str = "INFO", fmt: str = LOG_FORMAT) -> dict:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": fmt,
            },
        },
        "handlers": {
            "default": {
                "formatter": "default",
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stdout",
            },
        },
        "root": {
            "level": level.upper(),
            "handlers": ["default"],
        },
    }


def configure_logging(level: str = "INFO") -> None:
    logging.config.dictConfig(get_logging_config(level))


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
