"""Process-wide logging setup.

Everything goes to stderr: stdout is the protocol channel for the stdio
transport.
"""

from __future__ import annotations

import logging.config
from typing import Any

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def logging_config(level: str = "INFO") -> dict[str, Any]:
    """Return a :func:`logging.config.dictConfig` mapping for *level*."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "plain": {"format": LOG_FORMAT},
        },
        "handlers": {
            "stderr": {
                "class": "logging.StreamHandler",
                "formatter": "plain",
                "stream": "ext://sys.stderr",
            },
        },
        "root": {
            "level": level.upper(),
            "handlers": ["stderr"],
        },
    }


def configure_logging(level: str = "INFO") -> None:
    logging.config.dictConfig(logging_config(level))
