"""Unified logging configuration with Rich"""
import logging
import logging.config
from typing import Any, Dict

HANDLER_NAME = "rich"
UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def _logger_entry(level: str) -> Dict[str, Any]:
    return {"handlers": [HANDLER_NAME], "level": level, "propagate": False}


def build_logging_config(level: str = "INFO", server_level: str = "INFO") -> Dict[str, Any]:
    """
    dictConfig for one RichHandler shared by the application root logger (at `level`)
    and uvicorn's loggers (at `server_level`).
    """
    loggers = {name: _logger_entry(server_level.upper()) for name in UVICORN_LOGGERS}
    loggers[""] = _logger_entry(level.upper())
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            # RichHandler renders its own timestamp and level columns
            "plain": {"format": "%(name)s - %(message)s"},
        },
        "handlers": {
            HANDLER_NAME: {
                "class": "rich.logging.RichHandler",
                "formatter": "plain",
                "level": "DEBUG",
                "rich_tracebacks": True,
                "show_path": False,
                "log_time_format": "%Y-%m-%d %H:%M:%S",
            },
        },
        "loggers": loggers,
    }


def configure_logging(level: str = "INFO") -> Dict[str, Any]:
    """Applies the Rich logging setup with the application root logger set to `level`."""
    config = build_logging_config(level)
    logging.config.dictConfig(config)
    return config
