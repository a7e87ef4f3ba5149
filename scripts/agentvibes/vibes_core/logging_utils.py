"""Logging setup for the listing CLI."""

from __future__ import annotations

import logging

LOG_LEVELS = ("debug", "info", "warning", "error")
ROOT_LOGGER = "agentvibes"


class TextLogFormatter(logging.Formatter):
    def __init__(self) -> None:
        super().__init__("[%(levelname)s] %(message)s")


def _coerce_log_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    value = str(level).strip().lower()
    if value == "debug":
        return logging.DEBUG
    if value == "info":
        return logging.INFO
    if value == "error":
        return logging.ERROR
    return logging.WARNING


def configure_logging(log_level: str | int = "warning") -> logging.Logger:
    handler = logging.StreamHandler()
    handler.setFormatter(TextLogFormatter())

    root_logger = logging.getLogger(ROOT_LOGGER)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(_coerce_log_level(log_level))
    root_logger.propagate = False
    return root_logger
