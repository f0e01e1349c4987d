"""Colored logging formatter for console output."""

from __future__ import annotations

import logging
import os
import sys
from typing import Any, TextIO

ACCESS_LOGGER = "uvicorn.access"


class ColoredFormatter(logging.Formatter):
    """Logging formatter that colors the level name and HTTP access lines.

    uvicorn access records carry the status code as their last argument; the
    line is colored by status class (2xx green, 3xx cyan, 4xx yellow, 5xx red). Colors are
    disabled when the ``NO_COLOR`` environment variable is set or when the
    output stream is not a TTY (e.g. redirected to a file).
    """

    LEVEL_COLORS: dict[int, str] = {
        logging.DEBUG: "\033[36m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[1;31m",
    }
    STATUS_COLORS: dict[int, str] = {
        2: "\033[32m",
        3: "\033[36m",
        4: "\033[33m",
        5: "\033[31m",
    }
    RESET = "\033[0m"

    def __init__(self, *args: Any, stream: TextIO | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._stream = stream

    def _use_color(self) -> bool:
        if os.environ.get("NO_COLOR") is not None:
            return False
        stream = self._stream or sys.stderr
        return hasattr(stream, "isatty") and stream.isatty()

    def _color_status(self, record: logging.LogRecord) -> None:
        if record.name != ACCESS_LOGGER or not isinstance(record.args, tuple) or not record.args:
            return
        status_code = record.args[-1]
        if not isinstance(status_code, int):
            return
        color = self.STATUS_COLORS.get(status_code // 100, "")
        # Render first: the access format uses %d for the status code.
        record.msg = f"{color}{record.getMessage()}{self.RESET}"
        record.args = ()

    def format(self, record: logging.LogRecord) -> str:
        if self._use_color():
            record = logging.makeLogRecord(record.__dict__)
            color = self.LEVEL_COLORS.get(record.levelno, "")
            record.levelname = f"{color}{record.levelname}{self.RESET}"
            self._color_status(record)
        return super().format(record)
