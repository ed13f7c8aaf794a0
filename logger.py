"""Console logger for merge progress and diagnostics."""

from __future__ import annotations

import os
import sys
from typing import TextIO


_LEVELS = {"DEBUG": 10, "INFO": 20, "WARN": 30, "ERROR": 40}
LOG_LEVEL_ENV = "SECRETLINT_MERGE_LOG_LEVEL"


def level_names() -> list[str]:
    """Return the accepted level names, lowest first."""
    return list(_LEVELS)


class Logger:
    """Level-filtered logger; errors go to stderr, everything else to stdout."""

    def __init__(
        self,
        level: str = "INFO",
        stream: TextIO | None = None,
        error_stream: TextIO | None = None,
    ) -> None:
        self._level = _LEVELS.get(level.upper(), _LEVELS["INFO"])
        self._stream = stream
        self._error_stream = error_stream

    def set_stream(self, stream: TextIO | None, error_stream: TextIO | None = None) -> None:
        self._stream = stream
        self._error_stream = error_stream

    def set_level(self, level: str) -> None:
        self._level = _LEVELS.get(level.upper(), _LEVELS["INFO"])

    @property
    def level(self) -> str:
        for name, value in _LEVELS.items():
            if value == self._level:
                return name
        return "INFO"

    def _write(self, message: str, stream: TextIO | None, fallback: TextIO) -> None:
        # Resolve sys streams lazily so pytest capture sees the output.
        print(message, file=stream or fallback)

    def debug(self, message: str) -> None:
        if self._level <= _LEVELS["DEBUG"]:
            self._write(message, self._stream, sys.stdout)

    def info(self, message: str) -> None:
        if self._level <= _LEVELS["INFO"]:
            self._write(message, self._stream, sys.stdout)

    def warn(self, message: str) -> None:
        if self._level <= _LEVELS["WARN"]:
            self._write(message, self._stream, sys.stdout)

    def error(self, message: str) -> None:
        if self._level <= _LEVELS["ERROR"]:
            self._write(message, self._error_stream, sys.stderr)


_LOGGER = Logger(level=os.environ.get(LOG_LEVEL_ENV, "INFO"))


def get_logger() -> Logger:
    """Return the shared logger instance."""
    return _LOGGER
