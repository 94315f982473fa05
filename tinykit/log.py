"""Levelled log output with caller information in the message prefix."""

from __future__ import annotations

import inspect
import os
from collections.abc import Callable
from enum import IntEnum
from typing import Any, Optional, TypeVar

_BUFFER_SIZE = 256

_T = TypeVar("_T")

LogOutput = Callable[[str], Any]


class LogLevel(IntEnum):
    """Severity of a message; a logger passes levels up to its own."""

    ERROR = 0
    WARNING = 1
    INFO = 2
    LOG = 3
    DEBUG = 4


def _caller(depth: int = 2) -> tuple[str, int, str]:
    """Return file name, line and function of the frame ``depth`` levels up."""
    frame = inspect.currentframe()
    for _ in range(depth):
        if frame is None:
            break
        frame = frame.f_back
    if frame is None:
        return "<unknown>", 0, "<unknown>"
    code = frame.f_code
    return os.path.basename(code.co_filename), frame.f_lineno, code.co_name


def _format_value(value: object) -> str:
    if isinstance(value, str) and len(value) == 1:
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return f"0x{value:X}" if value >= 0 else str(value)
    return str(value)


class Logger:
    """Sends formatted messages to ``output`` when their level is enabled.

    ERROR messages can not be filtered out, since ERROR is the lowest level.
    Every message is cut to 255 characters.
    """

    def __init__(
        self, output: Optional[LogOutput] = None, level: LogLevel = LogLevel.INFO
    ) -> None:
        self.sink = output
        self.level = level

    @property
    def level(self) -> LogLevel:
        """The most verbose level that is still emitted."""
        return self._level

    @level.setter
    def level(self, new_level: int) -> None:
        self._level = LogLevel(new_level)

    def output_raw(self, level: LogLevel, msg: str) -> None:
        """Emit ``msg`` unchanged if ``level`` is enabled."""
        if self.sink is not None and self._level >= level:
            self.sink(msg)

    @staticmethod
    def _format(msg: str, args: tuple[Any, ...]) -> str:
        return msg % args if args else msg

    def _emit(self, level: LogLevel, text: str) -> None:
        self.output_raw(level, text[: _BUFFER_SIZE - 1])

    def output(self, level: LogLevel, msg: str, *args: Any) -> None:
        """Format ``msg`` with ``args`` printf-style and emit it."""
        self._emit(level, self._format(msg, args))

    def error(self, msg: str, *args: Any) -> None:
        """Emit an unrecoverable error prefixed with the caller's file and line."""
        file, line, _ = _caller()
        self._emit(LogLevel.ERROR, f"[{file}:{line}]: " + self._format(msg, args))

    def warning(self, msg: str, *args: Any) -> None:
        """Emit a recoverable problem prefixed with the caller's file and line."""
        file, line, _ = _caller()
        self._emit(LogLevel.WARNING, f"[{file}:{line}]: " + self._format(msg, args))

    def info(self, msg: str, *args: Any) -> None:
        """Emit a user-facing message prefixed with the caller's function."""
        _, _, func = _caller()
        self._emit(LogLevel.INFO, f"[{func}]: " + self._format(msg, args))

    def debug(self, msg: str, *args: Any) -> None:
        """Emit debugging detail prefixed with file, function and line."""
        file, line, func = _caller()
        self._emit(
            LogLevel.DEBUG, f"[{file}@{func}:{line}]: " + self._format(msg, args)
        )

    def log(self, msg: str, *args: Any) -> None:
        """Emit a detailed trace message prefixed with the caller's function."""
        _, _, func = _caller()
        self._emit(LogLevel.LOG, f"[{func}]: " + self._format(msg, args))

    def dbg(self, expr: str, value: _T) -> _T:
        """Emit ``expr = value`` at DEBUG level and return ``value``."""
        self._emit(LogLevel.DEBUG, f"{expr} = ")
        self._emit(LogLevel.DEBUG, _format_value(value))
        return value