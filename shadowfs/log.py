"""Kernel-style coloured logging and assertion checks."""

from __future__ import annotations

import inspect
import os
import sys
from typing import Callable, Optional, Tuple

Location = Tuple[str, int]

_INFO = (92, "INFO")
_WARN = (93, "WARN")
_ERROR = (91, "ERROR")
_DEBUG = (94, "DEBUG")
_TRACE = (95, "TRACE")


def format_record(color: int, level: str, message: str, location: Optional[Location] = None) -> str:
    """Build one log line: coloured level tag, optional ``[file:line]``, message."""
    record = f"\033[1;{color}m[{level:<5}]\033[0m "
    if location is not None:
        filename, line = location
        record += f"[{filename}:{line}] "
    return f"{record}{message}\n"


def _caller_location() -> Location:
    """Location of the code that called the public method calling this helper."""
    frame = inspect.currentframe()
    try:
        caller = frame.f_back.f_back if frame and frame.f_back else None
        if caller is None:
            return ("<unknown>", 0)
        return (os.path.basename(caller.f_code.co_filename), caller.f_lineno)
    finally:
        del frame


class _Block:
    """Context manager that traces the start and end of a named block."""

    def __init__(self, log: "KernelLog", kind: str, location: Location) -> None:
        self._log = log
        self._kind = kind
        self._location = location

    def __enter__(self) -> "_Block":
        self._log._traced(f"\033[1m------ Starting Block: {self._kind} ------\033[0m", self._location)
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self._log._traced(f"\033[1m------ Ending Block: {self._kind} ------\033[0m", self._location)
        return False


class KernelLog:
    """Writes formatted log records to a sink; debug and trace output are opt-in."""

    def __init__(
        self,
        sink: Optional[Callable[[str], object]] = None,
        debug: bool = False,
        trace: bool = False,
    ) -> None:
        self._sink = sink if sink is not None else sys.stderr.write
        self.debug_enabled = debug
        self.trace_enabled = trace
        self.warnings = 0

    def _emit(self, kind: Tuple[int, str], message: str, location: Optional[Location]) -> None:
        color, level = kind
        self._sink(format_record(color, level, message, location))

    def _traced(self, message: str, location: Location) -> None:
        if self.trace_enabled:
            self._emit(_TRACE, message, location)

    def info(self, message: str) -> None:
        self._emit(_INFO, message, None)

    def warning(self, message: str) -> None:
        self.warnings += 1
        self._emit(_WARN, f"(Warning #{self.warnings}) {message}", _caller_location())

    def error(self, message: str) -> None:
        self._emit(_ERROR, message, _caller_location())

    def debug(self, message: str) -> None:
        if self.debug_enabled:
            self._emit(_DEBUG, message, _caller_location())

    def trace(self, message: str) -> None:
        if self.trace_enabled:
            self._emit(_TRACE, message, _caller_location())

    def block(self, kind: str) -> _Block:
        """Return a context manager tracing entry to and exit from ``kind``."""
        return _Block(self, kind, _caller_location())

    def check(self, condition: object, expression: str, message: Optional[str] = None) -> None:
        """Log an error and raise ``AssertionError`` when ``condition`` is false."""
        if condition:
            return
        location = _caller_location()
        filename, line = location
        if message is None:
            text = f"Assertion failed: ({expression}), file: {filename}, line: {line}"
        else:
            text = f"Assertion failed: ({expression}), message: {message}, file: {filename}, line: {line}"
        self._emit(_ERROR, text, location)
        raise AssertionError(text)