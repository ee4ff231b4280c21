"""Timestamped, coloured console logging."""

from __future__ import annotations

import inspect
import os
import sys
from datetime import datetime
from typing import Optional, TextIO

from termcolor import colored


def format_message(
    level: str,
    msg: str,
    file: str,
    line: int,
    now: Optional[datetime] = None,
) -> str:
    """Build a log line such as ``09-08-2024 18:04:15.115 [INFO] [main.py@10] Hello``."""
    if now is None:
        now = datetime.now()
    stamp = now.strftime("%d-%m-%Y %H:%M:%S")
    return f"{stamp}.{now.microsecond // 1000:03d} [{level}] [{file}@{line}] {msg}"


def _where(file: Optional[str], line: Optional[int]) -> tuple[str, int]:
    """Fill in a missing file or line from the code that called the public function."""
    if file is not None and line is not None:
        return file, line
    frame = inspect.currentframe()
    caller = None
    if frame is not None:
        caller = frame.f_back
        for _ in range(2):
            caller = caller.f_back if caller is not None else None
    try:
        if caller is None:
            return file if file is not None else "?", line if line is not None else 0
        return (
            file if file is not None else os.path.basename(caller.f_code.co_filename),
            line if line is not None else caller.f_lineno,
        )
    finally:
        del frame, caller


def _emit(
    level: str,
    msg: str,
    file: Optional[str],
    line: Optional[int],
    stream: TextIO,
    color: Optional[str] = None,
    on_color: Optional[str] = None,
) -> str:
    file, line = _where(file, line)
    text = format_message(level, msg, file, line)
    if color or on_color:
        print(colored(text, color, on_color), file=stream, flush=True)
    else:
        print(text, file=stream, flush=True)
    return text


def debug(msg: str, file: Optional[str] = None, line: Optional[int] = None) -> str:
    """Write a green debug line to standard output."""
    return _emit("DEBUG", msg, file, line, sys.stdout, color="green")


def info(msg: str, file: Optional[str] = None, line: Optional[int] = None) -> str:
    """Write a plain informational line to standard output."""
    return _emit("INFO", msg, file, line, sys.stdout)


def warning(msg: str, file: Optional[str] = None, line: Optional[int] = None) -> str:
    """Write a yellow warning line to standard error."""
    return _emit("WARNING", msg, file, line, sys.stderr, color="yellow")


def error(msg: str, file: Optional[str] = None, line: Optional[int] = None) -> str:
    """Write a red error line to standard error."""
    return _emit("ERROR", msg, file, line, sys.stderr, color="red")


def fatal(msg: str, file: Optional[str] = None, line: Optional[int] = None) -> None:
    """Write a fatal line to standard error and exit with status 1."""
    _emit("FATAL", msg, file, line, sys.stderr, on_color="on_red")
    raise SystemExit(1)