"""Levelled logger writing to the console and to a daily log file."""

from __future__ import annotations

import enum
import functools
import inspect
import os
import sys
import threading
from datetime import datetime
from pathlib import Path
from typing import IO, Any

from ontoenrich.messages import get_message


class LogLevel(enum.IntEnum):
    """Severity of a log message."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


def _format(message: str, args: tuple[Any, ...]) -> str:
    if not args:
        return message
    template = message.replace("%v", "%s")
    try:
        return template % args
    except (TypeError, ValueError):
        extra = ", ".join(repr(arg) for arg in args)
        return f"{message} (EXTRA {extra})"


class Logger:
    """Writes timestamped, levelled messages to a stream and optionally a file."""

    def __init__(
        self,
        level: LogLevel = LogLevel.INFO,
        stream: IO[str] | None = None,
        log_dir: str | os.PathLike[str] | None = None,
    ) -> None:
        self._level = LogLevel(level)
        self._stream = stream
        self._file: IO[str] | None = None
        self._lock = threading.Lock()
        if log_dir is not None:
            self._open_log_file(Path(log_dir) if str(log_dir) else Path("logs"))

    def _open_log_file(self, log_dir: Path) -> None:
        try:
            log_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            self.error(get_message("ErrCreateLogDir") + ": %v", exc)
            return
        path = log_dir / f"ontology_{datetime.now():%Y-%m-%d}.log"
        try:
            self._file = path.open("a", encoding="utf-8")
        except OSError as exc:
            self.error(get_message("ErrOpenLogFile") + ": %v", exc)

    @property
    def log_file(self) -> str | None:
        """Path of the open log file, if any."""
        return self._file.name if self._file is not None else None

    def set_level(self, level: LogLevel) -> None:
        with self._lock:
            self._level = LogLevel(level)

    def get_level(self) -> LogLevel:
        with self._lock:
            return self._level

    def _log(self, level: LogLevel, message: str, args: tuple[Any, ...]) -> None:
        if level < self._level:
            return
        with self._lock:
            text = _format(message, args)
            if self._level <= LogLevel.DEBUG:
                frame = inspect.currentframe()
                caller = frame.f_back.f_back if frame and frame.f_back else None
                if caller is not None:
                    location = f"{os.path.basename(caller.f_code.co_filename)}:{caller.f_lineno}"
                else:
                    location = "???:0"
                line = f"[{level.name}] {location} - {text}"
            else:
                line = f"[{level.name}] {text}"
            record = f"{datetime.now():%Y/%m/%d %H:%M:%S} {line}\n"
            stream = self._stream if self._stream is not None else sys.stdout
            stream.write(record)
            stream.flush()
            if self._file is not None:
                self._file.write(record)
                self._file.flush()

    def debug(self, message: str, *args: Any) -> None:
        if self.get_level() <= LogLevel.DEBUG:
            self._log(LogLevel.DEBUG, message, args)

    def info(self, message: str, *args: Any) -> None:
        self._log(LogLevel.INFO, message, args)

    def warning(self, message: str, *args: Any) -> None:
        self._log(LogLevel.WARNING, message, args)

    def error(self, message: str, *args: Any) -> None:
        self._log(LogLevel.ERROR, message, args)

    def close(self) -> None:
        """Close the log file, if one is open."""
        if self._file is not None:
            self._file.close()
            self._file = None

    def update_progress(self, current: int, total: int) -> None:
        """Rewrite the current console line with a progress counter."""
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(f"\rProgress: {current}/{total}")
        stream.flush()

    def __enter__(self) -> Logger:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


@functools.lru_cache(maxsize=None)
def get_logger() -> Logger:
    """Return the shared application logger."""
    return Logger(LogLevel.INFO, log_dir="logs")


def parse_level(level: str) -> LogLevel:
    """Map a level name to a LogLevel; unknown names give INFO."""
    return {
        "debug": LogLevel.DEBUG,
        "info": LogLevel.INFO,
        "warning": LogLevel.WARNING,
        "error": LogLevel.ERROR,
    }.get(level.lower(), LogLevel.INFO)