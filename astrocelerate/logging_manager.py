"""Console, file and in-memory logging for the engine."""

from __future__ import annotations

import inspect
import platform
import sys
import threading
from collections import deque
from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum
from pathlib import Path
from typing import IO

from .constants import APP_NAME, APP_VERSION, IN_DEBUG_MODE, ROOT_DIR
from .threads import is_main_thread, thread_id_to_string


class MsgType(IntEnum):
    """Severity of a log message."""

    ALL_TYPES = 0
    VERBOSE = 1
    DEBUG = 2
    INFO = 3
    WARNING = 4
    ERROR = 5
    FATAL = 6
    SUCCESS = 7


_DISPLAY_NAMES = {
    MsgType.ALL_TYPES: "ALL TYPES",
    MsgType.VERBOSE: "VERBOSE",
    MsgType.DEBUG: "DEBUG",
    MsgType.INFO: "INFO",
    MsgType.WARNING: "WARNING",
    MsgType.ERROR: "ERROR",
    MsgType.FATAL: "FATAL",
    MsgType.SUCCESS: "SUCCESS",
}

_RESET = "\033[0m"
_COLORS = {
    MsgType.VERBOSE: "\033[90m",
    MsgType.DEBUG: "\033[90m",
    MsgType.INFO: "\033[37m",
    MsgType.WARNING: "\033[33m",
    MsgType.ERROR: "\033[31m",
    MsgType.FATAL: "\033[37m\033[41m",
    MsgType.SUCCESS: "\033[92m",
}

_DISPLAY_TYPE_WIDTH = 9
_CALLER_WIDTH = 40


def _thread_info_width() -> int:
    if sys.platform.startswith("win"):
        return 28
    if sys.platform.startswith("linux"):
        return 30
    if sys.platform == "darwin":
        return 40
    return 50


def display_name(msg_type: MsgType) -> str:
    """Return the printable name of a message type."""
    return _DISPLAY_NAMES.get(MsgType(msg_type), "Unknown message type")


def thread_info() -> str:
    """Describe the calling thread, e.g. ``[MAIN][THREAD 1234] ``."""
    role = "MAIN" if is_main_thread() else "WORKER"
    return f"[{role}][THREAD {thread_id_to_string(threading.get_ident())}] "


@dataclass
class LogMessage:
    """One entry of the in-memory log buffer."""

    type: MsgType
    thread_info: str
    display_type: str
    caller: str
    message: str


class Logger:
    """Writes formatted messages to streams, an optional file and a bounded buffer."""

    def __init__(
        self,
        stream: IO[str] | None = None,
        error_stream: IO[str] | None = None,
        max_lines: int = 1000,
    ) -> None:
        self._stream = stream
        self._error_stream = error_stream
        self._buffer: deque[LogMessage] = deque(maxlen=max_lines)
        self._lock = threading.Lock()
        self._file: IO[str] | None = None
        self.file_path: Path | None = None

    def log(
        self, msg_type: MsgType, caller: str, message: str, newline: bool = True
    ) -> None:
        """Format and emit one message."""
        msg_type = MsgType(msg_type)
        with self._lock:
            display_type = display_name(msg_type)
            info = thread_info()
            text = (
                info.ljust(_thread_info_width())
                + f"[{display_type}]".ljust(_DISPLAY_TYPE_WIDTH)
                + "[ "
                + str(caller).ljust(_CALLER_WIDTH)
                + "]: "
                + message
                + ("\n" if newline else "")
            )

            if msg_type in (MsgType.ERROR, MsgType.FATAL):
                out = self._error_stream or sys.stderr
            else:
                out = self._stream or sys.stdout

            if _isatty(out):
                out.write(_COLORS.get(msg_type, "") + text + _RESET)
            else:
                out.write(text)

            if self._file is not None:
                self._file.write(text)
                self._file.flush()

            self._buffer.append(
                LogMessage(msg_type, info, display_type, str(caller), text)
            )

    def _append(self, message: LogMessage) -> None:
        with self._lock:
            self._buffer.append(message)

    def messages(self) -> list[LogMessage]:
        """Return the buffered messages, oldest first."""
        with self._lock:
            return list(self._buffer)

    def begin_file_logging(self, directory: str | Path | None = None) -> Path | None:
        """Start copying output to a timestamped log file; return its path."""
        log_dir = Path(directory) if directory is not None else Path(ROOT_DIR) / "logs"
        stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        path = log_dir / f"AstroLog-{stamp}.log"

        try:
            log_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            print(f"Error creating log directory '{log_dir}': {exc}", file=sys.stderr)
            return None

        self.end_file_logging()
        try:
            self._file = open(path, "a", encoding="utf-8")
        except OSError:
            print(f"Error: Could not open log file: {path}", file=sys.stderr)
            return None
        self.file_path = path
        return path

    def end_file_logging(self) -> None:
        """Stop writing to the log file."""
        if self._file is not None:
            self._file.close()
            self._file = None


def _isatty(stream: IO[str]) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


_logger = Logger()


def get_logger() -> Logger:
    """Return the process-wide logger."""
    return _logger


class EngineError(Exception):
    """An error that records where and in which thread it was raised."""

    def __init__(
        self,
        origin: str,
        message: str,
        severity: MsgType = MsgType.ERROR,
        line: int | None = None,
    ) -> None:
        super().__init__(message)
        self.origin = origin
        self.message = message
        self.severity = MsgType(severity)
        self.line = line
        role = "(Main)" if is_main_thread() else "(Worker)"
        self.thread_info = f"{thread_id_to_string(threading.get_ident())} {role}"

        get_logger()._append(
            LogMessage(
                self.severity,
                thread_info(),
                display_name(self.severity),
                origin,
                message,
            )
        )

    def __str__(self) -> str:
        return self.message


def log_assert(condition: object, message: str, severity: MsgType = MsgType.ERROR) -> None:
    """Raise EngineError with ``message`` unless ``condition`` holds."""
    if condition:
        return
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    origin = caller.f_code.co_name if caller is not None else "unknown origin"
    line = caller.f_lineno if caller is not None else None
    raise EngineError(origin, message, severity, line)


def app_info(
    name: str = APP_NAME, version: str = APP_VERSION, debug: bool = IN_DEBUG_MODE
) -> str:
    """Return a description of the application and interpreter."""
    mode = "Debug" if debug else "Release"
    return (
        f"Project {name} (version: {version}).\n"
        f"Project is run in {mode} mode.\n\n"
        "Interpreter information:\n"
        f"\t- Implementation: {platform.python_implementation()}\n"
        f"\t- Version: {platform.python_version()}\n"
    )