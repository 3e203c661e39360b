"""Tracking of which thread the engine treats as its main thread."""

from __future__ import annotations

import threading

_main_thread_id: int | None = None


def set_main_thread(ident: int | None) -> None:
    """Mark the thread with identifier ``ident`` as the main thread.

    Passing ``None`` clears the setting, so that no thread counts as main.
    """
    global _main_thread_id
    _main_thread_id = ident
    if ident is not None:
        from .logging_manager import MsgType, get_logger

        get_logger().log(
            MsgType.INFO,
            "set_main_thread",
            f"Main thread has been set to Thread {thread_id_to_string(ident)}",
        )


def main_thread_id() -> int | None:
    """Return the identifier of the main thread, or None if none is set."""
    return _main_thread_id


def is_main_thread() -> bool:
    """Return True if the calling thread is the registered main thread."""
    return _main_thread_id is not None and threading.get_ident() == _main_thread_id


def thread_id_to_string(ident: int | None) -> str:
    """Render a thread identifier as text."""
    return str(ident)