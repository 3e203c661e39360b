"""A typed event bus that runs handlers on the main thread."""

from __future__ import annotations

import copy
import threading
import time
from collections import deque
from dataclasses import dataclass
from typing import Any, Callable, Hashable

from .event_types import flag_bit
from .logging_manager import MsgType, get_logger, log_assert
from .threads import is_main_thread, main_thread_id, thread_id_to_string


def _name(key: Any) -> str:
    return getattr(key, "__qualname__", None) or str(key)


@dataclass(frozen=True)
class _Callback:
    handler: Callable[[Any], None]
    origin: Hashable


class EventDispatcher:
    """Delivers events to subscribed handlers and tracks which were invoked.

    Events dispatched from a worker thread while a main thread is set are
    queued and delivered by :meth:`process_queued_events` on the main thread.
    """

    def __init__(self) -> None:
        self._subscribers: dict[Hashable, int] = {}
        self._subscribers_lock = threading.Lock()
        self._events: dict[type, list[_Callback]] = {}
        self._events_lock = threading.Lock()
        self._queue: deque[Callable[[], None]] = deque()
        self._queue_lock = threading.Lock()
        get_logger().log(MsgType.DEBUG, "EventDispatcher", "Initialized.")

    def register_subscriber(self, subscriber: Hashable) -> Hashable:
        """Register ``subscriber`` so that it may subscribe; return its key."""
        with self._subscribers_lock:
            if subscriber in self._subscribers:
                get_logger().log(
                    MsgType.WARNING,
                    "EventDispatcher.register_subscriber",
                    f'Received request to register subscriber "{_name(subscriber)}", '
                    "but it already exists! The existing subscriber index will be returned.",
                )
                return subscriber
            self._subscribers[subscriber] = 0
            return subscriber

    def subscribe(
        self,
        subscriber: Hashable,
        event_type: type,
        handler: Callable[[Any], None],
    ) -> None:
        """Have ``handler`` called with every dispatched event of ``event_type``."""
        with self._subscribers_lock:
            registered = subscriber in self._subscribers
        log_assert(
            registered,
            f'Subscription by subscriber "{_name(subscriber)}" to event '
            f'"{_name(event_type)}" has been denied: Subscriber is not registered!',
        )
        with self._events_lock:
            self._events.setdefault(event_type, []).append(_Callback(handler, subscriber))

    def reset_event_callback_registry(self) -> None:
        """Forget which event callbacks have been invoked."""
        with self._subscribers_lock:
            for key in self._subscribers:
                self._subscribers[key] = 0
            counter = len(self._subscribers)
        events = "event" if counter == 1 else "events"
        verb = "has" if counter == 1 else "have"
        get_logger().log(
            MsgType.INFO,
            "EventDispatcher.reset_event_callback_registry",
            f"Cleared event callback registry: {counter} {events} {verb} been reset.",
        )

    def event_callbacks_invoked(self, subscriber: Hashable, flags: int) -> bool:
        """Return True if the subscriber's callbacks ran for every event in ``flags``."""
        with self._subscribers_lock:
            mask = self._subscribers.get(subscriber)
        log_assert(
            mask is not None,
            f'Cannot find event callbacks for subscriber "{_name(subscriber)}": '
            "Subscriber is not registered!",
        )
        wanted = int(flags)
        return mask & wanted == wanted

    def wait_for_event_callbacks(
        self, subscriber: Hashable, flags: int, poll_interval: float = 0.01
    ) -> None:
        """Block until :meth:`event_callbacks_invoked` holds for ``flags``."""
        while not self.event_callbacks_invoked(subscriber, flags):
            time.sleep(poll_interval)

    def dispatch(self, event: Any, suppress_logs: bool = False) -> None:
        """Deliver ``event`` now, or queue it if called from a worker thread."""
        event_type = type(event)
        if main_thread_id() is None or is_main_thread():
            self._internal_dispatch(event_type, event, suppress_logs)
            return

        get_logger().log(
            MsgType.INFO,
            "EventDispatcher.dispatch",
            f'Queueing event "{_name(event_type)}" dispatched in Worker Thread '
            f"{thread_id_to_string(threading.get_ident())}...",
        )
        event_copy = copy.copy(event)
        with self._queue_lock:
            self._queue.append(
                lambda: self._internal_dispatch(event_type, event_copy, suppress_logs)
            )

    def process_queued_events(self) -> None:
        """Deliver events queued by worker threads; only acts on the main thread."""
        if not is_main_thread():
            return
        with self._queue_lock:
            pending = list(self._queue)
            self._queue.clear()
        if pending:
            noun = "event" if len(pending) == 1 else "events"
            get_logger().log(
                MsgType.INFO,
                "EventDispatcher.process_queued_events",
                f"Processing {len(pending)} queued {noun}...",
            )
        for deliver in pending:
            deliver()

    def _internal_dispatch(self, event_type: type, event: Any, suppress_logs: bool) -> None:
        with self._events_lock:
            callbacks = self._events.get(event_type)
            if callbacks is None:
                if not suppress_logs:
                    get_logger().log(
                        MsgType.WARNING,
                        "EventDispatcher.dispatch",
                        f'There are no subscribers to event "{_name(event_type)}"!',
                    )
                return
            callbacks = list(callbacks)

        if not suppress_logs and callbacks:
            noun = "callback" if len(callbacks) == 1 else "callbacks"
            get_logger().log(
                MsgType.INFO,
                "EventDispatcher.dispatch",
                f'Invoking {len(callbacks)} {noun} for event type "{_name(event_type)}"...',
            )

        bit = 1 << flag_bit(event_type.event_flag)
        for callback in callbacks:
            callback.handler(event)
            with self._subscribers_lock:
                self._subscribers[callback.origin] = (
                    self._subscribers.get(callback.origin, 0) | bit
                )