"""A stack of deferred cleanup tasks, executed in reverse order of creation."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable

from .logging_manager import MsgType, get_logger, log_assert

MAX_INVALID_TASKS = 20


@dataclass
class CleanupTask:
    """A deferred destroy/free operation and the objects it involves.

    ``handles`` are the resource handles the cleanup function uses; the task is
    skipped if any of them is null (``None`` or ``0``). ``conditions`` are
    extra flags that must all be true for the task to run.
    """

    caller: str = "Unknown caller"
    object_names: list[str] = field(default_factory=lambda: ["Unknown object"])
    handles: list[Any] = field(default_factory=list)
    cleanup_func: Callable[[], None] | None = None
    conditions: list[bool] = field(default_factory=list)
    id: int = 0
    valid: bool = True


def _handle_is_valid(handle: Any) -> bool:
    return handle is not None and not (isinstance(handle, int) and handle == 0)


def object_names_string(task: CleanupTask) -> str:
    """Describe the objects of ``task``, e.g. ``"caller -> a, b"``."""
    return f"{task.caller} -> " + ", ".join(task.object_names)


class GarbageCollector:
    """Holds cleanup tasks and runs them, newest first, when asked."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._stack: list[CleanupTask] = []
        self._index_of: dict[int, int] = {}
        self._next_id = 0
        self._invalid_count = 0
        get_logger().log(MsgType.DEBUG, "GarbageCollector", "Initialized.")

    def __len__(self) -> int:
        with self._lock:
            return len(self._stack)

    def create_cleanup_task(self, task: CleanupTask) -> int:
        """Push ``task`` onto the cleanup stack and return its id."""
        with self._lock:
            names = object_names_string(task)
            task_id = self._next_id
            self._next_id += 1
            task.id = task_id
            self._index_of[task_id] = len(self._stack)
            self._stack.append(task)
        get_logger().log(
            MsgType.VERBOSE, task.caller, f'Pushed object(s) "{names}" to cleanup stack.'
        )
        return task_id

    def modify_cleanup_task(self, task_id: int) -> CleanupTask:
        """Return the stored task with ``task_id`` so that it can be changed in place."""
        with self._lock:
            log_assert(
                task_id in self._index_of,
                f"Cannot modify cleanup task: Task ID #{task_id} is invalid!",
            )
            return self._stack[self._index_of[task_id]]

    def execute_cleanup_task(self, task_id: int) -> bool:
        """Run the task with ``task_id`` now; return True if it ran."""
        with self._lock:
            log_assert(
                task_id in self._index_of,
                f"Cannot execute cleanup task: Task ID #{task_id} is invalid!",
            )
            index = self._index_of[task_id]
            log_assert(
                index < len(self._stack),
                "Cannot execute cleanup task: Cannot retrieve task data for "
                f"task ID #{task_id}!",
            )
            return self._execute(self._stack[index])

    def process_cleanup_stack(self) -> None:
        """Run every pending task, newest first, and empty the stack."""
        with self._lock:
            self._optimize()
            size = len(self._stack)
            plural = "" if size == 1 else "s"
            get_logger().log(
                MsgType.VERBOSE,
                "GarbageCollector.process_cleanup_stack",
                f"Executing {size} task{plural} in the cleanup stack...",
            )
            while self._stack:
                task = self._stack.pop()
                self._index_of.pop(task.id, None)
                self._execute(task)

    def _execute(self, task: CleanupTask) -> bool:
        with self._lock:
            names = object_names_string(task)
            logger = get_logger()
            if not task.valid:
                logger.log(
                    MsgType.WARNING,
                    "GarbageCollector.execute",
                    f'Skipped cleanup task for object(s) "{names}".',
                )
                return False

            proceed = all(_handle_is_valid(h) for h in task.handles) and all(
                task.conditions
            )
            if not proceed:
                logger.log(
                    MsgType.WARNING,
                    "GarbageCollector.execute",
                    f'Skipped cleanup task for object(s) "{names}" due to an invalid '
                    "object used in their destroy/free callback function.",
                )
                return False

            if task.cleanup_func is None:
                logger.log(
                    MsgType.ERROR,
                    "GarbageCollector.execute",
                    f'Cannot execute cleanup task "{names}": Bad function call!',
                )
            else:
                task.cleanup_func()

            logger.log(
                MsgType.VERBOSE,
                "GarbageCollector.execute",
                f'Executed cleanup task for object(s) "{names}".',
            )
            task.valid = False
            self._invalid_count += 1
            if self._invalid_count >= MAX_INVALID_TASKS:
                self._optimize()
            return True

    def _optimize(self) -> None:
        with self._lock:
            old_size = len(self._stack)
            self._stack = [task for task in self._stack if task.valid]
            self._index_of = {task.id: i for i, task in enumerate(self._stack)}
            self._invalid_count = 0
            new_size = len(self._stack)
            if new_size < old_size:
                get_logger().log(
                    MsgType.SUCCESS,
                    "GarbageCollector.optimize",
                    f"Shrunk stack size from {old_size} down to {new_size}.",
                )
            else:
                get_logger().log(
                    MsgType.INFO,
                    "GarbageCollector.optimize",
                    "Cleanup stack cannot be optimized further.",
                )