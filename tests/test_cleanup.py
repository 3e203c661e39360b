import pytest

from astrocelerate.cleanup import CleanupTask, GarbageCollector, object_names_string
from astrocelerate.logging_manager import EngineError


def _task(log, name, **kwargs):
    return CleanupTask(
        caller="test",
        object_names=[name],
        handles=kwargs.pop("handles", [1]),
        cleanup_func=lambda: log.append(name),
        **kwargs,
    )


def test_create_returns_distinct_ids():
    gc = GarbageCollector()
    log = []
    first = gc.create_cleanup_task(_task(log, "a"))
    second = gc.create_cleanup_task(_task(log, "b"))
    assert first != second
    assert len(gc) == 2
    assert log == []


def test_execute_runs_once():
    gc = GarbageCollector()
    log = []
    task_id = gc.create_cleanup_task(_task(log, "a"))
    assert gc.execute_cleanup_task(task_id) is True
    assert gc.execute_cleanup_task(task_id) is False
    assert log == ["a"]


def test_null_handle_skips_task():
    gc = GarbageCollector()
    log = []
    task_id = gc.create_cleanup_task(_task(log, "a", handles=[None]))
    assert gc.execute_cleanup_task(task_id) is False
    zero_id = gc.create_cleanup_task(_task(log, "b", handles=[0]))
    assert gc.execute_cleanup_task(zero_id) is False
    assert log == []


def test_false_condition_skips_task():
    gc = GarbageCollector()
    log = []
    task_id = gc.create_cleanup_task(_task(log, "a", conditions=[True, False]))
    assert gc.execute_cleanup_task(task_id) is False
    assert log == []


def test_process_runs_in_reverse_order_and_empties():
    gc = GarbageCollector()
    log = []
    for name in ["a", "b", "c"]:
        gc.create_cleanup_task(_task(log, name))
    gc.process_cleanup_stack()
    assert log == ["c", "b", "a"]
    assert len(gc) == 0


def test_process_skips_already_executed():
    gc = GarbageCollector()
    log = []
    first = gc.create_cleanup_task(_task(log, "a"))
    gc.create_cleanup_task(_task(log, "b"))
    gc.execute_cleanup_task(first)
    gc.process_cleanup_stack()
    assert log == ["a", "b"]


def test_modify_changes_stored_task():
    gc = GarbageCollector()
    log = []
    task_id = gc.create_cleanup_task(_task(log, "a"))
    gc.modify_cleanup_task(task_id).conditions = [False]
    assert gc.execute_cleanup_task(task_id) is False
    gc.modify_cleanup_task(task_id).conditions = [True]
    assert gc.execute_cleanup_task(task_id) is True
    assert log == ["a"]


def test_invalid_ids_raise():
    gc = GarbageCollector()
    with pytest.raises(EngineError):
        gc.modify_cleanup_task(99)
    with pytest.raises(EngineError):
        gc.execute_cleanup_task(99)


def test_missing_function_still_counts_as_executed():
    gc = GarbageCollector()
    task_id = gc.create_cleanup_task(CleanupTask(caller="x", handles=[1]))
    assert gc.execute_cleanup_task(task_id) is True
    assert gc.modify_cleanup_task(task_id).valid is False


def test_object_names_string_format():
    task = CleanupTask(caller="Owner", object_names=["first", "second"])
    assert object_names_string(task) == "Owner -> first, second"
    assert object_names_string(CleanupTask()) == "Unknown caller -> Unknown object"