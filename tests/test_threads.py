import threading

import pytest

from astrocelerate import threads


@pytest.fixture(autouse=True)
def _restore_main_thread():
    saved = threads.main_thread_id()
    yield
    threads.set_main_thread(saved)


def test_set_and_get_main_thread():
    ident = threading.get_ident()
    threads.set_main_thread(ident)
    assert threads.main_thread_id() == ident


def test_is_main_thread_in_current_thread():
    threads.set_main_thread(threading.get_ident())
    assert threads.is_main_thread() is True


def test_is_main_thread_false_in_worker():
    threads.set_main_thread(threading.get_ident())
    results = []
    worker = threading.Thread(target=lambda: results.append(threads.is_main_thread()))
    worker.start()
    worker.join()
    assert results == [False]


def test_clearing_main_thread():
    threads.set_main_thread(threading.get_ident())
    threads.set_main_thread(None)
    assert threads.main_thread_id() is None
    assert threads.is_main_thread() is False


def test_thread_id_to_string():
    assert threads.thread_id_to_string(4242) == "4242"
    ident = threading.get_ident()
    assert int(threads.thread_id_to_string(ident)) == ident