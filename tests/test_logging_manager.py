import io
import re
import threading

import pytest

from astrocelerate import threads
from astrocelerate.logging_manager import (
    EngineError,
    Logger,
    MsgType,
    app_info,
    display_name,
    get_logger,
    log_assert,
    thread_info,
)


@pytest.fixture(autouse=True)
def _restore_main_thread():
    saved = threads.main_thread_id()
    yield
    threads.set_main_thread(saved)


def test_display_names():
    assert display_name(MsgType.WARNING) == "WARNING"
    assert display_name(MsgType.ALL_TYPES) == "ALL TYPES"


def test_log_format_to_stream():
    out = io.StringIO()
    logger = Logger(stream=out, error_stream=io.StringIO())
    logger.log(MsgType.INFO, "caller", "hello")
    text = out.getvalue()
    assert "[INFO]" in text
    assert text.endswith("[ " + "caller".ljust(40) + "]: hello\n")


def test_errors_go_to_error_stream():
    out, err = io.StringIO(), io.StringIO()
    logger = Logger(stream=out, error_stream=err)
    logger.log(MsgType.ERROR, "fn", "broken")
    assert out.getvalue() == ""
    assert "broken" in err.getvalue()


def test_no_newline():
    out = io.StringIO()
    logger = Logger(stream=out)
    logger.log(MsgType.DEBUG, "fn", "partial", newline=False)
    assert out.getvalue().endswith("]: partial")


def test_buffer_is_bounded():
    logger = Logger(stream=io.StringIO(), max_lines=2)
    for text in ("first", "second", "third"):
        logger.log(MsgType.INFO, "fn", text)
    messages = logger.messages()
    assert len(messages) == 2
    assert "second" in messages[0].message
    assert "third" in messages[1].message
    assert messages[1].display_type == "INFO"
    assert messages[1].caller == "fn"


def test_thread_info_main_and_worker():
    threads.set_main_thread(threading.get_ident())
    assert thread_info().startswith("[MAIN][THREAD ")
    results = []
    worker = threading.Thread(target=lambda: results.append(thread_info()))
    worker.start()
    worker.join()
    assert results[0].startswith("[WORKER][THREAD ")


def test_engine_error_attributes():
    threads.set_main_thread(threading.get_ident())
    error = EngineError("origin_fn", "went wrong", line=12)
    assert str(error) == "went wrong"
    assert error.origin == "origin_fn"
    assert error.line == 12
    assert error.severity == MsgType.ERROR
    assert error.thread_info.endswith("(Main)")
    assert get_logger().messages()[-1].message == "went wrong"


def test_log_assert_raises_with_origin():
    log_assert(True, "unused")
    with pytest.raises(EngineError) as info:
        log_assert(False, "boom", MsgType.FATAL)
    assert info.value.origin == "test_log_assert_raises_with_origin"
    assert info.value.severity == MsgType.FATAL
    assert str(info.value) == "boom"


def test_file_logging(tmp_path):
    logger = Logger(stream=io.StringIO())
    path = logger.begin_file_logging(tmp_path / "logs")
    logger.log(MsgType.INFO, "fn", "to file")
    logger.end_file_logging()
    assert re.fullmatch(r"AstroLog-\d{8}_\d{6}\.log", path.name)
    assert "to file" in path.read_text(encoding="utf-8")


def test_app_info():
    debug = app_info("Astro", "1.0", True)
    assert "Project Astro (version: 1.0)." in debug
    assert "Debug mode." in debug
    assert "Release mode." in app_info("Astro", "1.0", False)


def test_get_logger_is_shared():
    get_logger().log(MsgType.INFO, "fn", "shared marker")
    last = get_logger().messages()[-1]
    assert "shared marker" in last.message
    assert last.caller == "fn"