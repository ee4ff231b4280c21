from datetime import datetime

import pytest

from hatescene import log


def test_format_message_matches_documented_example():
    now = datetime(2024, 8, 9, 18, 4, 15, 115000)
    result = log.format_message("INFO", "Hello World!", "src/main.cpp", 10, now)
    assert result == "09-08-2024 18:04:15.115 [INFO] [src/main.cpp@10] Hello World!"


def test_format_message_pads_milliseconds():
    now = datetime(2024, 1, 2, 3, 4, 5, 7000)
    result = log.format_message("DEBUG", "x", "f.py", 1, now)
    assert result.startswith("02-01-2024 03:04:05.007 ")


@pytest.mark.parametrize("level", ["DEBUG", "INFO", "WARNING", "ERROR", "FATAL"])
def test_format_message_carries_level_location_and_text(level):
    result = log.format_message(level, "message body", "mod.py", 42)
    assert f"[{level}] [mod.py@42] message body" in result
    assert result.endswith("message body")


def test_info_goes_to_stdout(capsys):
    text = log.info("hi", "a.py", 3)
    captured = capsys.readouterr()
    assert "[INFO] [a.py@3] hi" in captured.out
    assert captured.err == ""
    assert text.endswith("[INFO] [a.py@3] hi")


def test_debug_goes_to_stdout(capsys):
    log.debug("dbg", "b.py", 4)
    captured = capsys.readouterr()
    assert "[DEBUG] [b.py@4] dbg" in captured.out
    assert captured.err == ""


def test_warning_goes_to_stderr(capsys):
    log.warning("careful", "c.py", 5)
    captured = capsys.readouterr()
    assert "[WARNING] [c.py@5] careful" in captured.err
    assert captured.out == ""


def test_error_goes_to_stderr(capsys):
    log.error("broken", "d.py", 6)
    captured = capsys.readouterr()
    assert "[ERROR] [d.py@6] broken" in captured.err
    assert captured.out == ""


def test_fatal_exits_with_status_one(capsys):
    with pytest.raises(SystemExit) as exc:
        log.fatal("dead", "e.py", 7)
    assert exc.value.code == 1
    assert "[FATAL] [e.py@7] dead" in capsys.readouterr().err


def test_location_defaults_to_caller(capsys):
    log.info("where am i")
    captured = capsys.readouterr()
    assert "[test_log.py@" in captured.out