import re

import pytest

from gpgmm.log import (
    LogMessage,
    LogSeverity,
    ScopedLogLevel,
    debug_log,
    error_log,
    get_log_message_level,
    gpgmm_assert,
    handle_assertion_failure,
    info_log,
    log,
    set_log_message_level,
    warning_log,
)

LINE = re.compile(r"^GPGMM (\w+) \(tid:\d+\): (.*)\n$")


@pytest.fixture(autouse=True)
def debug_level():
    with ScopedLogLevel(LogSeverity.DEBUG):
        yield


def test_severity_ordering_and_labels():
    severities = [log(level).severity for level in reversed(list(LogSeverity))]
    assert sorted(severities) == [
        LogSeverity.DEBUG,
        LogSeverity.INFO,
        LogSeverity.WARNING,
        LogSeverity.ERROR,
    ]
    assert [s.label for s in sorted(severities)] == ["Debug", "Info", "Warning", "Error"]


def test_set_and_get_level_round_trip():
    set_log_message_level(LogSeverity.ERROR)
    assert get_log_message_level() is LogSeverity.ERROR
    set_log_message_level(LogSeverity.INFO)
    assert get_log_message_level() is LogSeverity.INFO


def test_scoped_level_restores_previous():
    before = get_log_message_level()
    with ScopedLogLevel(LogSeverity.WARNING):
        assert get_log_message_level() is LogSeverity.WARNING
    assert get_log_message_level() is before


def test_info_goes_to_stdout(capsys):
    message = info_log() << "hello " << 42
    message.flush()
    captured = capsys.readouterr()
    match = LINE.match(captured.out)
    assert match is not None
    assert match.groups() == ("Info", "hello 42")
    assert captured.err == ""


@pytest.mark.parametrize(
    "factory, label", [(warning_log, "Warning"), (error_log, "Error")]
)
def test_warning_and_error_go_to_stderr(capsys, factory, label):
    with factory() as message:
        message << "bad"
    captured = capsys.readouterr()
    assert captured.out == ""
    match = LINE.match(captured.err)
    assert match is not None
    assert match.groups() == (label, "bad")


def test_message_below_level_is_suppressed(capsys):
    with ScopedLogLevel(LogSeverity.WARNING):
        with info_log() as message:
            message << "quiet"
    captured = capsys.readouterr()
    assert captured.out == "" and captured.err == ""


def test_empty_message_prints_nothing(capsys):
    info_log().flush()
    captured = capsys.readouterr()
    assert captured.out == ""


def test_flush_prints_only_once(capsys):
    message = info_log() << "once"
    message.flush()
    message.flush()
    captured = capsys.readouterr()
    assert captured.out.count("once") == 1
    assert message.text() == ""


def test_text_accumulates():
    message = LogMessage(LogSeverity.INFO)
    message << "a" << 1 << "b"
    assert message.text() == "a1b"
    message._parts.clear()


def test_debug_log_with_location():
    message = debug_log("a.py", "fn", 3)
    assert message.severity is LogSeverity.DEBUG
    assert message.text() == "a.py:3(fn)"
    message._parts.clear()


def test_debug_log_without_location_is_empty():
    message = debug_log()
    assert message.text() == ""


@pytest.mark.parametrize("level", list(LogSeverity))
def test_log_returns_matching_severity(level):
    assert log(level).severity is level


def test_log_rejects_unknown_level():
    with pytest.raises(ValueError):
        log(17)


def test_handle_assertion_failure_logs_and_raises(capsys):
    with pytest.raises(AssertionError) as info:
        handle_assertion_failure("f.py", "func", 10, "x > 0")
    expected = "Assertion failure at f.py:10 (func): x > 0"
    assert str(info.value) == expected
    captured = capsys.readouterr()
    match = LINE.match(captured.err)
    assert match is not None
    assert match.groups() == ("Error", expected)


def test_gpgmm_assert_true_is_silent(capsys):
    gpgmm_assert(1 + 1 == 2, "math works")
    captured = capsys.readouterr()
    assert captured.out == "" and captured.err == ""


def test_gpgmm_assert_false_reports_caller(capsys):
    with pytest.raises(AssertionError, match=r"Unreachable code hit$") as info:
        gpgmm_assert(False, "Unreachable code hit")
    text = str(info.value)
    assert text.startswith("Assertion failure at ")
    assert "test_gpgmm_assert_false_reports_caller" in text
    assert "test_log.py" in text
    captured = capsys.readouterr()
    match = LINE.match(captured.err)
    assert match is not None
    assert match.groups() == ("Error", text)