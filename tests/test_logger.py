import io

import pytest

from fsndn.logger import FileLog, LogLevel, level_name


def test_level_name_error():
    assert level_name(LogLevel.ERROR) == "ERROR"


@pytest.mark.parametrize("level", [LogLevel.NONE, LogLevel.DEBUG, LogLevel.DEBUG2])
def test_level_name_others_are_debug(level):
    assert level_name(level) == "DEBUG"


def test_format_record_debug():
    log = FileLog(stream=io.StringIO())
    assert log.format_record(LogLevel.DEBUG, "hello\n", 100) == "- 100 DEBUG: hello\n"


def test_format_record_error():
    log = FileLog(stream=io.StringIO())
    assert log.format_record(LogLevel.ERROR, "bad", 7) == "- 7 ERROR: bad"


def test_format_record_debug2_is_indented_once():
    log = FileLog(stream=io.StringIO())
    record = log.format_record(LogLevel.DEBUG2, "deep", 1)
    assert record.endswith(": \tdeep")
    assert record.count("\t") == 1


def test_log_writes_to_stream():
    stream = io.StringIO()
    log = FileLog(stream=stream)
    written = log.log(LogLevel.DEBUG, "Start NameNode\n")
    assert written == stream.getvalue()
    assert written.startswith("- ")
    assert written.endswith(" DEBUG: Start NameNode\n")


def test_log_suppresses_levels_above_reporting_level():
    stream = io.StringIO()
    log = FileLog(stream=stream, reporting_level=LogLevel.ERROR)
    assert log.log(LogLevel.DEBUG, "quiet") is None
    assert stream.getvalue() == ""


def test_log_error_passes_error_reporting_level():
    stream = io.StringIO()
    log = FileLog(stream=stream, reporting_level=LogLevel.ERROR)
    log.log(LogLevel.ERROR, "loud")
    assert "ERROR: loud" in stream.getvalue()


def test_log_without_stream_writes_nothing():
    log = FileLog(stream=None)
    assert log.log(LogLevel.ERROR, "nowhere") is None


def test_default_reporting_level_is_debug():
    stream = io.StringIO()
    log = FileLog(stream=stream)
    assert log.reporting_level == LogLevel.DEBUG
    assert log.log(LogLevel.DEBUG2, "too verbose") is None
    assert stream.getvalue() == ""