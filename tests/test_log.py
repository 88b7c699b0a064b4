import pytest

from shadowfs.log import KernelLog, format_record


@pytest.fixture
def records():
    return []


def test_format_record_plain():
    assert format_record(92, "INFO", "hello", None) == "\033[1;92m[INFO ]\033[0m hello\n"


def test_format_record_with_location():
    assert format_record(91, "ERROR", "boom", ("vfs.c", 42)) == "\033[1;91m[ERROR]\033[0m [vfs.c:42] boom\n"


def test_info_goes_to_sink(records):
    log = KernelLog(records.append)
    log.info("ready")
    assert records == [format_record(92, "INFO", "ready", None)]


def test_warnings_are_counted(records):
    log = KernelLog(records.append)
    log.warning("a")
    log.warning("b")
    assert log.warnings == 2
    assert "(Warning #1) a" in records[0]
    assert "(Warning #2) b" in records[1]


def test_warning_reports_caller_location(records):
    log = KernelLog(records.append)
    log.warning("here")
    assert "[test_log.py:" in records[0]
    assert "[WARN ]" in records[0]


def test_error_record(records):
    log = KernelLog(records.append)
    log.error("disk gone")
    assert len(records) == 1
    assert "[ERROR]" in records[0]
    assert records[0].endswith("disk gone\n")


def test_debug_disabled_by_default(records):
    log = KernelLog(records.append)
    log.debug("hidden")
    assert records == []


def test_debug_enabled(records):
    log = KernelLog(records.append, debug=True)
    log.debug("shown")
    assert len(records) == 1
    assert "[DEBUG]" in records[0]
    assert "shown" in records[0]


def test_trace_toggle(records):
    KernelLog(records.append).trace("hidden")
    assert records == []
    KernelLog(records.append, trace=True).trace("shown")
    assert len(records) == 1
    assert "[TRACE]" in records[0]


def test_block_traces_start_and_end(records):
    log = KernelLog(records.append, trace=True)
    with log.block("init"):
        log.trace("inside")
    assert len(records) == 3
    assert "Starting Block: init" in records[0]
    assert "inside" in records[1]
    assert "Ending Block: init" in records[2]


def test_block_silent_without_trace(records):
    log = KernelLog(records.append)
    with log.block("init"):
        pass
    assert records == []


def test_check_passes_silently(records):
    log = KernelLog(records.append)
    log.check(True, "x > 0")
    assert records == []


def test_check_failure_raises(records):
    log = KernelLog(records.append)
    with pytest.raises(AssertionError, match=r"Assertion failed: \(x > 0\)"):
        log.check(False, "x > 0")
    assert len(records) == 1
    assert "file: test_log.py" in records[0]


def test_check_failure_with_message(records):
    log = KernelLog(records.append)
    with pytest.raises(AssertionError) as info:
        log.check(0, "size", "must be positive")
    assert "message: must be positive" in str(info.value)
    assert "message: must be positive" in records[0]