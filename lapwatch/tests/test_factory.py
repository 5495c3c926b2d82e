"""Tests for factory module."""

import pytest

from lapwatch.factory import StopWatchFactory
from lapwatch.logs import Log
from lapwatch.logs.console import ConsoleLog
from lapwatch.logs.file import FileLog


class ListLog(Log):
    name = "list"
    
    def __init__(self):
        self.records = []
        self.shutdowns = 0
    
    def record(self, stopwatch):
        self.records.append(stopwatch)
    
    def shutdown(self):
        self.shutdowns += 1


class FailingLog(Log):
    name = "failing"
    
    def __init__(self, error=None):
        self.error = error or OSError("collector down")
        self.calls = 0
    
    def record(self, stopwatch):
        self.calls += 1
        raise self.error


class TestStopWatchFactory:
    def test_get_stopwatch_is_running(self, clock):
        factory = StopWatchFactory()
        sw = factory.get_stopwatch("t", "m")
        assert sw.is_running()
        assert sw.tag == "t"
        assert sw.message == "m"

    def test_record_sends_frozen_copy_to_enabled_logs(self, clock):
        first, second = ListLog(), ListLog()
        factory = StopWatchFactory([first, second])
        sw = factory.get_stopwatch("t")
        clock.advance(100)
        
        frozen = factory.record(sw)
        
        assert first.records == [frozen]
        assert second.records == [frozen]
        assert frozen is not sw
        assert frozen.elapsed_nanos() == 100
        assert sw.is_running()

    def test_record_skips_disabled_logs(self, clock):
        enabled, disabled = ListLog(), ListLog()
        disabled.set_enable("false")
        factory = StopWatchFactory([enabled, disabled])
        
        factory.record(factory.get_stopwatch("t"))
        
        assert len(enabled.records) == 1
        assert disabled.records == []

    def test_lapping_after_record_does_not_change_recorded(self, clock):
        log = ListLog()
        factory = StopWatchFactory([log])
        sw = factory.get_stopwatch("t")
        clock.advance(100)
        factory.record(sw)
        sw.lap()
        clock.advance(7)
        factory.record(sw)
        sw.lap()
        
        assert [r.elapsed_nanos() for r in log.records] == [100, 7]

    def test_record_after_lap_sees_fresh_interval(self, clock):
        log = ListLog()
        factory = StopWatchFactory([log])
        sw = factory.get_stopwatch("t")
        clock.advance(100)
        
        factory.record(sw.lap())
        
        assert log.records[0].elapsed_nanos() == 0

    def test_failing_log_does_not_block_later_logs(self, clock):
        later = ListLog()
        factory = StopWatchFactory([FailingLog(), later])
        sw = factory.get_stopwatch("t")
        clock.advance(100)
        
        with pytest.raises(OSError, match="collector down"):
            factory.record(sw)
        
        assert [r.elapsed_nanos() for r in later.records] == [100]

    def test_first_failure_is_reraised(self, clock):
        second = FailingLog(ValueError("second"))
        factory = StopWatchFactory([FailingLog(), second])
        
        with pytest.raises(OSError, match="collector down"):
            factory.record(factory.get_stopwatch("t"))
        
        assert second.calls == 1

    def test_add_log(self, clock):
        factory = StopWatchFactory()
        log = ListLog()
        factory.add_log(log)
        assert factory.logs == (log,)

    def test_timed_records_on_exit(self, clock):
        log = ListLog()
        factory = StopWatchFactory([log])
        
        with factory.timed("block") as sw:
            clock.advance(120_000)
        
        assert not sw.is_running()
        assert [str(r) for r in log.records] == ["block: 120 us"]

    def test_timed_records_when_body_raises(self, clock):
        log = ListLog()
        factory = StopWatchFactory([log])
        
        with pytest.raises(RuntimeError):
            with factory.timed("block"):
                clock.advance(10)
                raise RuntimeError("boom")
        
        assert [r.elapsed_nanos() for r in log.records] == [10]

    def test_timed_keeps_body_exception_when_log_fails(self, clock):
        later = ListLog()
        factory = StopWatchFactory([FailingLog(), later])
        
        with pytest.raises(RuntimeError, match="boom"):
            with factory.timed("block"):
                clock.advance(10)
                raise RuntimeError("boom")
        
        assert [r.elapsed_nanos() for r in later.records] == [10]

    def test_timed_raises_log_error_when_body_succeeds(self, clock):
        factory = StopWatchFactory([FailingLog()])
        
        with pytest.raises(OSError, match="collector down"):
            with factory.timed("block"):
                clock.advance(10)

    def test_shutdown_runs_once(self):
        log = ListLog()
        factory = StopWatchFactory([log])
        factory.shutdown()
        factory.shutdown()
        assert log.shutdowns == 1


class TestFromConfig:
    def test_builds_logs_from_yaml(self, tmp_path):
        config_file = tmp_path / "lapwatch.yaml"
        config_file.write_text(
            "logs:\n"
            "  - type: console\n"
            "    enable: \"false\"\n"
            "  - type: file\n"
            "    options:\n"
            f"      path: {tmp_path / 'timings.log'}\n"
        )
        
        factory = StopWatchFactory.from_config(config_file)
        
        console, file_log = factory.logs
        assert isinstance(console, ConsoleLog)
        assert console.is_enabled() is False
        assert isinstance(file_log, FileLog)
        assert file_log.is_enabled() is True

    def test_missing_config_uses_console(self, tmp_path):
        factory = StopWatchFactory.from_config(tmp_path / "missing.yaml")
        assert len(factory.logs) == 1
        assert isinstance(factory.logs[0], ConsoleLog)
