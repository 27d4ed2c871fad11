import io
from unittest.mock import patch

import pytest

from numlab.timers import Timer, repeat


def _timer(name="calc"):
    stream = io.StringIO()
    return Timer(name, stream), stream


def test_start_stop_accumulates_elapsed():
    timer, stream = _timer()
    with patch("time.process_time", side_effect=[1.0, 3.5]):
        timer.start()
        assert timer.running
        timer.stop()
    assert not timer.running
    assert timer.elapsed == pytest.approx(2.5)
    assert stream.getvalue() == ""


def test_multiple_sessions_accumulate():
    timer, _ = _timer()
    with patch("time.process_time", side_effect=[0.0, 1.0, 5.0, 7.0]):
        timer.start()
        timer.stop()
        timer.start()
        timer.stop()
    assert timer.elapsed == pytest.approx(3.0)


def test_double_start_reports_error():
    timer, stream = _timer("DataTimer")
    with patch("time.process_time", side_effect=[1.0, 2.0, 4.0]):
        timer.start()
        timer.start()
        timer.stop()
    assert stream.getvalue() == "Error, running timer DataTimer started.\n"
    # Restarting re-establishes the starting point.
    assert timer.elapsed == pytest.approx(2.0)


def test_stop_when_stopped_reports_error_and_keeps_total():
    timer, stream = _timer("CalcTimer")
    with patch("time.process_time", side_effect=[10.0]):
        timer.stop()
    assert stream.getvalue() == "Error, stopped timer CalcTimer stopped again.\n"
    assert timer.elapsed == 0.0


def test_reset_clears_elapsed():
    timer, _ = _timer()
    with patch("time.process_time", side_effect=[0.0, 2.0]):
        timer.start()
        timer.stop()
    timer.reset()
    assert timer.elapsed == 0.0


def test_report_stops_running_timer_and_formats():
    timer, stream = _timer("calc")
    with patch("time.process_time", side_effect=[1.0, 3.5]):
        timer.start()
        line = timer.report()
    assert not timer.running
    assert line == "Elapsed CPU Time calc = '2.50' seconds\n"
    assert stream.getvalue() == line


def test_report_per_iteration_formats():
    timer, stream = _timer("calc")
    with patch("time.process_time", side_effect=[1.0, 3.5]):
        timer.start()
        timer.stop()
    line = timer.report_per_iteration(4)
    assert line.startswith("Elapsed CPU Time per Iteration (calc, 4) = '")
    assert line.endswith("' seconds\n")
    value = float(line.split("'")[1])
    assert value == pytest.approx(timer.elapsed / 4)


def test_context_manager_times_block():
    timer, _ = _timer()
    with patch("time.process_time", side_effect=[2.0, 6.0]):
        with timer as inside:
            assert inside.running
    assert not timer.running
    assert timer.elapsed == pytest.approx(4.0)


def test_repeat_calls_count_times_and_returns_last():
    calls = []

    def record(value):
        calls.append(value)
        return len(calls)

    assert repeat(5, record, "x") == 5
    assert calls == ["x"] * 5


def test_repeat_zero_times_returns_none():
    calls = []
    assert repeat(0, calls.append, 1) is None
    assert calls == []