"""Tests for the SleepTask handler."""

import pytest

from jobs import sleep_job
from jobs.sleep_job import SleepTask


@pytest.fixture
def slept(monkeypatch):
    """Record sleep calls instead of actually sleeping."""
    calls = []
    monkeypatch.setattr(sleep_job.time, "sleep", calls.append)
    return calls


def test_completes_with_result():
    result = SleepTask().run({"duration": 0.01})  # very short sleep for fast tests

    assert result["steps"] == 1
    assert result["duration"] == 0.01
    assert result["elapsed_sec"] >= 0


def test_default_duration(slept):
    result = SleepTask().run({})  # no duration → defaults to 1.0

    assert result["duration"] == 1.0
    assert slept == [1.0]


def test_work_is_split_into_steps(slept):
    result = SleepTask().run({"duration": 2.0, "steps": 4})

    assert result["steps"] == 4
    assert slept == [0.5, 0.5, 0.5, 0.5]


def test_fail_at_step_stops_midway(slept):
    with pytest.raises(RuntimeError, match="step 2 of 4"):
        SleepTask().run({"duration": 2.0, "steps": 4, "fail_at_step": 2})

    assert len(slept) == 2


def test_guaranteed_failure(slept):
    """fail_probability=1.0 should always raise, before any work."""
    with pytest.raises(RuntimeError, match="Simulated failure"):
        SleepTask().run({"fail_probability": 1.0})
    assert slept == []


def test_zero_probability_never_fails(slept):
    for _ in range(10):
        SleepTask().run({"duration": 0.0, "fail_probability": 0.0})


@pytest.mark.parametrize("params, message", [
    ({"duration": -1}, "duration"),
    ({"steps": 0}, "steps"),
])
def test_invalid_params_rejected(params, message):
    with pytest.raises(ValueError, match=message):
        SleepTask().run(params)


def test_task_type():
    assert SleepTask().task_type == "sleep"
