"""
Shared test fixtures.

Everything runs in memory, so the fixtures are small:
- engine: a fresh SchedulerEngine on the heap policy
- fast_poll: shrinks the worker poll interval so pool tests stop quickly
- wait_until: polls a condition for tests that involve worker threads
"""

import time

import pytest

from config.settings import settings
from models.enums import SchedulingPolicy
from scheduler.engine import SchedulerEngine


@pytest.fixture
def engine():
    return SchedulerEngine(SchedulingPolicy.HEAP)


@pytest.fixture
def fast_poll(monkeypatch):
    monkeypatch.setattr(settings, "WORKER_POLL_INTERVAL", 0.05)


@pytest.fixture
def wait_until():
    def _wait(condition, timeout: float = 5.0) -> bool:
        deadline = time.monotonic() + timeout
        while time.monotonic() < deadline:
            if condition():
                return True
            time.sleep(0.01)
        return condition()

    return _wait
