"""Tests for TaskExecutor — one WorkItem through its full lifecycle."""

from jobs import registry
from jobs.base import AbstractTaskHandler
from models.enums import TaskStatus
from worker.executor import TaskExecutor


def test_successful_task_is_completed(engine):
    item = engine.submit("word_count", {"text": "a b c"}, priority=1)
    engine.next_task(timeout=0)

    outcome = TaskExecutor(engine).execute(item)

    assert outcome == {"status": "completed", "task_id": item.id}
    assert item.status == TaskStatus.COMPLETED
    assert item.result["word_count"] == 3
    assert "execution_time_sec" in item.result
    assert item.started_at is not None
    assert item.completed_at is not None


def test_failing_task_is_retried(engine):
    item = engine.submit("sleep", {"fail_probability": 1.0}, max_retries=2)
    engine.next_task(timeout=0)

    outcome = TaskExecutor(engine).execute(item)

    assert outcome["status"] == "failed"
    assert "Simulated failure" in outcome["error"]
    assert item.status == TaskStatus.PENDING
    assert item.retry_count == 1
    assert engine.pending() == 1


def test_unknown_task_type_goes_through_retry_path(engine):
    item = engine.submit("thumbnail", max_retries=0)
    engine.next_task(timeout=0)

    outcome = TaskExecutor(engine).execute(item)

    assert outcome["status"] == "failed"
    assert item.status == TaskStatus.FAILED
    assert "Unknown task type" in item.error_message
    assert engine.dead_letter() == [item]


def test_failing_task_ends_in_dead_letter_after_all_retries(engine):
    item = engine.submit("sleep", {"fail_probability": 1.0}, max_retries=2)
    executor = TaskExecutor(engine)

    while (task := engine.next_task(timeout=0)) is not None:
        executor.execute(task.payload)

    assert item.status == TaskStatus.FAILED
    assert item.retry_count == 3
    assert engine.dead_letter() == [item]


class _NoResultTask(AbstractTaskHandler):
    """A buggy handler that forgets to return its result."""

    def run(self, params: dict) -> dict:
        return None

    @property
    def task_type(self) -> str:
        return "no_result"


def test_handler_returning_non_dict_is_retried(engine, monkeypatch):
    monkeypatch.setitem(registry._REGISTRY, "no_result", _NoResultTask())
    item = engine.submit("no_result", max_retries=1)
    engine.next_task(timeout=0)

    outcome = TaskExecutor(engine).execute(item)

    assert outcome["status"] == "failed"
    assert "expected dict" in item.error_message
    assert item.status == TaskStatus.PENDING
    assert item.result is None
    assert item.retry_count == 1
    assert engine.pending() == 1


def test_handler_returning_non_dict_ends_in_dead_letter(engine, monkeypatch):
    monkeypatch.setitem(registry._REGISTRY, "no_result", _NoResultTask())
    item = engine.submit("no_result", max_retries=1)
    executor = TaskExecutor(engine)

    while (task := engine.next_task(timeout=0)) is not None:
        executor.execute(task.payload)

    assert item.status == TaskStatus.FAILED
    assert item.completed_at is not None
    assert engine.dead_letter() == [item]
