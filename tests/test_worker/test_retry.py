"""
Tests for the RetryHandler.

These test the decision logic:
- If retries remain → item goes back into the engine as PENDING
- If retries exhausted → item goes to FAILED + dead-letter list
"""

from models.enums import TaskStatus
from models.work_item import WorkItem
from worker.retry import RetryHandler


def _make_item(max_retries=3, retry_count=0, priority=5) -> WorkItem:
    return WorkItem(
        task_type="sleep",
        priority=priority,
        params={"duration": 0.01},
        max_retries=max_retries,
        retry_count=retry_count,
        status=TaskStatus.RUNNING,
    )


def test_retry_requeues_as_pending(engine):
    """First failure with retries left → back in the scheduler."""
    item = _make_item(max_retries=3, retry_count=0)

    RetryHandler(engine).handle_failure(item, "something broke")

    assert item.status == TaskStatus.PENDING
    assert item.retry_count == 1
    assert item.error_message == "something broke"
    assert engine.next_task(timeout=0).payload is item


def test_retry_increments_count(engine):
    item = _make_item(max_retries=3, retry_count=1)

    RetryHandler(engine).handle_failure(item, "failed again")

    assert item.retry_count == 2
    assert item.status == TaskStatus.PENDING


def test_retry_keeps_original_priority(engine):
    engine.submit("sleep", priority=9)
    item = _make_item(priority=1)

    RetryHandler(engine).handle_failure(item, "boom")

    assert engine.next_task(timeout=0).payload is item


def test_exhausted_retries_sets_failed(engine):
    """When retry_count goes past max_retries → FAILED."""
    item = _make_item(max_retries=2, retry_count=2)

    RetryHandler(engine).handle_failure(item, "final failure")

    assert item.status == TaskStatus.FAILED
    assert item.retry_count == 3
    assert item.completed_at is not None
    assert engine.pending() == 0


def test_exhausted_retries_pushes_to_dead_letter(engine):
    item = _make_item(max_retries=1, retry_count=1)

    RetryHandler(engine).handle_failure(item, "permanent failure")

    dead = engine.dead_letter()
    assert dead == [item]
    assert dead[0].error_message == "permanent failure"


def test_zero_max_retries_fails_immediately(engine):
    item = _make_item(max_retries=0)

    RetryHandler(engine).handle_failure(item, "no second chances")

    assert item.status == TaskStatus.FAILED
    assert engine.dead_letter() == [item]
