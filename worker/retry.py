"""
Retry handler — decides what happens when a task fails.

Two outcomes:
1. retry_count <= max_retries → status back to PENDING, re-inserted into the engine
2. retry_count >  max_retries → status FAILED, appended to the dead-letter list

Lifecycle on failure:
    RUNNING → (exception) → retry_count++ → RETRIED → PENDING  (if retries left)
    RUNNING → (exception) → retry_count++ → FAILED             (if retries exhausted)

Retries go through the same engine.requeue() path as everything else, so
a retried item competes on priority like any new submission.
"""

import logging
from datetime import datetime, timezone

from models.enums import TaskStatus
from models.work_item import WorkItem
from scheduler.engine import SchedulerEngine

logger = logging.getLogger(__name__)


class RetryHandler:

    def __init__(self, engine: SchedulerEngine):
        self._engine = engine

    def handle_failure(self, item: WorkItem, error_msg: str) -> None:
        """
        Called by TaskExecutor when a handler raises.

        Args:
            item: the WorkItem that failed (mutated in place)
            error_msg: the exception message
        """
        item.error_message = error_msg
        item.retry_count += 1

        if item.retry_count <= item.max_retries:
            # ── Retry: back into the scheduler ──────────────────
            item.status = TaskStatus.RETRIED
            self._engine.requeue(item)
            logger.info(
                f"Task {item.id} will be retried "
                f"({item.retry_count}/{item.max_retries})"
            )
        else:
            # ── Exhausted: dead-letter list ─────────────────────
            item.status = TaskStatus.FAILED
            item.completed_at = datetime.now(timezone.utc)
            self._engine.push_dead_letter(item)
            logger.warning(
                f"Task {item.id} exhausted retries ({item.max_retries}), "
                f"moved to dead-letter list"
            )
