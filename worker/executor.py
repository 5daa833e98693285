"""
Task executor — runs a single WorkItem inside a worker thread.

Each worker thread calls executor.execute(item), which handles the whole
lifecycle:

    1. Mark the item RUNNING
    2. Find the right handler (SleepTask, WordCountTask)
    3. Call handler.run(params)
    4. On success: mark COMPLETED, store the result
    5. On failure: delegate to RetryHandler (retry vs dead-letter)

Thread safety:
- A WorkItem is owned by exactly one thread between next_task() and the
  end of execute(), so mutating it here needs no lock
- Handlers are stateless
- The only shared resource is the engine, which locks internally
"""

import logging
import time
from datetime import datetime, timezone

from jobs.registry import get_task_handler
from models.enums import TaskStatus
from models.work_item import WorkItem
from scheduler.engine import SchedulerEngine
from worker.retry import RetryHandler

logger = logging.getLogger(__name__)


class TaskExecutor:

    def __init__(self, engine: SchedulerEngine):
        self._retry_handler = RetryHandler(engine)

    def execute(self, item: WorkItem) -> dict:
        """
        Execute a single work item. Called by WorkerPool from a thread.

        Returns:
            dict with execution status (for logging/debugging)
        """
        item.status = TaskStatus.RUNNING
        item.started_at = datetime.now(timezone.utc)

        try:
            # ── Find handler and execute ────────────────────────
            handler = get_task_handler(item.task_type)
            start_time = time.monotonic()
            result = handler.run(item.params)
            elapsed = time.monotonic() - start_time

            if not isinstance(result, dict):
                raise TypeError(
                    f"Handler '{item.task_type}' returned {type(result).__name__}, expected dict"
                )

            # ── Mark COMPLETED (only once the result is built) ──
            item.result = {**result, "execution_time_sec": round(elapsed, 3)}
            item.status = TaskStatus.COMPLETED
            item.completed_at = datetime.now(timezone.utc)

            logger.info(f"Task {item.id} [{item.task_type}] completed in {elapsed:.3f}s")
            return {"status": "completed", "task_id": item.id}

        except Exception as e:
            # ── Handle failure: RetryHandler decides retry vs dead-letter
            logger.error(f"Task {item.id} [{item.task_type}] failed: {e}")
            item.result = None
            self._retry_handler.handle_failure(item, str(e))
            return {"status": "failed", "task_id": item.id, "error": str(e)}
