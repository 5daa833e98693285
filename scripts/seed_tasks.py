"""
Seed script — submits a mix of sample tasks for demo purposes.

Usage:
    python -m scripts.seed_tasks

Standalone, this spins up its own engine + worker pool, submits the tasks,
waits for every one of them to finish (or dead-letter), and prints the
outcome. worker/main.py also calls seed() when SEED_DEMO_TASKS is set.

This creates:
- 1 word count task (inline text)
- 3 sleep tasks with different priorities and durations
- 1 guaranteed-failure task (demos retry + dead-letter list)
"""

import logging
import time

from models.enums import TaskStatus
from models.work_item import WorkItem
from scheduler.engine import SchedulerEngine
from worker.pool import WorkerPool

logger = logging.getLogger(__name__)

DEMO_TASKS = [
    {
        "task_type": "sleep",
        "priority": 9,
        "params": {"duration": 0.8},  # low priority report
    },
    {
        "task_type": "sleep",
        "priority": 5,
        "params": {"duration": 0.5},  # normal background sync
    },
    {
        "task_type": "word_count",
        "priority": 2,
        "params": {"text": "the quick brown fox\njumps over the lazy dog\n"},
    },
    {
        "task_type": "sleep",
        "priority": 1,
        "params": {"duration": 0.2},  # user is waiting on this one
    },
    {
        "task_type": "sleep",
        "priority": 5,
        "max_retries": 2,
        "params": {"duration": 0.1, "fail_probability": 1.0},  # flaky
    },
]


def seed(engine: SchedulerEngine) -> list[WorkItem]:
    items = [engine.submit(**task) for task in DEMO_TASKS]
    logger.info(f"Seeded {len(items)} demo tasks")
    return items


def _is_done(item: WorkItem) -> bool:
    return item.status in (TaskStatus.COMPLETED, TaskStatus.FAILED)


def main(timeout: float = 30.0):
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    engine = SchedulerEngine()
    items = seed(engine)

    # Start workers AFTER seeding so the first pick is the most urgent task
    pool = WorkerPool(engine, pool_size=1)
    pool.start()

    deadline = time.monotonic() + timeout
    while not all(_is_done(item) for item in items) and time.monotonic() < deadline:
        time.sleep(0.1)
    pool.stop()

    print(f"\n{'Task':<38} {'Type':<12} {'Prio':>4}  {'Status':<10} Retries")
    print("-" * 76)
    for item in sorted(items, key=lambda i: i.started_at or i.created_at):
        print(
            f"{item.id:<38} {item.task_type:<12} {item.priority:>4}  "
            f"{item.status.value:<10} {item.retry_count}"
        )
    print(f"\nDead-letter list: {len(engine.dead_letter())} task(s)")


if __name__ == "__main__":
    main()
