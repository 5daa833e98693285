"""
Scheduler Engine — the thread-safe driver around a scheduling policy.

The policy classes (PriorityScheduler, SortedArrayScheduler) are plain,
unsynchronized data structures. A sift-up interleaved with a sift-down
from another thread would corrupt the heap, so every touch of the policy
goes through this engine, under ONE lock.

    producers                 SchedulerEngine                 WorkerPool
    ┌──────────┐  submit()  ┌──────────────────┐ next_task() ┌────────────┐
    │ app code │──────────> │ lock + policy    │ ──────────> │ dispatcher │
    │ retries  │  requeue() │ (heap / sorted)  │  (blocks)   │ + threads  │
    └──────────┘            └──────────────────┘             └────────────┘

"Wait until work exists" is handled here with a Condition on that same
lock: next_task() sleeps until submit() notifies it, or the timeout runs
out. The policy itself never blocks.

Items that exhaust their retries land in an in-memory dead-letter list.
"""

import logging
import threading
from typing import Optional

from config.settings import settings
from models.enums import SchedulingPolicy, TaskStatus
from models.work_item import WorkItem
from scheduler.base import COMPARISON_ERRORS, AbstractScheduler, Task
from scheduler.exceptions import InvalidPriority
from scheduler.registry import create_scheduler

logger = logging.getLogger(__name__)


class SchedulerEngine:
    """
    Owns one scheduling policy and serializes all access to it.

    The engine doesn't execute work — it only ORDERS it. Workers pull the
    next task with next_task() and decide what to do with the payload.
    """

    def __init__(self, policy: Optional[SchedulingPolicy] = None):
        if policy is None:
            policy = SchedulingPolicy(settings.DEFAULT_SCHEDULING_POLICY)
        self._policy = SchedulingPolicy(policy)
        self._scheduler: AbstractScheduler = create_scheduler(self._policy)
        self._lock = threading.Lock()
        self._not_empty = threading.Condition(self._lock)
        self._dead_letter: list[WorkItem] = []

    @property
    def policy(self) -> SchedulingPolicy:
        return self._policy

    def submit(
        self,
        task_type: str,
        params: Optional[dict] = None,
        priority=None,
        max_retries: Optional[int] = None,
    ) -> WorkItem:
        """
        Wrap the request in a WorkItem and insert it under its priority.

        Raises InvalidPriority (from the policy) if the priority can't be
        ordered against what's already queued; nothing is enqueued then.
        """
        item = WorkItem(
            task_type=task_type,
            priority=settings.DEFAULT_PRIORITY if priority is None else priority,
            params=params or {},
            max_retries=settings.MAX_RETRIES if max_retries is None else max_retries,
        )
        self._insert(item)
        logger.debug(f"Submitted {item!r}")
        return item

    def requeue(self, item: WorkItem) -> None:
        """
        Put a retried item back in line under its original priority.

        It gets a fresh sequence number, so it queues behind anything of the
        same priority that is already waiting.
        """
        item.status = TaskStatus.PENDING
        self._insert(item)

    def _insert(self, item: WorkItem) -> None:
        with self._not_empty:
            self._scheduler.insert(item.priority, item)
            self._not_empty.notify()

    def next_task(self, timeout: Optional[float] = None) -> Optional[Task]:
        """
        Remove and return the most urgent task, waiting up to `timeout`
        seconds for one to arrive. Returns None on timeout.

        timeout=None waits forever; timeout=0 never waits.
        """
        with self._not_empty:
            if not self._not_empty.wait_for(
                lambda: not self._scheduler.is_empty(), timeout=timeout
            ):
                return None
            return self._scheduler.extract_top()

    def peek(self) -> Optional[Task]:
        with self._lock:
            if self._scheduler.is_empty():
                return None
            return self._scheduler.peek_top()

    def pending(self) -> int:
        with self._lock:
            return self._scheduler.size()

    def set_policy(self, policy: SchedulingPolicy) -> int:
        """
        Switch to a different policy without losing queued work.

        The new scheduler is built from a snapshot of the old one, re-inserting
        tasks in (priority, sequence) order so equal priorities keep their FIFO
        order under the new policy too. The old scheduler is only replaced once
        every task made it across; if the queued priorities can't be ordered,
        InvalidPriority is raised and the engine keeps the old policy intact.

        Returns the number of tasks moved.
        """
        policy = SchedulingPolicy(policy)
        with self._lock:
            if policy == self._policy:
                return 0

            logger.info(f"Policy change: {self._policy.value} → {policy.value}")
            new_scheduler = create_scheduler(policy)
            try:
                tasks = sorted(self._scheduler.snapshot(), key=lambda t: t.sort_key)
                for task in tasks:
                    new_scheduler.insert(task.priority, task.payload)
            except COMPARISON_ERRORS + (InvalidPriority,) as e:
                logger.error(f"Policy change aborted, keeping {self._policy.value}: {e}")
                raise InvalidPriority(
                    f"Queued priorities can't be ordered, keeping policy {self._policy.value}: {e}"
                ) from e

            self._scheduler = new_scheduler
            self._policy = policy

        if tasks:
            logger.info(f"Re-enqueued {len(tasks)} tasks under new policy: {policy.value}")
        return len(tasks)

    def push_dead_letter(self, item: WorkItem) -> None:
        with self._lock:
            self._dead_letter.append(item)

    def dead_letter(self) -> list[WorkItem]:
        with self._lock:
            return list(self._dead_letter)
