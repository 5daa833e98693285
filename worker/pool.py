"""
Worker pool — manages a thread pool that executes tasks from the engine.

Architecture:
    ┌─────────────────────────────────────────────────────────┐
    │                    WorkerPool                            │
    │                                                         │
    │  Dispatcher Thread                                      │
    │  ┌───────────────────────┐                              │
    │  │ engine.next_task()    │  ← blocks until a task      │
    │  │ (most urgent first)   │    arrives or poll timeout   │
    │  └──────────┬────────────┘                              │
    │             │ submit()                                   │
    │             ▼                                            │
    │  ┌──────────────────────────────────────────┐           │
    │  │ ThreadPoolExecutor (N threads)            │           │
    │  │  ┌────────┐ ┌────────┐ ┌────────┐        │           │
    │  │  │Thread 1│ │Thread 2│ │Thread 3│  ...   │           │
    │  │  └────────┘ └────────┘ └────────┘        │           │
    │  └──────────────────────────────────────────┘           │
    └─────────────────────────────────────────────────────────┘

The dispatcher blocks on the engine's condition variable, so it uses no
CPU while the scheduler is empty. The poll timeout only bounds how long
stop() takes to be noticed.

ThreadPoolExecutor queues submissions in an unbounded FIFO, which would
strip priority order from anything waiting there. So the dispatcher takes
a slot from a semaphore sized to the pool BEFORE pulling a task, and the
slot is released when that task finishes. Work waits in the scheduler, not
in the executor's queue.

Only the dispatcher pulls from the engine, so tasks LEAVE the scheduler in
strict priority order. With more than one thread they may still FINISH out
of order, since a short low-priority task can overtake a long urgent one.
"""

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Optional

from config.settings import settings
from scheduler.engine import SchedulerEngine
from worker.executor import TaskExecutor

logger = logging.getLogger(__name__)


class WorkerPool:

    def __init__(self, engine: SchedulerEngine, pool_size: Optional[int] = None):
        self._engine = engine
        self._pool_size = pool_size or settings.WORKER_POOL_SIZE
        self._executor = ThreadPoolExecutor(
            max_workers=self._pool_size,
            thread_name_prefix="task-worker",
        )
        self._task_executor = TaskExecutor(engine)
        self._free_slots = threading.Semaphore(self._pool_size)
        self._running = False
        self._dispatcher: Optional[threading.Thread] = None

    def start(self) -> None:
        """Start the dispatcher thread that feeds tasks to the thread pool."""
        self._running = True
        self._dispatcher = threading.Thread(target=self._dispatch_loop, daemon=True)
        self._dispatcher.start()
        logger.info(f"Worker pool started with {self._pool_size} threads")

    def stop(self) -> None:
        """Stop dispatching, then wait for running tasks to finish."""
        self._running = False
        if self._dispatcher is not None:
            self._dispatcher.join()
        self._executor.shutdown(wait=True)
        logger.info("Worker pool stopped")

    def _dispatch_loop(self) -> None:
        while self._running:
            if not self._free_slots.acquire(timeout=settings.WORKER_POLL_INTERVAL):
                continue  # every thread busy, loop again (check self._running)

            submitted = False
            try:
                task = self._engine.next_task(timeout=settings.WORKER_POLL_INTERVAL)
                if task is None:
                    continue  # timeout, loop again (check self._running)

                item = task.payload
                logger.debug(f"Dispatching {item!r} to thread pool")

                future: Future = self._executor.submit(self._task_executor.execute, item)
                submitted = True
                future.add_done_callback(self._on_task_done)

            except Exception as e:
                logger.error(f"Dispatch error: {e}", exc_info=True)
            finally:
                if not submitted:
                    self._free_slots.release()

    def _on_task_done(self, future: Future) -> None:
        """
        Runs in the worker thread that finished the task.

        Normal success/failure handling happens in TaskExecutor.execute();
        this frees the slot and logs exceptions that escaped it.
        """
        self._free_slots.release()
        exc = future.exception()
        if exc:
            logger.error(f"Unhandled worker exception: {exc}")
