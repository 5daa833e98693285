"""
Worker process entry point.

Runs the whole pipeline in one process:

    1. SchedulerEngine — holds pending tasks in priority order
    2. WorkerPool — pulls the most urgent task and executes it in a thread pool

The main thread just waits for Ctrl+C (SIGINT) or SIGTERM and then shuts
down gracefully: stop dispatching, let running tasks finish.

To run:
    python -m worker.main

Set SEED_DEMO_TASKS=true to submit the demo tasks from scripts/seed_tasks.py
on startup.
"""

import logging
import signal
import threading

from config.settings import settings
from scheduler.engine import SchedulerEngine
from scripts.seed_tasks import seed
from worker.pool import WorkerPool

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def main():
    engine = SchedulerEngine()
    logger.info(f"Scheduler engine ready with policy: {engine.policy.value}")

    pool = WorkerPool(engine)
    pool.start()

    if settings.SEED_DEMO_TASKS:
        seed(engine)

    # ── Graceful shutdown on Ctrl+C or SIGTERM ──────────────────
    shutdown_event = threading.Event()

    def shutdown(signum, frame):
        logger.info("Shutdown signal received, stopping...")
        shutdown_event.set()

    signal.signal(signal.SIGTERM, shutdown)
    signal.signal(signal.SIGINT, shutdown)

    logger.info("Worker process running. Press Ctrl+C to stop.")

    # Event.wait() instead of signal.pause() for Windows compatibility
    shutdown_event.wait()

    pool.stop()
    if engine.pending():
        logger.warning(f"Exiting with {engine.pending()} tasks still pending")
    logger.info("Worker process exited")


if __name__ == "__main__":
    main()
