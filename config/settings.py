"""
Centralized configuration using pydantic-settings.

How it works:
- Reads environment variables automatically (e.g., LOG_LEVEL env var → Settings.LOG_LEVEL)
- Falls back to defaults defined here if env vars are not set
- Can also read from a .env file in the project root

Every module imports `settings` from here instead of hardcoding values.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Scheduler ───────────────────────────────────────────────
    DEFAULT_SCHEDULING_POLICY: str = "heap"
    DEFAULT_PRIORITY: int = 5          # 1 = most urgent; any orderable value works

    # ── Worker ──────────────────────────────────────────────────
    WORKER_POOL_SIZE: int = 4          # number of threads in the worker pool
    WORKER_POLL_INTERVAL: float = 0.5  # max seconds the dispatcher waits for work

    # ── Retry ───────────────────────────────────────────────────
    MAX_RETRIES: int = 3

    # ── App ─────────────────────────────────────────────────────
    LOG_LEVEL: str = "INFO"
    SEED_DEMO_TASKS: bool = False      # submit scripts/seed_tasks.py on worker start

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


# Singleton — import this everywhere
settings = Settings()
