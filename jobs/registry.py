"""
Task handler registry — maps task_type strings to handler instances.

Same pattern as scheduler/registry.py — one place that knows all the types.
"""

from jobs.base import AbstractTaskHandler
from jobs.sleep_job import SleepTask
from jobs.word_count import WordCountTask

# Handlers are stateless, so one instance each is shared by every worker thread
_REGISTRY: dict[str, AbstractTaskHandler] = {}


def register_handler(handler: AbstractTaskHandler) -> None:
    _REGISTRY[handler.task_type] = handler


def _register_defaults() -> None:
    for handler_cls in [SleepTask, WordCountTask]:
        register_handler(handler_cls())


_register_defaults()


def get_task_handler(task_type: str) -> AbstractTaskHandler:
    """Look up a handler by task_type string. Raises ValueError if unknown."""
    handler = _REGISTRY.get(task_type)
    if handler is None:
        raise ValueError(
            f"Unknown task type: '{task_type}'. Available: {list(_REGISTRY.keys())}"
        )
    return handler
