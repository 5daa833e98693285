"""
Abstract base class for task handlers.

Each task type (sleep, word_count) implements this interface. The executor
calls handler.run(params) without knowing which type it is — it looks the
handler up in the registry by the WorkItem's task_type string.

To add a new task type:
1. Create a class that inherits AbstractTaskHandler
2. Implement run() and task_type
3. Add it to the registry
"""

from abc import ABC, abstractmethod


class AbstractTaskHandler(ABC):

    @abstractmethod
    def run(self, params: dict) -> dict:
        """
        Execute the task.

        Args:
            params: task-specific parameters from WorkItem.params.
                    Each task type expects different keys in here.

        Returns:
            dict with results — stored on WorkItem.result.

        Raises:
            Any exception → triggers retry logic in the worker.
        """
        ...

    @property
    @abstractmethod
    def task_type(self) -> str:
        """Unique identifier matching the TaskType enum (e.g., 'sleep')."""
        ...
