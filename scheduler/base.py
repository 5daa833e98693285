"""
Abstract base class for all scheduling policies (Strategy pattern).

The SchedulerEngine only knows about AbstractScheduler — it calls insert()
and extract_top() without caring whether the tasks sit in a binary heap or
in a sorted array.

To add a new scheduling policy:
1. Create a new class that inherits AbstractScheduler
2. Implement the abstract methods
3. Register it in scheduler/registry.py

Task is the record a scheduler hands back. The scheduler never looks inside
`payload` — whoever inserted it decides what "executing" it means.
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from scheduler.exceptions import InvalidPriority

# What a `<` between two priorities can raise: TypeError for mixed types,
# ArithmeticError (decimal.InvalidOperation) for Decimal NaN.
COMPARISON_ERRORS = (TypeError, ArithmeticError)


@dataclass
class Task:
    """
    One unit of deferred work.

    priority: lower value = more urgent (min-heap convention)
    payload:  opaque to the scheduler
    sequence: insertion counter assigned by the scheduler; breaks ties
              between equal priorities first-in-first-out
    """
    priority: Any
    payload: Any
    sequence: int = 0

    @property
    def sort_key(self) -> tuple:
        return (self.priority, self.sequence)


def validate_priority(priority, reference=None) -> None:
    """
    Make sure `priority` can live in a totally ordered collection.

    `reference` is a priority already held by the scheduler (the policies pass
    the top). With no reference the value is compared against itself, which
    still rejects unorderable types like dicts and Decimal NaN. This is a cheap
    first check only: a value can order against the top and still fail
    against another held value, so the policies also guard their own
    comparisons and undo a half-finished insert.
    """
    if priority is None:
        raise InvalidPriority("Priority must not be None")
    if isinstance(priority, float) and math.isnan(priority):
        raise InvalidPriority("Priority must not be NaN")

    other = priority if reference is None else reference
    try:
        priority < other
        other < priority
    except COMPARISON_ERRORS as e:
        raise InvalidPriority(
            f"Priority {priority!r} can't be compared with {other!r}: {e}"
        ) from e


class AbstractScheduler(ABC):
    """
    Interface that all scheduling policies implement.

    - insert: add a task
    - extract_top: remove and return the most urgent task
    - peek_top: look at the most urgent task without removing it
    - is_empty / size: how much work is pending

    extract_top() and peek_top() raise EmptyCollection when nothing is
    pending. None of the implementations are thread-safe on their own.
    """

    @abstractmethod
    def insert(self, priority, payload) -> None:
        """Add a new task with the given priority and payload."""
        ...

    @abstractmethod
    def extract_top(self) -> Task:
        """Remove and return the most urgent task."""
        ...

    @abstractmethod
    def peek_top(self) -> Task:
        """View the most urgent task without removing it."""
        ...

    @abstractmethod
    def size(self) -> int:
        """Return the number of tasks currently pending."""
        ...

    @abstractmethod
    def snapshot(self) -> list[Task]:
        """Copy of the pending tasks; order is policy-specific."""
        ...

    @property
    @abstractmethod
    def policy_name(self) -> str:
        """Unique name for this policy (e.g., 'heap', 'sorted_array')."""
        ...

    def is_empty(self) -> bool:
        return self.size() == 0

    def __len__(self) -> int:
        return self.size()
