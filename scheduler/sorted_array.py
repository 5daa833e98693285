"""
Sorted-array scheduler — the naive baseline.

Keeps every pending task in a list sorted by (priority, sequence), most
urgent first. This is the "splice into place" priority queue you'd write
before learning about heaps.

Data structure: sorted list
- insert:      binary search for the slot, then list.insert → O(n)
               (the search is O(log n), shifting the tail is O(n))
- extract_top: pop from the front → O(n) shift
- peek_top:    read index 0       → O(1)

It keeps the same contract and the same FIFO tie-break as
PriorityScheduler, so the two can be swapped at runtime and compared in
benchmarks/. Use the heap for real workloads.
"""

import bisect

from scheduler.base import COMPARISON_ERRORS, AbstractScheduler, Task, validate_priority
from scheduler.exceptions import EmptyCollection, InvalidPriority


class SortedArrayScheduler(AbstractScheduler):

    def __init__(self):
        self._tasks: list[Task] = []
        self._counter: int = 0

    def insert(self, priority, payload) -> None:
        reference = self._tasks[0].priority if self._tasks else None
        validate_priority(priority, reference)

        task = Task(priority=priority, payload=payload, sequence=self._counter)
        try:
            # the list is only touched once the slot is found
            bisect.insort_right(self._tasks, task, key=lambda t: t.sort_key)
        except COMPARISON_ERRORS as e:
            raise InvalidPriority(
                f"Priority {priority!r} can't be ordered against the queued priorities: {e}"
            ) from e
        self._counter += 1

    def extract_top(self) -> Task:
        if not self._tasks:
            raise EmptyCollection("extract_top() called on an empty scheduler")
        return self._tasks.pop(0)

    def peek_top(self) -> Task:
        if not self._tasks:
            raise EmptyCollection("peek_top() called on an empty scheduler")
        return self._tasks[0]

    def size(self) -> int:
        return len(self._tasks)

    def snapshot(self) -> list[Task]:
        """Copy of the pending tasks, most urgent first."""
        return list(self._tasks)

    @property
    def policy_name(self) -> str:
        return "sorted_array"
