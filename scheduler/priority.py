"""
Priority scheduler backed by a binary min-heap.

Tasks with the lowest priority VALUE come out first (1 before 5 before 10).
Equal priorities come out in insertion order, because every task carries a
sequence number and the heap compares (priority, sequence) pairs.

Data structure: implicit complete binary tree stored in a plain list
- index 0 is the root (the most urgent task)
- parent(i)      = (i - 1) // 2
- left_child(i)  = 2i + 1
- right_child(i) = 2i + 2

    insert:       append + sift-up    → O(log n)
    extract_top:  move last to root
                  + sift-down         → O(log n)
    peek_top:     read index 0        → O(1)

Heap-order invariant: every task's key is <= both of its children's keys.
Siblings are NOT ordered relative to each other — only parent/child.

Sift-down always compares against the SMALLER child. Swapping with the
larger child would put that child above its smaller sibling and break the
invariant one level down.

The sift procedures are written out instead of using heapq so the
comparison key (priority, sequence) never falls through to comparing
payloads, and so the tie-break rule is visible in one place.
"""

from typing import Optional

from scheduler.base import COMPARISON_ERRORS, AbstractScheduler, Task, validate_priority
from scheduler.exceptions import EmptyCollection, InvalidPriority


def parent(i: int) -> int:
    return (i - 1) // 2


def left_child(i: int) -> int:
    return 2 * i + 1


def right_child(i: int) -> int:
    return 2 * i + 2


class PriorityScheduler(AbstractScheduler):

    def __init__(self):
        self._heap: list[Task] = []
        self._counter: int = 0  # monotonic tiebreaker, FIFO among equal priorities

    def insert(self, priority, payload) -> None:
        reference = self._heap[0].priority if self._heap else None
        validate_priority(priority, reference)

        self._heap.append(Task(priority=priority, payload=payload, sequence=self._counter))
        try:
            self._sift_up(len(self._heap) - 1)
        except COMPARISON_ERRORS as e:
            # _sift_up already walked the new task back to the last slot
            self._heap.pop()
            raise InvalidPriority(
                f"Priority {priority!r} can't be ordered against the queued priorities: {e}"
            ) from e
        self._counter += 1

    def extract_top(self) -> Task:
        if not self._heap:
            raise EmptyCollection("extract_top() called on an empty scheduler")

        top = self._heap[0]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            try:
                self._sift_down(0)
            except COMPARISON_ERRORS as e:
                self._heap[0] = top
                self._heap.append(last)
                raise InvalidPriority(
                    f"Queued priorities {last.priority!r} and another held value "
                    f"can't be ordered: {e}"
                ) from e
        return top

    def peek_top(self) -> Task:
        if not self._heap:
            raise EmptyCollection("peek_top() called on an empty scheduler")
        return self._heap[0]

    def is_empty(self) -> bool:
        return not self._heap

    def size(self) -> int:
        return len(self._heap)

    def snapshot(self) -> list[Task]:
        """Copy of the backing list in storage order (index 0 = top)."""
        return list(self._heap)

    @property
    def policy_name(self) -> str:
        return "heap"

    # ── Heap repair ─────────────────────────────────────────────
    #
    # A comparison can raise partway through a sift (e.g. (1, 5) vs (1, "y")).
    # Both sifts then walk the moved task back to where it started before
    # re-raising, so the caller sees the heap exactly as it was.

    def _more_urgent(self, i: int, j: int) -> bool:
        return self._heap[i].sort_key < self._heap[j].sort_key

    def _swap(self, i: int, j: int) -> None:
        self._heap[i], self._heap[j] = self._heap[j], self._heap[i]

    def _walk_back(self, i: int, start: int) -> None:
        """Move the task at `i` back to `start` along the ancestor path between them."""
        path = [max(i, start)]
        while path[-1] != min(i, start):
            path.append(parent(path[-1]))
        if path[0] != i:
            path.reverse()
        for a, b in zip(path, path[1:]):
            self._swap(a, b)

    def _sift_up(self, i: int) -> None:
        start = i
        try:
            # Ancestors above the first non-violating parent are already ordered.
            while i > 0:
                p = parent(i)
                if not self._more_urgent(i, p):
                    break
                self._swap(i, p)
                i = p
        except COMPARISON_ERRORS:
            self._walk_back(i, start)
            raise

    def _sift_down(self, i: int) -> None:
        start = i
        n = len(self._heap)
        try:
            while True:
                smallest: Optional[int] = None
                left, right = left_child(i), right_child(i)

                if left < n:
                    smallest = left
                if right < n and self._more_urgent(right, left):
                    smallest = right

                if smallest is None or not self._more_urgent(smallest, i):
                    break
                self._swap(i, smallest)
                i = smallest
        except COMPARISON_ERRORS:
            self._walk_back(i, start)
            raise
