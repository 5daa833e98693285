"""
Shared enumerations used across the entire project.

Using Python enums (inheriting from str) means:
- They compare equal to their plain string values ("heap" == SchedulingPolicy.HEAP)
- They can be built straight from settings / CLI strings: SchedulingPolicy("heap")
- Typos become immediate errors instead of silent bugs
"""

import enum


class TaskStatus(str, enum.Enum):
    PENDING = "PENDING"        # submitted, waiting in the scheduler
    RUNNING = "RUNNING"        # a worker thread is executing it
    COMPLETED = "COMPLETED"    # finished successfully
    FAILED = "FAILED"          # exhausted all retries, moved to dead-letter list
    RETRIED = "RETRIED"        # failed, about to be re-queued (transient state)


class TaskType(str, enum.Enum):
    SLEEP = "sleep"            # simulated workload (configurable duration + failure)
    WORD_COUNT = "word_count"  # count words/lines/chars in a text or file


class SchedulingPolicy(str, enum.Enum):
    HEAP = "heap"                  # binary min-heap, O(log n) insert/extract
    SORTED_ARRAY = "sorted_array"  # sorted list baseline, O(n) insert
