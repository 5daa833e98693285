"""
Scheduler factory — maps policy names to scheduler classes.

One place that knows how to create schedulers, instead of if/elif chains
in the engine and the benchmarks.
"""

from models.enums import SchedulingPolicy
from scheduler.base import AbstractScheduler
from scheduler.priority import PriorityScheduler
from scheduler.sorted_array import SortedArrayScheduler


_REGISTRY: dict[SchedulingPolicy, type[AbstractScheduler]] = {
    SchedulingPolicy.HEAP: PriorityScheduler,
    SchedulingPolicy.SORTED_ARRAY: SortedArrayScheduler,
}


def create_scheduler(policy: SchedulingPolicy) -> AbstractScheduler:
    """Create a fresh, empty scheduler for the given policy."""
    cls = _REGISTRY.get(policy)
    if cls is None:
        raise ValueError(f"Unknown scheduling policy: {policy}")
    return cls()


def available_policies() -> list[str]:
    return [policy.value for policy in _REGISTRY]
