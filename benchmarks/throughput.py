"""
Throughput benchmark — measures insert/extract speed of each scheduling policy.

How it works:
1. Generate N random priorities (seeded, so every policy sees the same input)
2. Insert all of them into a fresh scheduler, timing the inserts
3. Extract until empty, timing the extracts
4. Check the extracted priorities came out non-decreasing

The heap should win clearly on inserts as N grows: O(log n) per insert
against the sorted array's O(n) shift.
"""

import random
import time

from models.enums import SchedulingPolicy
from scheduler.registry import create_scheduler


class ThroughputBenchmark:

    def __init__(self, num_tasks: int = 10_000, seed: int = 42, max_priority: int = 100):
        self.num_tasks = num_tasks
        self.seed = seed
        self.max_priority = max_priority

    def _priorities(self) -> list[int]:
        rng = random.Random(self.seed)
        return [rng.randint(1, self.max_priority) for _ in range(self.num_tasks)]

    def run(self, policy: str) -> dict:
        """Run the benchmark for a single policy."""
        scheduler = create_scheduler(SchedulingPolicy(policy))
        priorities = self._priorities()

        start = time.perf_counter()
        for i, priority in enumerate(priorities):
            scheduler.insert(priority, i)
        insert_elapsed = time.perf_counter() - start

        extracted = []
        start = time.perf_counter()
        while not scheduler.is_empty():
            extracted.append(scheduler.extract_top().priority)
        extract_elapsed = time.perf_counter() - start

        ordered = all(a <= b for a, b in zip(extracted, extracted[1:]))
        if not ordered or len(extracted) != self.num_tasks:
            raise AssertionError(f"Policy {policy} returned tasks out of order")

        total = insert_elapsed + extract_elapsed
        return {
            "policy": policy,
            "num_tasks": self.num_tasks,
            "insert_sec": round(insert_elapsed, 4),
            "extract_sec": round(extract_elapsed, 4),
            "ops_per_sec": round(2 * self.num_tasks / total, 1) if total else None,
        }

    def run_all_policies(self) -> list[dict]:
        """Benchmark every registered policy on the same input."""
        results = []
        for policy in SchedulingPolicy:
            print(f"\n--- Benchmarking {policy.value} ---")
            result = self.run(policy.value)
            results.append(result)
            print(
                f"  {result['ops_per_sec']} ops/sec "
                f"(insert {result['insert_sec']}s, extract {result['extract_sec']}s)"
            )
        return results
