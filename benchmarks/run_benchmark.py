"""
CLI entry point for running throughput benchmarks.

Usage:
    python -m benchmarks.run_benchmark                          # all policies, 10k tasks
    python -m benchmarks.run_benchmark --policy heap            # single policy
    python -m benchmarks.run_benchmark --num-tasks 100000       # more tasks
    python -m benchmarks.run_benchmark --policy all --seed 7
"""

import argparse
import json

from benchmarks.throughput import ThroughputBenchmark
from scheduler.registry import available_policies


def main(argv=None):
    parser = argparse.ArgumentParser(description="Priority Scheduler Throughput Benchmark")
    parser.add_argument(
        "--num-tasks", type=int, default=10_000,
        help="Number of tasks to insert and extract (default: 10000)",
    )
    parser.add_argument(
        "--policy", type=str, default="all",
        choices=available_policies() + ["all"],
        help="Which policy to benchmark (default: all)",
    )
    parser.add_argument(
        "--seed", type=int, default=42,
        help="Random seed for the generated priorities (default: 42)",
    )
    args = parser.parse_args(argv)

    print("=== Priority Scheduler Throughput Benchmark ===")
    print(f"Tasks: {args.num_tasks} | Policy: {args.policy}\n")

    bench = ThroughputBenchmark(num_tasks=args.num_tasks, seed=args.seed)

    if args.policy == "all":
        results = bench.run_all_policies()
    else:
        results = [bench.run(args.policy)]

    print("\n=== RESULTS ===")
    print(json.dumps(results, indent=2))

    print("\n{:<15} {:>10} {:>11} {:>15}".format("Policy", "Insert (s)", "Extract (s)", "Throughput"))
    print("-" * 54)
    for r in results:
        print("{:<15} {:>10.4f} {:>11.4f} {:>11.1f} op/s".format(
            r["policy"], r["insert_sec"], r["extract_sec"], r["ops_per_sec"] or 0.0
        ))
    return results


if __name__ == "__main__":
    main()
