#!/usr/bin/env python3
"""
Performance comparison of the sequence containers.

Benchmarks:
1. Append at the tail
2. Insertion at the front
3. Indexed access (random positions)
4. Removal from the middle
5. Sort with a multi-key ordering policy
6. Cursor-driven filtering

Metrics:
- Operations per second (ops/sec)
- Latency (p50, p95, p99)
"""

import logging
import os
import random
import statistics
import sys
import time
from collections.abc import Callable

from ordseq import DynamicArraySequence, LinkedSequence, Sequence, comparing

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger()

CONTAINERS: dict[str, Callable[[], Sequence]] = {
    "DynamicArraySequence": DynamicArraySequence,
    "LinkedSequence": LinkedSequence,
}


class PerformanceTest:
    def __init__(self, factory: Callable[[], Sequence], name: str):
        self.factory = factory
        self.name = name

    @staticmethod
    def calculate_stats(latencies: list[int]) -> dict:
        """Calculate latency statistics (latencies in nanoseconds)."""
        if not latencies:
            return {}

        sorted_latencies = sorted(latencies)
        return {
            "mean_us": statistics.mean(latencies) / 1_000,
            "median_us": statistics.median(latencies) / 1_000,
            "p95_us": sorted_latencies[int(len(sorted_latencies) * 0.95)] / 1_000,
            "p99_us": sorted_latencies[int(len(sorted_latencies) * 0.99)] / 1_000,
        }

    def _run(self, label: str, count: int, operation: Callable[[int], object]) -> dict:
        latencies = []
        start_time = time.perf_counter_ns()

        for i in range(count):
            op_start = time.perf_counter_ns()
            operation(i)
            latencies.append(time.perf_counter_ns() - op_start)

        elapsed = (time.perf_counter_ns() - start_time) / 1_000_000_000
        results = {
            "test": f"{label} [{self.name}]",
            "count": count,
            "elapsed_sec": elapsed,
            "ops_per_sec": count / elapsed if elapsed else float("inf"),
            **self.calculate_stats(latencies),
        }
        self.print_results(results)
        return results

    def bench_append(self, count: int) -> dict:
        seq = self.factory()
        return self._run("Append", count, seq.append)

    def bench_insert_front(self, count: int) -> dict:
        seq = self.factory()
        return self._run("Insert Front", count, lambda i: seq.insert_at(0, i))

    def bench_random_get(self, size: int, count: int) -> dict:
        seq = self.factory()
        seq.extend(range(size))
        positions = [random.randrange(size) for _ in range(count)]
        return self._run("Random Get", count, lambda i: seq.get(positions[i]))

    def bench_remove_middle(self, size: int) -> dict:
        seq = self.factory()
        seq.extend(range(size))
        return self._run("Remove Middle", size, lambda _: seq.remove_at(len(seq) // 2))

    def bench_sort(self, size: int) -> dict:
        seq = self.factory()
        seq.extend((random.randrange(100), random.random()) for _ in range(size))
        policy = comparing(lambda record: record[0]).then_comparing(lambda record: record[1])
        return self._run("Multi-key Sort", 1, lambda _: seq.sort_with(policy))

    def bench_filter_even(self, size: int) -> dict:
        seq = self.factory()
        seq.extend(range(size))
        return self._run("Remove Evens", 1, lambda _: seq.remove_all_matching(lambda v: v % 2 == 0))

    @staticmethod
    def print_results(results: dict) -> None:
        print(f"\n  {results['test']}")
        print(f"    Operations:  {results['count']}")
        print(f"    Elapsed:     {results['elapsed_sec']:.4f} s")
        print(f"    Throughput:  {results['ops_per_sec']:.2f} ops/sec")
        if "median_us" in results:
            print(
                f"    Latency:     p50={results['median_us']:.2f}us "
                f"p95={results['p95_us']:.2f}us p99={results['p99_us']:.2f}us"
            )


def run_tests(size: int) -> list[dict]:
    all_results = []
    logger.info("Running container benchmarks with size=%d", size)

    for name, factory in CONTAINERS.items():
        print(f"\n{'#'*60}")
        print(f"# {name}")
        print(f"{'#'*60}")

        test = PerformanceTest(factory, name)
        all_results.append(test.bench_append(size))
        all_results.append(test.bench_insert_front(size // 10))
        all_results.append(test.bench_random_get(size, size // 10))
        all_results.append(test.bench_remove_middle(size // 10))
        all_results.append(test.bench_sort(size))
        all_results.append(test.bench_filter_even(size))

    print(f"\n{'#'*60}")
    print(f"# SUMMARY")
    print(f"{'#'*60}")
    for i, result in enumerate(all_results, 1):
        print(f"{i:2d}. {result['test']:<45} {result['ops_per_sec']:>14.2f} ops/sec")

    return all_results


if __name__ == "__main__":
    if len(sys.argv) > 1 and sys.argv[1] == "quick":
        run_tests(size=2_000)
    else:
        run_tests(size=50_000)
