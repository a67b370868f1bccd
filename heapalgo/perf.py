"""
Timing benchmarks for the heap algorithms.

Runs each operation on random integer lists whose size doubles every
round, and writes the averaged timings to a CSV report.

Usage:
    python -m heapalgo.perf
"""

import csv
import logging
import random
import statistics
import time

from .algorithms import make_heap, pop_heap, push_heap, sort_heap

logger = logging.getLogger(__name__)

# Report written when run as a script
DEFAULT_OUTPUT_CSV = "heap_algo_performance.csv"
DEFAULT_BASE_INPUT = 100
DEFAULT_ROUNDS = 12

CSV_HEADER = [
    "Input Size",
    "Operation",
    "Average Time (ms)",
    "Standard Deviation (ms)",
]


# ----------------------------
# Helper Functions
# ----------------------------

def generate_random_list(size: int):
    """Generate a list of random integers of given size."""
    return [random.randint(0, 1000000) for _ in range(size)]


def measure_operation_time(operation, input_size: int, iterations: int = 5):
    """Run the operation multiple times and return average + std deviation (ms)."""
    times = []
    for _ in range(iterations):
        data = generate_random_list(input_size)
        start = time.perf_counter()
        operation(data)
        end = time.perf_counter()
        times.append((end - start) * 1000)

    avg_time = statistics.mean(times)
    std_dev = statistics.stdev(times) if len(times) > 1 else 0.0
    return avg_time, std_dev


# ----------------------------
# Operations to Benchmark
# ----------------------------

def bench_make_heap(data):
    make_heap(data)
    return data


def bench_push_heap(data):
    heap = []
    for item in data:
        heap.append(item)
        push_heap(heap)
    return heap


def bench_pop_heap(data):
    make_heap(data)
    while data:
        pop_heap(data)
        data.pop()
    return data


def bench_sort_heap(data):
    make_heap(data)
    sort_heap(data)
    return data


OPERATIONS = {
    "make_heap": bench_make_heap,
    "push_heap": bench_push_heap,
    "pop_heap": bench_pop_heap,
    "sort_heap": bench_sort_heap,
}


# ----------------------------
# Benchmark Runner
# ----------------------------

def run_benchmarks(
    output_file: str,
    base_input: int = DEFAULT_BASE_INPUT,
    rounds: int = DEFAULT_ROUNDS,
    iterations: int = 5,
) -> int:
    """Run exponential performance tests for the heap algorithms.

    Returns the number of result rows written (header excluded).
    """
    if base_input < 1:
        raise ValueError("base_input must be >= 1")
    if rounds < 1:
        raise ValueError("rounds must be >= 1")
    if iterations < 1:
        raise ValueError("iterations must be >= 1")

    input_sizes = [base_input * (2 ** i) for i in range(rounds)]
    written = 0

    with open(output_file, "w", newline="") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(CSV_HEADER)

        for op_name, op_func in OPERATIONS.items():
            for size in input_sizes:
                avg_time, std_time = measure_operation_time(op_func, size, iterations)
                writer.writerow([size, op_name, f"{avg_time:.3f}", f"{std_time:.3f}"])
                written += 1
                logger.info(
                    "%-10s | Size: %-8d | Avg Time: %.3f ms | Std: %.3f ms",
                    op_name, size, avg_time, std_time,
                )

    logger.info("Benchmark completed. Results saved to %s", output_file)
    return written


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    run_benchmarks(DEFAULT_OUTPUT_CSV)
