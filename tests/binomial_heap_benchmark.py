import os
import sys
import csv
import random
import time
import statistics

# Ensure we can import from the project
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from meldheap.datastructures import delete_min, empty, find_min, from_iterable, insert, meld, size

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
        times.append((end - start) * 1000)  # convert to milliseconds

    avg_time = statistics.mean(times)
    std_dev = statistics.stdev(times) if len(times) > 1 else 0.0
    return avg_time, std_dev

def measure_forest_width(operation, input_size: int, iterations: int = 3):
    """Return the average number of root trees left by the operation."""
    widths = []
    for _ in range(iterations):
        data = generate_random_list(input_size)
        heap = operation(data)
        widths.append(len(heap))
    return statistics.mean(widths)

# ----------------------------
# Operations to Benchmark
# ----------------------------

def bench_insert(data):
    heap = empty()
    for item in data:
        heap = insert(item, heap)
    return heap

def bench_delete_min(data):
    heap = from_iterable(data)
    while heap:
        find_min(heap)
        heap = delete_min(heap)
    return heap

def bench_meld(data):
    half = len(data) // 2
    heap = meld(from_iterable(data[:half]), from_iterable(data[half:]))
    assert size(heap) == len(data)
    return heap

# ----------------------------
# Benchmark Runner
# ----------------------------

def run_benchmarks(output_file: str, base_input: int = 100, iterations: int = 5):
    """Run exponential performance tests for the binomial heap operations."""
    operations = {
        "insert": bench_insert,
        "delete_min": bench_delete_min,
        "meld": bench_meld,
    }

    input_sizes = [base_input * (2 ** i) for i in range(10)]

    with open(output_file, "w", newline="") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow([
            "Input Size",
            "Operation",
            "Average Time (ms)",
            "Standard Deviation (ms)",
            "Average Root Count"
        ])

        for op_name, op_func in operations.items():
            for n in input_sizes:
                avg_time, std_time = measure_operation_time(op_func, n, iterations)
                avg_width = measure_forest_width(op_func, n)
                writer.writerow([n, op_name, f"{avg_time:.3f}", f"{std_time:.3f}", f"{avg_width:.1f}"])
                print(f"{op_name:<10} | Size: {n:<8} | Avg Time: {avg_time:.3f} ms | "
                      f"Std: {std_time:.3f} ms | Roots: {avg_width:.1f}")

    print(f"\nBenchmark completed. Results saved to {output_file}")

# ----------------------------
# Main Entry Point
# ----------------------------

if __name__ == "__main__":
    OUTPUT_CSV = "binomial_heap_performance.csv"
    run_benchmarks(OUTPUT_CSV, base_input=100)
