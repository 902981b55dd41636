import os
import sys
import csv
import random
import time
import statistics

# Ensure we can import from the project
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from bucketmap.datastructures.hash_map import HashMap

# ----------------------------
# Helper Functions
# ----------------------------

def generate_random_pairs(size: int):
    """Generate a list of random key-value pairs."""
    return [(random.randint(0, size * 10), random.randint(0, 1000000)) for _ in range(size)]

def measure_operation_time(operation, input_size: int, iterations: int = 5):
    """Run the operation multiple times and return average + std deviation (ms)."""
    times = []
    for _ in range(iterations):
        data = generate_random_pairs(input_size)
        start = time.perf_counter()
        operation(data)
        end = time.perf_counter()
        times.append((end - start) * 1000)  # convert to milliseconds

    avg_time = statistics.mean(times)
    std_dev = statistics.stdev(times) if len(times) > 1 else 0.0
    return avg_time, std_dev

def measure_load(operation, input_size: int, iterations: int = 3):
    """Return average final load factor and longest chain of the table."""
    loads = []
    chains = []
    for _ in range(iterations):
        hm = operation(generate_random_pairs(input_size))
        loads.append(hm.load_factor)
        chains.append(max((len(b) for b in hm._buckets), default=0))
    return statistics.mean(loads), statistics.mean(chains)

# ----------------------------
# Operations to Benchmark
# ----------------------------

def build(data):
    hm = HashMap()
    for k, v in data:
        hm.insert(k, v)
    return hm

def bench_get(data):
    hm = build(data)
    for k, _ in data:
        hm.get(k)
    return hm

def bench_contains(data):
    hm = build(data)
    for k, _ in data:
        hm.contains_key(k)
    return hm

def bench_remove(data):
    hm = build(data)
    for k, _ in data[: len(data) // 2]:
        hm.remove(k)
    return hm

def bench_items(data):
    hm = build(data)
    for _ in hm.items():
        pass
    return hm

# ----------------------------
# Benchmark Runner
# ----------------------------

def run_benchmarks(output_file: str, base_input: int = 100, steps: int = 10):
    """Run exponential performance tests for HashMap operations."""
    operations = {
        "insert": build,
        "get": bench_get,
        "contains_key": bench_contains,
        "remove": bench_remove,
        "items": bench_items,
    }

    input_sizes = [base_input * (2 ** i) for i in range(steps)]

    with open(output_file, "w", newline="") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow([
            "Input Size",
            "Operation",
            "Average Time (ms)",
            "Standard Deviation (ms)",
            "Average Load Factor",
            "Average Longest Chain",
        ])

        for op_name, op_func in operations.items():
            for size in input_sizes:
                avg_time, std_time = measure_operation_time(op_func, size)
                avg_load, avg_chain = measure_load(op_func, size)
                writer.writerow([size, op_name, f"{avg_time:.3f}", f"{std_time:.3f}", f"{avg_load:.3f}", f"{avg_chain:.1f}"])
                print(f"{op_name:<12} | Size: {size:<8} | Avg Time: {avg_time:.3f} ms | "
                      f"Std: {std_time:.3f} ms | Load: {avg_load:.3f} | Longest chain: {avg_chain:.1f}")

    print(f"\nBenchmark completed. Results saved to {output_file}")

# ----------------------------
# Main Entry Point
# ----------------------------

if __name__ == "__main__":
    OUTPUT_CSV = "hash_map_performance.csv"
    run_benchmarks(OUTPUT_CSV, base_input=100)
