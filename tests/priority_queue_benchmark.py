import os
import sys
import csv
import random
import time
import statistics

# Ensure we can import from the project
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from pqueue.datastructures import PriorityQueue

# ----------------------------
# Helper Functions
# ----------------------------

def generate_random_list(size: int):
    """Generate a list of random integers with plenty of duplicates."""
    return [random.randint(0, size // 2 + 1) for _ in range(size)]

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

def index_size(pq: PriorityQueue) -> int:
    """Bytes held by the value index: table, chain entries and each PositionSet buffer."""
    table = pq._index._map
    total = sys.getsizeof(table) + sys.getsizeof(table._buckets)
    for value, positions in table.items():
        total += sys.getsizeof(value) + sys.getsizeof(positions)
        total += sys.getsizeof(positions._items) + sys.getsizeof(positions._items._buf)
    # One _Entry node per distinct value.
    if len(table):
        node = next(head for head in table._buckets if head is not None)
        total += sys.getsizeof(node) * len(table)
    return total

def measure_space_efficiency(operation, input_size: int, iterations: int = 3):
    """Return average memory held by the queue's array and index (bytes)."""
    sizes = []
    for _ in range(iterations):
        data = generate_random_list(input_size)
        pq = operation(data)
        total_size = sys.getsizeof(pq) + sys.getsizeof(pq._heap._data._buf)
        for item in pq:
            total_size += sys.getsizeof(item)
        total_size += index_size(pq)
        sizes.append(total_size)
    return statistics.mean(sizes)

# ----------------------------
# Operations to Benchmark
# ----------------------------

def bench_add(data):
    return PriorityQueue.from_iterable(data)

def bench_heapify(data):
    return PriorityQueue(data)

def bench_poll(data):
    pq = PriorityQueue(data)
    while not pq.is_empty():
        pq.poll()
    return pq

def bench_remove(data):
    pq = PriorityQueue(data)
    for item in data[: len(data) // 2]:
        pq.remove(item)
    return pq

def bench_contains(data):
    pq = PriorityQueue(data)
    for item in data:
        pq.contains(item)
    return pq

# ----------------------------
# Benchmark Runner
# ----------------------------

def run_benchmarks(output_file: str, base_input: int = 100):
    """Run exponential performance tests for PriorityQueue operations."""
    operations = {
        "add": bench_add,
        "heapify": bench_heapify,
        "poll": bench_poll,
        "remove": bench_remove,
        "contains": bench_contains,
    }

    input_sizes = [base_input * (2 ** i) for i in range(10)]

    with open(output_file, "w", newline="") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow([
            "Input Size",
            "Operation",
            "Average Time (ms)",
            "Standard Deviation (ms)",
            "Average Space (bytes)"
        ])

        for op_name, op_func in operations.items():
            for size in input_sizes:
                avg_time, std_time = measure_operation_time(op_func, size)
                avg_space = measure_space_efficiency(op_func, size)
                writer.writerow([size, op_name, f"{avg_time:.3f}", f"{std_time:.3f}", f"{avg_space:.0f}"])
                print(f"{op_name:<10} | Size: {size:<8} | Avg Time: {avg_time:.3f} ms | "
                      f"Std: {std_time:.3f} ms | Avg Space: {avg_space:.0f} bytes")

    print(f"\nBenchmark completed. Results saved to {output_file}")

# ----------------------------
# Main Entry Point
# ----------------------------

if __name__ == "__main__":
    OUTPUT_CSV = "priority_queue_performance.csv"
    run_benchmarks(OUTPUT_CSV, base_input=100)
