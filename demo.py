"""
Binary Heap Demo -- Sorted extraction, custom comparators, storage growth and
operation cost.

Generates:
- viz/*.png -- Individual visualization files
"""

import sys
import time
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))
from binary_heap import (
    BinaryHeap,
    MAX_LOAD_FACTOR,
    EmptyHeapError,
    IncomparableElementError,
    natural_order,
)

SEED = 42

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "orange": "#f39c12",
    "green": "#27ae60",
    "dark": "#2c3e50",
}


def drain(heap):
    out = []
    while not heap.is_empty():
        out.append(heap.remove())
    return out


# ---------------------------------------------------------------------------
# Example 1: Sorted Extraction
# ---------------------------------------------------------------------------
def example_1_sorted_extraction():
    """Natural ordering, None as positive infinity, and empty-heap errors."""
    print("=" * 60)
    print("Example 1: Sorted Extraction")
    print("=" * 60)

    heap = BinaryHeap()
    for v in [5, 3, 8, 1, 4]:
        heap.add(v)
    print(f"\n  Array order after adds: {heap}")
    print(f"  Peek: {heap.peek()}, size: {heap.size()}")
    print(f"  Removed in order: {drain(heap)}")

    for v in [None, 7, None, 2]:
        heap.add(v)
    print(f"\n  With None elements: {heap}")
    print(f"  Removed in order: {drain(heap)}")

    try:
        heap.remove()
    except EmptyHeapError as exc:
        print(f"\n  Empty remove: {type(exc).__name__}: {exc}")

    heap.add(1)
    try:
        heap.add("one")
    except IncomparableElementError as exc:
        print(f"  Mixed types: {type(exc).__name__}: {exc}")


# ---------------------------------------------------------------------------
# Example 2: Custom Comparators
# ---------------------------------------------------------------------------
def example_2_comparators():
    """Ordering by length, and a max-heap from an inverted comparator."""
    print("\n" + "=" * 60)
    print("Example 2: Custom Comparators")
    print("=" * 60)

    by_length = BinaryHeap(lambda a, b: len(a) - len(b))
    for s in ["ccc", "a", "bb"]:
        by_length.add(s)
    print(f"\n  By length: {drain(by_length)}")

    max_heap = BinaryHeap(lambda a, b: natural_order(b, a))
    for v in [5, 3, 8, 1, 4]:
        max_heap.add(v)
    print(f"  Inverted (max-heap): {drain(max_heap)}")


# ---------------------------------------------------------------------------
# Example 3: Storage Growth
# ---------------------------------------------------------------------------
def example_3_growth():
    """Track capacity and load factor as elements are added."""
    print("\n" + "=" * 60)
    print("Example 3: Storage Growth")
    print("=" * 60)

    n = 400
    heap = BinaryHeap()
    sizes = np.arange(1, n + 1)
    capacities = np.zeros(n, dtype=int)
    for i in range(n):
        heap.add(i)
        capacities[i] = heap.capacity()

    steps = np.flatnonzero(np.diff(capacities)) + 1
    print(f"\n  Growth points (size after add): {sizes[steps].tolist()}")
    print(f"  Capacities: {np.unique(capacities).tolist()}")

    fig, axes = plt.subplots(1, 2, figsize=(14, 5))
    axes[0].step(sizes, capacities, where="post", color=COLORS["blue"], label="Capacity")
    axes[0].plot(sizes, sizes, color=COLORS["dark"], linestyle="--", label="Size")
    axes[0].set_xlabel("Elements added")
    axes[0].set_ylabel("Slots")
    axes[0].set_title("Capacity grows to 2c + 1", fontsize=10, fontweight="bold")
    axes[0].legend(fontsize=9)
    axes[0].grid(True, alpha=0.3)

    axes[1].plot(sizes, sizes / capacities, color=COLORS["green"])
    axes[1].axhline(MAX_LOAD_FACTOR, color=COLORS["red"], linestyle="--",
                    label=f"Threshold {MAX_LOAD_FACTOR}")
    axes[1].set_xlabel("Elements added")
    axes[1].set_ylabel("size / capacity")
    axes[1].set_title("Load factor stays near the threshold", fontsize=10, fontweight="bold")
    axes[1].legend(fontsize=9)
    axes[1].grid(True, alpha=0.3)

    plt.tight_layout()
    plt.savefig(VIZ_DIR / "01_growth.png", dpi=120)
    plt.close(fig)
    print("  Saved: viz/01_growth.png")


# ---------------------------------------------------------------------------
# Example 4: Operation Cost
# ---------------------------------------------------------------------------
def example_4_timing():
    """Average add/remove time per element against heap size."""
    print("\n" + "=" * 60)
    print("Example 4: Operation Cost")
    print("=" * 60)

    rng = np.random.default_rng(SEED)
    sizes = [2 ** k for k in range(6, 15)]
    add_us, remove_us = [], []

    for n in sizes:
        values = rng.integers(0, 1_000_000, size=n).tolist()
        heap = BinaryHeap()

        start = time.perf_counter()
        for v in values:
            heap.add(v)
        add_us.append((time.perf_counter() - start) / n * 1e6)

        start = time.perf_counter()
        out = drain(heap)
        remove_us.append((time.perf_counter() - start) / n * 1e6)

        assert out == sorted(values), "extraction order violated"
        print(f"  n={n:<6}  add: {add_us[-1]:6.2f} us/op   remove: {remove_us[-1]:6.2f} us/op")

    fig, ax = plt.subplots(figsize=(8, 5))
    ax.plot(sizes, add_us, marker="o", color=COLORS["blue"], label="add")
    ax.plot(sizes, remove_us, marker="s", color=COLORS["orange"], label="remove")
    ax.set_xscale("log", base=2)
    ax.set_xlabel("Heap size n")
    ax.set_ylabel("Microseconds per operation")
    ax.set_title("Per-operation cost grows with log n", fontsize=10, fontweight="bold")
    ax.legend(fontsize=9)
    ax.grid(True, alpha=0.3)
    plt.tight_layout()
    plt.savefig(VIZ_DIR / "02_timing.png", dpi=120)
    plt.close(fig)
    print("  Saved: viz/02_timing.png")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------
def main():
    print("Binary Heap Demo")
    print("=" * 60)
    print(f"Seed: {SEED}")
    print()

    example_1_sorted_extraction()
    example_2_comparators()
    example_3_growth()
    example_4_timing()

    print("\n" + "=" * 60)
    print("All examples completed successfully.")
    print(f"Visualizations: {VIZ_DIR}/")
    print("=" * 60)


if __name__ == "__main__":
    main()
