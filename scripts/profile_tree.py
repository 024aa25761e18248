"""
Profiling script for PyBST performance analysis.

Compares random insertion order (expected logarithmic depth) with sorted
insertion order (degenerate, linked-list shaped tree).
"""

import cProfile
import pstats
import io
from pstats import SortKey
import time
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import numpy as np
from src.pybst.bstree import BinarySearchTree


def create_values(n, shuffled=True):
    """Create n distinct integer values, optionally in random order."""
    rng = np.random.default_rng(42)
    if shuffled:
        return rng.permutation(n).tolist()
    return list(range(n))


def run_workload(values):
    """Insert, search, query neighbours of and remove every value.

    Returns the (size, height, depth ratio) of the tree once fully built,
    where depth ratio compares the height with the ideal log2(n + 1).
    """
    tree = BinarySearchTree(values)
    size, height = tree.size, tree.height()
    for v in values:
        tree.search(v)
    for v in values[::10]:
        tree.get_predecessor(v)
        tree.get_successor(v)
    tree.to_array()
    for v in values:
        tree.remove(v)
    ideal = max(1.0, float(np.log2(size + 1)))
    return size, height, height / ideal


def profile_random_small():
    """Profile 1,000 values in random order."""
    return run_workload(create_values(1000))


def profile_random_large():
    """Profile 50,000 values in random order."""
    return run_workload(create_values(50000))


def profile_sorted():
    """Profile 2,000 values in sorted order (degenerate tree)."""
    return run_workload(create_values(2000, shuffled=False))


def profile_duplicates():
    """Profile 5,000 values drawn from 20 distinct keys."""
    rng = np.random.default_rng(42)
    return run_workload(rng.integers(0, 20, size=5000).tolist())


def benchmark_scenario(name, func, top=15):
    """Profile one workload and report its tree shape and hottest calls."""
    print(f"\n{'-'*60}")
    print(name)
    print('-'*60)

    profiler = cProfile.Profile()
    start_time = time.perf_counter()
    size, height, ratio = profiler.runcall(func)
    elapsed = time.perf_counter() - start_time

    print(f"nodes={size} height={height} height/log2(n+1)={ratio:.1f} time={elapsed:.3f}s")

    s = io.StringIO()
    pstats.Stats(profiler, stream=s).sort_stats(SortKey.TIME).print_stats(top)
    print(s.getvalue())

    return profiler


def main():
    """Run all profiling scenarios."""
    print("PyBST Performance Profiling")
    print("=" * 60)

    scenarios = [
        ("Random Small (1000 values)", profile_random_small),
        ("Random Large (50000 values)", profile_random_large),
        ("Sorted (2000 values)", profile_sorted),
        ("Duplicates (5000 values, 20 keys)", profile_duplicates),
    ]

    profilers = {}
    for name, func in scenarios:
        profilers[name] = benchmark_scenario(name, func)

    print("\n" + "="*60)
    print("Saving detailed profiles...")
    print("="*60)

    for name, profiler in profilers.items():
        filename = f"profile_{name.lower().replace(' ', '_').replace('(', '').replace(')', '').replace(',', '')}.prof"
        profiler.dump_stats(filename)
        print(f"Saved: {filename}")

    print("\nTo view detailed profile, use:")
    print("  python -m pstats <profile_file>")


if __name__ == "__main__":
    main()
