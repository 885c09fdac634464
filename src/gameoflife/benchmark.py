"""
Benchmark of the update strategies.

Times the whole-grid NumPy step against the row-band parallel step at
several worker counts and writes the results as CSV for analysis.py.
"""
import csv
import time
from pathlib import Path
from typing import Callable

import numpy as np

from .config import ConfigError
from .grid import init_random
from .parallel import step_parallel
from .rules import step_numpy

GRID_SIZES = [64, 128, 256, 512, 1024]
WORKER_COUNTS = [1, 2, 4, 8]
GENERATIONS = 100
SEED = 42

FIELDS = ["strategy", "grid_size", "workers", "generations",
          "time_ms", "time_per_gen_ms", "throughput_mcells_s"]


def time_strategy(step: Callable[[np.ndarray], np.ndarray], grid: np.ndarray, generations: int) -> float:
    """Run `generations` steps from `grid` and return the elapsed time in ms."""
    start_time = time.perf_counter()
    for _ in range(generations):
        grid = step(grid)
    return (time.perf_counter() - start_time) * 1000


def make_result(strategy: str, size: int, workers: int, generations: int, elapsed_ms: float) -> dict:
    elapsed_ms = max(elapsed_ms, 1e-6)
    return {
        "strategy": strategy,
        "grid_size": size,
        "workers": workers,
        "generations": generations,
        "time_ms": elapsed_ms,
        "time_per_gen_ms": elapsed_ms / generations,
        "throughput_mcells_s": size * size * generations / elapsed_ms / 1000,
    }


def run_benchmark(sizes: list[int] | None = None, workers_list: list[int] | None = None,
                  generations: int = GENERATIONS, seed: int = SEED, verbose: bool = True) -> list[dict]:
    """
    Benchmark every grid size with each strategy.

    Args:
        sizes: Square grid sizes to test
        workers_list: Worker counts for the parallel strategy
        generations: Number of generations per test
        seed: Random seed, so every strategy starts from the same grid
        verbose: If True, print a line per measurement

    Returns:
        One result dict per (strategy, size, workers)
    """
    if sizes is None:
        sizes = GRID_SIZES
    if workers_list is None:
        workers_list = WORKER_COUNTS
    if generations < 1:
        raise ConfigError(f"generations must be positive, got {generations}")
    bad_sizes = [s for s in sizes if s < 1]
    if bad_sizes:
        raise ConfigError(f"grid sizes must be positive, got {bad_sizes}")
    bad_workers = [w for w in workers_list if w < 1]
    if bad_workers:
        raise ConfigError(f"worker counts must be positive, got {bad_workers}")

    results = []
    for size in sizes:
        grid = init_random(size, size, density=0.3, seed=seed)
        if verbose:
            print(f"\n--- Grid size: {size}x{size} ---")

        elapsed = time_strategy(step_numpy, grid, generations)
        results.append(make_result("numpy", size, 1, generations, elapsed))
        if verbose:
            print(f"  numpy              {elapsed:>10.2f} ms")

        for workers in workers_list:
            elapsed = time_strategy(lambda g: step_parallel(g, workers), grid, generations)
            results.append(make_result("parallel", size, workers, generations, elapsed))
            if verbose:
                print(f"  parallel x{workers:<3}      {elapsed:>10.2f} ms")

    return results


def print_summary(results: list[dict]) -> None:
    print("\n" + "=" * 72)
    print("SUMMARY")
    print("=" * 72)
    print(f"{'Strategy':>10} | {'Size':>6} | {'Workers':>7} | {'Total (ms)':>12} | "
          f"{'Per Gen (ms)':>12} | {'M cells/s':>10}")
    print("-" * 72)
    for r in results:
        print(f"{r['strategy']:>10} | {r['grid_size']:>6} | {r['workers']:>7} | {r['time_ms']:>12.2f} | "
              f"{r['time_per_gen_ms']:>12.4f} | {r['throughput_mcells_s']:>10.2f}")
    print("=" * 72)


def save_results(results: list[dict], path: Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=FIELDS)
        writer.writeheader()
        for r in results:
            writer.writerow(r)
    return path
