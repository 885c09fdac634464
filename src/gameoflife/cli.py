"""
Command line entry point.

Usage: python -m gameoflife [run] [--workers N] [--seed S] ...
       python -m gameoflife headless [--generations N] [--show]
       python -m gameoflife benchmark [--sizes 64 128 ...] [--out FILE]
       python -m gameoflife analyze [--csv FILE]
"""
import argparse
import logging
import sys
import time
from pathlib import Path

from . import benchmark
from .config import (
    CELL_SIZE, DENSITY, FRAME_DELAY_MS, WINDOW_HEIGHT, WINDOW_WIDTH, WORKERS,
    ConfigError, LifeConfig,
)
from .engine import LifeEngine
from .grid import format_grid

DEFAULT_CSV = Path("benchmarks") / "benchmark_parallel.csv"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gameoflife", description="Conway's Game of Life")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = parser.add_subparsers(dest="command")

    def add_life_options(p: argparse.ArgumentParser) -> None:
        p.add_argument("--width", type=int, default=WINDOW_WIDTH, help="window width in pixels")
        p.add_argument("--height", type=int, default=WINDOW_HEIGHT, help="window height in pixels")
        p.add_argument("--cell-size", type=int, default=CELL_SIZE, help="cell size in pixels")
        p.add_argument("--density", type=float, default=DENSITY, help="initial fraction of live cells")
        p.add_argument("--workers", type=int, default=WORKERS, help="row bands updated in parallel")
        p.add_argument("--seed", type=int, default=None)
        p.add_argument("--spontaneous", type=float, default=0.0,
                       help="fraction of cells brought to life after each generation")
        p.add_argument("--delay", type=int, default=FRAME_DELAY_MS, help="frame delay in ms")

    add_life_options(sub.add_parser("run", help="windowed demo (default)"))

    headless = sub.add_parser("headless", help="run without a window")
    add_life_options(headless)
    headless.add_argument("--generations", type=int, default=100)
    headless.add_argument("--show", action="store_true", help="print the grid every generation")

    bench = sub.add_parser("benchmark", help="time NumPy against the parallel update")
    bench.add_argument("--sizes", type=int, nargs="+", default=benchmark.GRID_SIZES)
    bench.add_argument("--workers", type=int, nargs="+", default=benchmark.WORKER_COUNTS)
    bench.add_argument("--generations", type=int, default=benchmark.GENERATIONS)
    bench.add_argument("--seed", type=int, default=benchmark.SEED)
    bench.add_argument("--out", type=Path, default=DEFAULT_CSV)
    bench.add_argument("--quiet", action="store_true")

    analyze = sub.add_parser("analyze", help="chart benchmark results")
    analyze.add_argument("--csv", type=Path, default=DEFAULT_CSV)
    analyze.add_argument("--show", action="store_true", help="open the plots interactively")

    return parser


def config_from_args(args: argparse.Namespace) -> LifeConfig:
    return LifeConfig(
        window_width=args.width,
        window_height=args.height,
        cell_size=args.cell_size,
        density=args.density,
        workers=args.workers,
        frame_delay_ms=args.delay,
        spontaneous_rate=args.spontaneous,
        seed=args.seed,
    ).validate()


def run_window(config: LifeConfig) -> int:
    from .visual import GameOfLife  # pygame is only needed for the window

    GameOfLife(config).run()
    return 0


def run_headless(config: LifeConfig, generations: int, show: bool = False) -> dict:
    """Run the simulation without a window and report timing."""
    if generations < 1:
        raise ConfigError(f"generations must be positive, got {generations}")

    engine = LifeEngine.random(config.rows, config.cols, config.density, config.seed,
                               workers=config.workers, spontaneous_rate=config.spontaneous_rate)
    initial_live = engine.population

    print(f"Game of Life: {config.rows} x {config.cols} grid, {config.workers} workers")
    print(f"Generations: {generations}")
    print(f"Initial live cells: {initial_live}")

    show = show and config.cols <= 120 and config.rows <= 60
    start_time = time.perf_counter()
    for _ in range(generations):
        engine.step()
        if show:
            print(format_grid(engine.grid))
            print(f"Generation: {engine.generation}, Live cells: {engine.population}\n")
    elapsed_ms = (time.perf_counter() - start_time) * 1000

    cells = config.rows * config.cols
    print(f"\nFinal live cells: {engine.population}")
    print(f"Total time: {elapsed_ms:.2f} ms")
    print(f"Time per generation: {elapsed_ms / generations:.4f} ms")

    return {
        "rows": config.rows,
        "cols": config.cols,
        "generations": generations,
        "initial_live_cells": initial_live,
        "final_live_cells": engine.population,
        "total_time_ms": elapsed_ms,
        "time_per_generation_ms": elapsed_ms / generations,
        "cells_per_second_million": cells * generations / max(elapsed_ms, 1e-6) / 1000,
    }


def run_analysis(csv_path: Path, show: bool = False) -> int:
    from . import analysis  # matplotlib/seaborn load only here

    try:
        df = analysis.load_results(csv_path)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        print("Run the benchmark first:  python -m gameoflife benchmark", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Loaded {len(df)} records from {csv_path}")
    metrics = analysis.calculate_metrics(df)
    analysis.print_summary(metrics)
    if metrics.empty:
        return 0

    fig = analysis.create_dashboard(df, metrics)
    output_path = csv_path.parent / "parallel_dashboard.png"
    fig.savefig(output_path, dpi=150, bbox_inches='tight', facecolor='white')
    print(f"Saved: {output_path}")
    if show:
        analysis.plt.show()
    return 0


COMMANDS = ("run", "headless", "benchmark", "analyze")
TOP_LEVEL_FLAGS = ("-v", "--verbose")


def with_default_command(argv: list[str]) -> list[str]:
    """Insert `run` after the top-level flags when no subcommand was named."""
    i = 0
    while i < len(argv) and argv[i] in TOP_LEVEL_FLAGS:
        i += 1
    if i < len(argv) and argv[i] in (*COMMANDS, "-h", "--help"):
        return argv
    return [*argv[:i], "run", *argv[i:]]


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(with_default_command(list(sys.argv[1:] if argv is None else argv)))

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    try:
        if args.command == "run":
            return run_window(config_from_args(args))

        if args.command == "headless":
            run_headless(config_from_args(args), args.generations, args.show)
            return 0

        if args.command == "benchmark":
            results = benchmark.run_benchmark(args.sizes, args.workers, args.generations,
                                              args.seed, verbose=not args.quiet)
            benchmark.print_summary(results)
            path = benchmark.save_results(results, args.out)
            print(f"\nResults saved to {path}")
            return 0

        if args.command == "analyze":
            return run_analysis(args.csv, args.show)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    parser.error(f"unknown command {args.command}")
    return 2
