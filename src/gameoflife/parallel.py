"""
Row-band parallel update.

The grid is cut into contiguous bands of rows. Each band is computed by its
own thread, reading only the current grid and writing only its own rows of a
shared output buffer, so bands never race. The caller joins every thread and
then takes the output buffer as the new generation.
"""
import logging
import threading

import numpy as np

from .config import ConfigError
from .grid import check_grid
from .rules import apply_rule, neighbor_counts

logger = logging.getLogger(__name__)


def row_bands(rows: int, workers: int) -> list[tuple[int, int]]:
    """
    Split `rows` into half-open (start, end) ranges, one per worker.

    Every band gets rows // workers rows and the last one also takes the
    remainder. Workers are capped at the row count so no band is empty.
    """
    if rows < 1:
        raise ValueError(f"grid needs at least one row, got {rows}")
    if workers < 1:
        raise ConfigError(f"need at least one worker, got {workers}")

    workers = min(workers, rows)
    chunk = rows // workers
    bands = []
    for i in range(workers):
        start = i * chunk
        end = rows if i == workers - 1 else start + chunk
        bands.append((start, end))
    return bands


def step_band(grid: np.ndarray, out: np.ndarray, start: int, end: int) -> None:
    """Write rows [start, end) of the next generation of `grid` into `out`."""
    # band plus one wrapped halo row on each side
    slab = np.take(grid, np.arange(start - 1, end + 1), axis=0, mode='wrap')
    neighbors = neighbor_counts(slab)[1:-1]  # halo rows have incomplete counts
    out[start:end] = apply_rule(grid[start:end], neighbors)


def step_parallel(grid: np.ndarray, workers: int = 8) -> np.ndarray:
    """Compute the next generation with one thread per row band."""
    check_grid(grid)
    out = np.empty(grid.shape, dtype=np.uint8)
    errors: list[BaseException] = []

    def work(start: int, end: int) -> None:
        try:
            step_band(grid, out, start, end)
        except Exception as e:
            errors.append(e)

    threads = [
        threading.Thread(target=work, args=band, name=f"band-{band[0]}-{band[1]}")
        for band in row_bands(grid.shape[0], workers)
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join()  # barrier: all bands done before the swap

    if errors:
        raise errors[0]

    logger.debug("stepped %dx%d grid with %d bands", grid.shape[0], grid.shape[1], len(threads))
    return out
