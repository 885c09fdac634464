import logging

import numpy as np

from . import grid as grids
from .parallel import row_bands, step_parallel

logger = logging.getLogger(__name__)


class LifeEngine:
    """
    Simulation state: the current grid, its generation and how it is stepped.

    Each step runs the row-band parallel update and, when spontaneous_rate
    is positive, then brings int(cells * rate) random cells to life.
    """

    def __init__(self, grid: np.ndarray, workers: int = 8, spontaneous_rate: float = 0.0,
                 rng: np.random.Generator | None = None):
        grids.check_grid(grid)
        row_bands(grid.shape[0], workers)  # reject bad worker counts up front
        self.grid = np.array(grid, dtype=np.uint8)  # own copy, edits never reach the caller
        self.workers = workers
        self.spontaneous_rate = spontaneous_rate
        self.rng = rng if rng is not None else np.random.default_rng()
        self.generation = 0

    @classmethod
    def random(cls, rows: int, cols: int, density: float = 0.2, seed: int | None = None, **kwargs) -> "LifeEngine":
        rng = np.random.default_rng(seed)
        return cls(grids.init_random(rows, cols, density, rng), rng=rng, **kwargs)

    @property
    def rows(self) -> int:
        return self.grid.shape[0]

    @property
    def cols(self) -> int:
        return self.grid.shape[1]

    @property
    def population(self) -> int:
        return grids.count_live_cells(self.grid)

    def step(self) -> None:
        self.grid = step_parallel(self.grid, self.workers)  # swap in the new generation
        if self.spontaneous_rate > 0.0:
            self.spontaneous_generation()
        self.generation += 1

    def spontaneous_generation(self) -> int:
        """Bring a sparse random set of cells to life. Returns how many were picked."""
        n = self.grid.size
        m = int(n * self.spontaneous_rate)
        if m == 0:
            return 0
        idx = self.rng.choice(n, m, replace=False)
        np.put(self.grid, idx, 1)
        logger.debug("spontaneous generation: %d cells", m)
        return m

    def paint(self, row: int, col: int, alive: bool = True) -> bool:
        return grids.set_cell(self.grid, row, col, 1 if alive else 0)

    def stamp(self, name: str, row: int, col: int) -> None:
        grids.stamp(self.grid, name, row, col)

    def randomize(self, density: float = 0.2) -> None:
        self.grid = grids.init_random(self.rows, self.cols, density, self.rng)
        self.generation = 0  # reset counter
        logger.info("reseeded %dx%d grid at density %.2f", self.rows, self.cols, density)

    def clear(self) -> None:
        self.grid = grids.empty_grid(self.rows, self.cols)
        self.generation = 0  # reset counter
        logger.info("cleared grid")
