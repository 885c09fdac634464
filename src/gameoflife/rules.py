"""
Conway's Game of Life rules on a toroidal grid.

Rules:
1. Any live cell with fewer than two live neighbors dies (underpopulation)
2. Any live cell with two or three live neighbors lives on
3. Any live cell with more than three live neighbors dies (overpopulation)
4. Any dead cell with exactly three live neighbors becomes alive (reproduction)

Edges wrap around: row -1 is the last row, column -1 the last column.
"""
import numpy as np

from .grid import check_grid


def live_neighbors(grid: np.ndarray, row: int, col: int) -> int:
    """Count live neighbors of (row, col) by walking the 3x3 window."""
    rows, cols = grid.shape
    count = 0
    for dy in range(-1, 2):
        for dx in range(-1, 2):
            if dx == 0 and dy == 0:
                continue  # skip the cell itself
            count += grid[(row + dy) % rows, (col + dx) % cols]
    return int(count)


def live_neighbors_unrolled(grid: np.ndarray, row: int, col: int) -> int:
    """Same count as live_neighbors with the eight terms written out."""
    rows, cols = grid.shape
    up = (row - 1) % rows
    down = (row + 1) % rows
    left = (col - 1) % cols
    right = (col + 1) % cols
    return int(
        grid[up, left] + grid[up, col] + grid[up, right]
        + grid[row, left] + grid[row, right]
        + grid[down, left] + grid[down, col] + grid[down, right]
    )


def next_state(alive: bool, neighbors: int) -> bool:
    if alive:
        return neighbors == 2 or neighbors == 3
    return neighbors == 3


def step_python(grid: np.ndarray) -> np.ndarray:
    """
    Compute the next generation cell by cell.
    Pure Python implementation (slow but clear).
    """
    check_grid(grid)
    rows, cols = grid.shape
    next_grid = np.zeros_like(grid)

    for row in range(rows):
        for col in range(cols):
            n = live_neighbors_unrolled(grid, row, col)
            next_grid[row, col] = next_state(bool(grid[row, col]), n)

    return next_grid


def neighbor_counts(grid: np.ndarray) -> np.ndarray:
    """Neighbor count for every cell, as a same-shaped array."""
    grid = grid.astype(np.uint8, copy=False)  # int and bool grids alike
    neighbors = np.zeros(grid.shape, dtype=np.uint8)  # neighbor accumulator
    for dy in range(-1, 2):
        for dx in range(-1, 2):
            if dx == 0 and dy == 0:
                continue  # skip self
            neighbors += np.roll(np.roll(grid, dy, axis=0), dx, axis=1)  # wrap-around shifts
    return neighbors


def apply_rule(cells: np.ndarray, neighbors: np.ndarray) -> np.ndarray:
    birth = (cells == 0) & (neighbors == 3)  # B3
    survive = (cells == 1) & ((neighbors == 2) | (neighbors == 3))  # S23
    return (birth | survive).astype(np.uint8)


def step_numpy(grid: np.ndarray) -> np.ndarray:
    """Compute the next generation using NumPy vectorized operations."""
    check_grid(grid)
    return apply_rule(grid, neighbor_counts(grid))
