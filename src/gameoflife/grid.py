"""
Grid creation and editing.

A grid is a 2-D uint8 array indexed [row, col]: 0=dead, 1=alive.
"""
import numpy as np

# (row, col) offsets from the top-left corner of each pattern
PATTERNS: dict[str, list[tuple[int, int]]] = {
    "glider": [(0, 1), (1, 2), (2, 0), (2, 1), (2, 2)],
    "blinker": [(0, 0), (0, 1), (0, 2)],
    "block": [(0, 0), (0, 1), (1, 0), (1, 1)],
    "r_pentomino": [(0, 1), (0, 2), (1, 0), (1, 1), (2, 1)],
    "gosper_gun": [
        (0, 24),
        (1, 22), (1, 24),
        (2, 12), (2, 13), (2, 20), (2, 21), (2, 34), (2, 35),
        (3, 11), (3, 15), (3, 20), (3, 21), (3, 34), (3, 35),
        (4, 0), (4, 1), (4, 10), (4, 16), (4, 20), (4, 21),
        (5, 0), (5, 1), (5, 10), (5, 14), (5, 16), (5, 17), (5, 22), (5, 24),
        (6, 10), (6, 16), (6, 24),
        (7, 11), (7, 15),
        (8, 12), (8, 13),
    ],
}


def check_grid(grid: np.ndarray) -> None:
    if grid.ndim != 2:
        raise ValueError(f"grid must be 2-D, got shape {grid.shape}")


def empty_grid(rows: int, cols: int) -> np.ndarray:
    return np.zeros((rows, cols), dtype=np.uint8)  # all dead


def init_random(rows: int, cols: int, density: float = 0.2,
                seed: int | np.random.Generator | None = None) -> np.ndarray:
    """Seed a grid where each cell is alive with probability `density`.

    `seed` may be an int for a reproducible grid or a Generator to draw from.
    """
    rng = np.random.default_rng(seed)
    return (rng.random((rows, cols)) < density).astype(np.uint8)  # Bernoulli field


def set_cell(grid: np.ndarray, row: int, col: int, value: int = 1) -> bool:
    """Write one cell if (row, col) is on the grid. Returns whether it wrote."""
    rows, cols = grid.shape
    if 0 <= row < rows and 0 <= col < cols:  # clip to grid
        grid[row, col] = 1 if value else 0
        return True
    return False


def stamp(grid: np.ndarray, name: str, row: int, col: int) -> None:
    """Draw a named pattern with its top-left at (row, col), wrapping at the edges."""
    try:
        cells = PATTERNS[name]
    except KeyError:
        raise ValueError(f"unknown pattern {name!r}, expected one of {sorted(PATTERNS)}") from None

    rows, cols = grid.shape
    for dy, dx in cells:
        grid[(row + dy) % rows, (col + dx) % cols] = 1


def count_live_cells(grid: np.ndarray) -> int:
    return int(np.sum(grid))


def format_grid(grid: np.ndarray) -> str:
    """Text rendering, '#' for alive and '.' for dead."""
    return "\n".join("".join('#' if cell else '.' for cell in row) for row in grid)
