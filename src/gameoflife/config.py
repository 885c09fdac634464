"""
Settings for the Game of Life demo.

Module constants hold the defaults; LifeConfig carries one run's values.
"""
from dataclasses import dataclass

BLACK = (0, 0, 0)          # background
GRAY = (40, 40, 40)        # grid lines
GREEN = (0, 255, 100)      # alive cells
YELLOW = (255, 255, 0)     # paused UI
WHITE = (255, 255, 255)    # text

WINDOW_WIDTH = 1024
WINDOW_HEIGHT = 768
CELL_SIZE = 10
DENSITY = 0.2
WORKERS = 8

FRAME_DELAY_MS = 50
FRAME_DELAY_STEP_MS = 10
MIN_FRAME_DELAY_MS = 10
MAX_FRAME_DELAY_MS = 1000


class ConfigError(ValueError):
    """Raised when a run is configured with values the demo can't use."""


def clamp_frame_delay(ms: int) -> int:
    return max(MIN_FRAME_DELAY_MS, min(ms, MAX_FRAME_DELAY_MS))


@dataclass
class LifeConfig:
    window_width: int = WINDOW_WIDTH
    window_height: int = WINDOW_HEIGHT
    cell_size: int = CELL_SIZE
    density: float = DENSITY
    workers: int = WORKERS
    frame_delay_ms: int = FRAME_DELAY_MS
    spontaneous_rate: float = 0.0
    seed: int | None = None

    @property
    def rows(self) -> int:
        return self.window_height // self.cell_size

    @property
    def cols(self) -> int:
        return self.window_width // self.cell_size

    def validate(self) -> "LifeConfig":
        """Check every field, raising ConfigError on the first bad one."""
        if self.window_width <= 0 or self.window_height <= 0:
            raise ConfigError(f"window size must be positive, got {self.window_width}x{self.window_height}")
        if self.cell_size <= 0:
            raise ConfigError(f"cell size must be positive, got {self.cell_size}")
        if self.cell_size > min(self.window_width, self.window_height):
            raise ConfigError(f"cell size {self.cell_size} does not fit a {self.window_width}x{self.window_height} window")
        if not 0.0 <= self.density <= 1.0:
            raise ConfigError(f"density must be in [0, 1], got {self.density}")
        if not 0.0 <= self.spontaneous_rate <= 1.0:
            raise ConfigError(f"spontaneous rate must be in [0, 1], got {self.spontaneous_rate}")
        if self.workers < 1:
            raise ConfigError(f"need at least one worker, got {self.workers}")
        if not MIN_FRAME_DELAY_MS <= self.frame_delay_ms <= MAX_FRAME_DELAY_MS:
            raise ConfigError(
                f"frame delay must be in [{MIN_FRAME_DELAY_MS}, {MAX_FRAME_DELAY_MS}] ms, got {self.frame_delay_ms}"
            )
        return self
