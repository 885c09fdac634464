"""Conway's Game of Life with a row-band parallel update and a pygame window."""
from .config import ConfigError, LifeConfig
from .engine import LifeEngine
from .parallel import row_bands, step_parallel
from .rules import step_numpy, step_python

__version__ = "0.1.0"
