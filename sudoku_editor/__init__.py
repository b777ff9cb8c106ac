"""Interactive Sudoku grid editor."""

from .config import EditorConfig
from .core import SudokuBoard, check_placement, is_full, is_valid_placement
from .game import EditorSession, SessionStats
from .io import GridLoadError, LoadResult, load_grid, save_grid

__version__ = "1.0.0"

__all__ = [
    "EditorConfig",
    "SudokuBoard",
    "check_placement",
    "is_full",
    "is_valid_placement",
    "EditorSession",
    "SessionStats",
    "GridLoadError",
    "LoadResult",
    "load_grid",
    "save_grid",
]
