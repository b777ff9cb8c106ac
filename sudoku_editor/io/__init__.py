"""Grid files, terminal rendering and input collection."""

from .display import render_board
from .loader import GridLoadError, LoadResult, load_grid, save_grid
from .prompt import prompt_int, prompt_text

__all__ = [
    "render_board",
    "GridLoadError",
    "LoadResult",
    "load_grid",
    "save_grid",
    "prompt_int",
    "prompt_text",
]
