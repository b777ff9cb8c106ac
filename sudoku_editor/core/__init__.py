"""Core module for the Sudoku grid and its placement rules."""

from .board import SudokuBoard
from .validator import (
    Conflict,
    PlacementResult,
    check_placement,
    is_full,
    is_valid_placement,
)

__all__ = [
    "SudokuBoard",
    "Conflict",
    "PlacementResult",
    "check_placement",
    "is_full",
    "is_valid_placement",
]
