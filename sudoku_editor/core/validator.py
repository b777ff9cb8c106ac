"""Placement and completion checks for Sudoku grids."""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable, Optional, Tuple

if TYPE_CHECKING:
    from .board import SudokuBoard


class Conflict(str, Enum):
    """Why a placement was refused."""
    NONE = "none"
    ROW = "row"
    COLUMN = "column"
    BLOCK = "block"
    INVALID_ARGUMENT = "invalid_argument"


@dataclass(frozen=True)
class PlacementResult:
    """Outcome of checking one prospective placement."""
    conflict: Conflict = Conflict.NONE
    conflict_cell: Optional[Tuple[int, int]] = None
    detail: str = ""

    @property
    def legal(self) -> bool:
        return self.conflict is Conflict.NONE

    def message(self, value: int) -> str:
        """User-facing reason for a refused placement, empty if legal."""
        if self.conflict is Conflict.NONE:
            return ""
        if self.conflict is Conflict.INVALID_ARGUMENT:
            return f"Invalid placement: {self.detail}."
        where = {
            Conflict.ROW: "row",
            Conflict.COLUMN: "column",
            Conflict.BLOCK: "block",
        }[self.conflict]
        return f"The value {value} is already present in the same {where}."


def check_placement(board: SudokuBoard, row: int, col: int, value: int) -> PlacementResult:
    """
    Check whether value may be written at (row, col).

    The target cell itself is not required to be empty; callers decide
    whether an occupied cell is writable. Scans stop at the first conflict,
    in row, column, block order.

    Args:
        board: The Sudoku board. Not modified.
        row: Zero-based row index.
        col: Zero-based column index.
        value: Candidate digit (1 to board.size).

    Returns:
        A PlacementResult; ``result.legal`` is True if no unit holds value.
    """
    if not board.in_bounds(row, col):
        return PlacementResult(
            Conflict.INVALID_ARGUMENT,
            detail=f"cell ({row}, {col}) is outside a {board.size}x{board.size} grid",
        )
    if value < 1 or value > board.size:
        return PlacementResult(
            Conflict.INVALID_ARGUMENT,
            detail=f"value {value} is not between 1 and {board.size}",
        )

    # Check row
    for i in range(board.size):
        if board.grid[row, i] == value:
            return PlacementResult(Conflict.ROW, (row, i))

    # Check column
    for i in range(board.size):
        if board.grid[i, col] == value:
            return PlacementResult(Conflict.COLUMN, (i, col))

    # Check block
    box_row, box_col = board.box_origin(row, col)
    for i in range(box_row, box_row + board.box_size):
        for j in range(box_col, box_col + board.box_size):
            if board.grid[i, j] == value:
                return PlacementResult(Conflict.BLOCK, (i, j))

    return PlacementResult()


def is_valid_placement(
    board: SudokuBoard,
    row: int,
    col: int,
    value: int,
    report: Optional[Callable[[str], None]] = print,
) -> bool:
    """
    Check if placing a value at (row, col) is legal.

    A refused placement is a normal outcome: the reason is passed to
    ``report`` (print by default, None to stay quiet) and False is returned.

    Args:
        board: The Sudoku board.
        row: Row index.
        col: Column index.
        value: Value to check (1 to board.size).
        report: Callable receiving the refusal message.

    Returns:
        True if the placement is legal.
    """
    result = check_placement(board, row, col, value)
    if not result.legal and report is not None:
        report(result.message(value))
    return result.legal


def is_full(board: SudokuBoard) -> bool:
    """Check whether every cell holds a digit, scanning row by row."""
    for i in range(board.size):
        for j in range(board.size):
            if board.grid[i, j] == 0:
                return False
    return True
