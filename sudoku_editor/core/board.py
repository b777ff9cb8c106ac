"""Sudoku grid representation with a configurable block size."""

from __future__ import annotations
import numpy as np
from typing import List, Optional, Tuple

from .validator import is_full


class SudokuBoard:
    """
    A square Sudoku grid edited in place during a session.

    The side length is S = B * B where B is the block size. Cells hold
    0 (empty) or a digit in 1..S. Standard Sudoku is 9x9 with 3x3 blocks;
    4x4 (B=2) and 16x16 (B=4) grids work the same way.
    """

    def __init__(self, size: int = 9, grid: Optional[np.ndarray] = None):
        """
        Initialize a board.

        Args:
            size: Side length. Must be a perfect square.
            grid: Optional initial cell values. If None, creates an empty board.
        """
        box_size = int(round(np.sqrt(size)))
        if size < 1 or box_size * box_size != size:
            raise ValueError(f"Size must be a perfect square, got {size}")

        self.size = size
        self.box_size = box_size

        if grid is not None:
            grid = np.asarray(grid)
            if grid.shape != (size, size):
                raise ValueError(f"Grid shape must be ({size}, {size}), got {grid.shape}")
            self.grid = grid.astype(np.int32)
        else:
            self.grid = np.zeros((size, size), dtype=np.int32)

    @classmethod
    def from_box_size(cls, box_size: int) -> SudokuBoard:
        """Create an empty board whose blocks are box_size x box_size."""
        return cls(box_size * box_size)

    def copy(self) -> SudokuBoard:
        """Create a deep copy of the board."""
        return SudokuBoard(self.size, self.grid)

    def in_bounds(self, row: int, col: int) -> bool:
        """Check that (row, col) addresses a cell of this board."""
        return 0 <= row < self.size and 0 <= col < self.size

    def get(self, row: int, col: int) -> int:
        """Get value at position (row, col). 0 means empty."""
        return int(self.grid[row, col])

    def set(self, row: int, col: int, value: int) -> None:
        """Set value at position (row, col). Use 0 to clear."""
        if value < 0 or value > self.size:
            raise ValueError(f"Value must be 0-{self.size}, got {value}")
        self.grid[row, col] = value

    def clear(self, row: int, col: int) -> None:
        """Clear the cell at position (row, col)."""
        self.grid[row, col] = 0

    def is_empty(self, row: int, col: int) -> bool:
        """Check if cell is empty (value is 0)."""
        return bool(self.grid[row, col] == 0)

    def get_row(self, row: int) -> np.ndarray:
        """Get all values in a row."""
        return self.grid[row, :]

    def get_col(self, col: int) -> np.ndarray:
        """Get all values in a column."""
        return self.grid[:, col]

    def box_origin(self, row: int, col: int) -> Tuple[int, int]:
        """Top-left cell of the block containing (row, col)."""
        return row - row % self.box_size, col - col % self.box_size

    def get_box(self, row: int, col: int) -> np.ndarray:
        """Get all values in the block containing (row, col), row-major."""
        box_row, box_col = self.box_origin(row, col)
        return self.grid[box_row:box_row + self.box_size,
                         box_col:box_col + self.box_size].flatten()

    def count_empty(self) -> int:
        """Count the number of empty cells."""
        return int(np.sum(self.grid == 0))

    def count_filled(self) -> int:
        """Count the number of filled cells."""
        return int(np.sum(self.grid != 0))

    def is_complete(self) -> bool:
        """Check if all cells are filled."""
        return is_full(self)

    def is_consistent(self) -> bool:
        """
        Check that no row, column or block holds a duplicate digit.

        Empty cells are ignored, so a partially filled board can be
        consistent. The editor keeps this true only as long as every
        placement goes through the validator.
        """
        units = [self.get_row(i) for i in range(self.size)]
        units += [self.get_col(j) for j in range(self.size)]
        units += [
            self.get_box(box_row, box_col)
            for box_row in range(0, self.size, self.box_size)
            for box_col in range(0, self.size, self.box_size)
        ]
        for unit in units:
            non_zero = unit[unit != 0]
            if len(non_zero) != len(set(non_zero.tolist())):
                return False
        return True

    def to_string(self) -> str:
        """
        Convert board to a compact string, one character per cell.
        Uses 0 for empty cells, 1-9 as digits, A.. for values above 9.
        """
        chars = []
        for val in self.grid.flatten():
            if val <= 9:
                chars.append(str(val))
            else:
                chars.append(chr(ord('A') + int(val) - 10))
        return ''.join(chars)

    @classmethod
    def from_string(cls, s: str, size: int = 9) -> SudokuBoard:
        """
        Create a board from a string representation.

        Args:
            s: String of length size*size; whitespace is ignored.
               0 or . for empty, 1-9 for values, A.. for 10 and up.
            size: Board side length.
        """
        s = ''.join(s.split())
        if len(s) != size * size:
            raise ValueError(f"String length must be {size*size}, got {len(s)}")

        grid = np.zeros((size, size), dtype=np.int32)
        for idx, c in enumerate(s):
            if c in '0.':
                val = 0
            elif c.isdigit():
                val = int(c)
            elif c.isalpha():
                val = ord(c.upper()) - ord('A') + 10
            else:
                raise ValueError(f"Invalid character {c!r} at position {idx}")
            if val > size:
                raise ValueError(f"Value {val} at position {idx} exceeds board size {size}")
            grid[idx // size, idx % size] = val

        return cls(size, grid)

    @classmethod
    def from_2d_list(cls, data: List[List[int]]) -> SudokuBoard:
        """Create a board from a 2D list."""
        arr = np.array(data, dtype=np.int32)
        return cls(arr.shape[0], arr)

    def __str__(self) -> str:
        from ..io.display import render_board
        return render_board(self)

    def __repr__(self) -> str:
        return f"SudokuBoard(size={self.size}, filled={self.count_filled()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SudokuBoard):
            return False
        return self.size == other.size and np.array_equal(self.grid, other.grid)

    def __hash__(self) -> int:
        return hash(self.to_string())
