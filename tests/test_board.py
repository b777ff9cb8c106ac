"""Unit tests for the Sudoku board."""

import pytest
import numpy as np
from sudoku_editor.core.board import SudokuBoard


SOLUTION = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)


class TestSudokuBoard:
    """Tests for SudokuBoard class."""

    def test_create_empty_board(self):
        """Test creating an empty 9x9 board."""
        board = SudokuBoard()
        assert board.size == 9
        assert board.box_size == 3
        assert board.count_empty() == 81
        assert board.count_filled() == 0

    def test_create_4x4_board(self):
        """Test creating a 4x4 board from its block size."""
        board = SudokuBoard.from_box_size(2)
        assert board.size == 4
        assert board.box_size == 2
        assert board.count_empty() == 16

    def test_rejects_non_square_size(self):
        """Side lengths that are not perfect squares are refused."""
        with pytest.raises(ValueError):
            SudokuBoard(size=8)
        with pytest.raises(ValueError):
            SudokuBoard(size=0)

    def test_rejects_wrong_grid_shape(self):
        with pytest.raises(ValueError):
            SudokuBoard(4, np.zeros((3, 3)))

    def test_set_and_get(self):
        """Test setting and getting values."""
        board = SudokuBoard()
        board.set(0, 0, 5)
        assert board.get(0, 0) == 5
        assert not board.is_empty(0, 0)

        board.clear(0, 0)
        assert board.is_empty(0, 0)

    def test_set_rejects_out_of_range_value(self):
        board = SudokuBoard()
        with pytest.raises(ValueError):
            board.set(0, 0, 10)
        with pytest.raises(ValueError):
            board.set(0, 0, -1)

    def test_in_bounds(self):
        board = SudokuBoard()
        assert board.in_bounds(0, 0)
        assert board.in_bounds(8, 8)
        assert not board.in_bounds(9, 0)
        assert not board.in_bounds(0, -1)

    def test_box_origin_and_box(self):
        """The block of a cell starts at (row - row % B, col - col % B)."""
        board = SudokuBoard.from_string(SOLUTION)
        assert board.box_origin(4, 7) == (3, 6)
        assert board.box_origin(2, 2) == (0, 0)
        assert list(board.get_box(4, 7)) == [4, 2, 3, 7, 9, 1, 8, 5, 6]

    def test_is_complete(self):
        board = SudokuBoard.from_string(SOLUTION)
        assert board.is_complete()
        board.clear(8, 8)
        assert not board.is_complete()

    def test_is_consistent(self):
        """Test duplicate detection over rows, columns and blocks."""
        board = SudokuBoard()
        assert board.is_consistent()  # Empty board is consistent

        board.set(0, 0, 5)
        board.set(0, 8, 5)  # Duplicate in row
        assert not board.is_consistent()

        board.clear(0, 8)
        board.set(1, 1, 5)  # Duplicate in block only
        assert not board.is_consistent()

        assert SudokuBoard.from_string(SOLUTION).is_consistent()

    def test_from_string(self):
        """Test creating board from string."""
        puzzle_str = "0" * 80 + "9"  # 80 zeros and a 9 at the end
        board = SudokuBoard.from_string(puzzle_str)
        assert board.get(8, 8) == 9

    def test_from_string_accepts_dots_and_whitespace(self):
        board = SudokuBoard.from_string("1 . . .\n. . 3 .\n. . . .\n. 4 . .", size=4)
        assert board.get(0, 0) == 1
        assert board.get(1, 2) == 3
        assert board.get(3, 1) == 4
        assert board.count_filled() == 3

    def test_from_string_rejects_bad_input(self):
        with pytest.raises(ValueError):
            SudokuBoard.from_string("123")
        with pytest.raises(ValueError):
            SudokuBoard.from_string("5" + "0" * 15, size=4)
        with pytest.raises(ValueError):
            SudokuBoard.from_string("?" + "0" * 80)

    def test_to_string(self):
        """Test converting board to string."""
        board = SudokuBoard()
        board.set(0, 0, 5)
        s = board.to_string()
        assert len(s) == 81
        assert s[0] == '5'
        assert SudokuBoard.from_string(SOLUTION).to_string() == SOLUTION

    def test_to_string_uses_letters_above_nine(self):
        board = SudokuBoard(16)
        board.set(0, 0, 10)
        board.set(0, 1, 16)
        assert board.to_string()[:3] == "AG0"

    def test_from_2d_list(self):
        board = SudokuBoard.from_2d_list([[1, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 2]])
        assert board.size == 4
        assert board.get(3, 3) == 2

    def test_copy(self):
        """Test board copy."""
        board = SudokuBoard()
        board.set(4, 4, 7)
        copy = board.copy()

        assert copy.get(4, 4) == 7
        assert copy == board

        # Modify copy, original should be unchanged
        copy.set(4, 4, 8)
        assert board.get(4, 4) == 7
        assert copy != board


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
