"""Text rendering of a board for the terminal."""

from __future__ import annotations
from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from ..core.board import SudokuBoard


def render_board(board: SudokuBoard, empty_glyph: str = ".") -> str:
    """
    Render a board as a bordered table with 1-based row and column labels.

    Blocks are separated by ``+---+`` borders between row bands and ``|``
    between column bands. Example for a 4x4 board::

              1  2   3  4
            +------+------+
          1 | 1  . | .  . |
          2 | .  . | 3  . |
            +------+------+
          ...
    """
    size, box = board.size, board.box_size
    width = len(str(size))

    def band(cells: List[str]) -> List[str]:
        segments = []
        for start in range(0, size, box):
            segments.append(''.join(f" {c:>{width}} " for c in cells[start:start + box]))
        return segments

    border = "    +" + "+".join("-" * (box * (width + 2)) for _ in range(box)) + "+"
    lines = ["     " + " ".join(band([str(j + 1) for j in range(size)])), border]

    for i in range(size):
        if i % box == 0 and i != 0:
            lines.append(border)
        cells = [empty_glyph if v == 0 else str(int(v)) for v in board.get_row(i)]
        lines.append(f"{i + 1:>3} |" + "|".join(band(cells)) + "|")

    lines.append(border)
    return '\n'.join(line.rstrip() for line in lines)
