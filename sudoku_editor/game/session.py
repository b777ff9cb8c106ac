"""Interactive editing loop over a single board."""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..config import EditorConfig
from ..core.board import SudokuBoard
from ..core.validator import PlacementResult, check_placement, is_full
from ..io.display import render_board
from ..io.prompt import InputFn, OutputFn, prompt_int

logger = logging.getLogger(__name__)


@dataclass
class SessionStats:
    """Counters collected while a session runs."""
    moves_attempted: int = 0
    placements: int = 0
    occupied_rejections: int = 0
    conflict_rejections: int = 0
    completed: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Convert stats to dictionary."""
        return {
            "moves_attempted": self.moves_attempted,
            "placements": self.placements,
            "occupied_rejections": self.occupied_rejections,
            "conflict_rejections": self.conflict_rejections,
            "completed": self.completed,
        }


class EditorSession:
    """
    Fill a board cell by cell until no empty cell remains.

    Each turn shows the board, asks for a 1-based row and column, refuses
    occupied cells, then asks for a value and writes it only if the
    placement is legal. The board is modified in place.
    """

    def __init__(
        self,
        board: SudokuBoard,
        config: Optional[EditorConfig] = None,
        input_fn: InputFn = input,
        output: OutputFn = print,
    ):
        self.board = board
        self.config = config or EditorConfig(box_size=board.box_size)
        if self.config.size != board.size:
            raise ValueError(
                f"Config expects a {self.config.size}x{self.config.size} grid, "
                f"board is {board.size}x{board.size}"
            )
        self.input_fn = input_fn
        self.output = output
        self.stats = SessionStats()

    def play_turn(self) -> Optional[PlacementResult]:
        """
        Run one prompt/validate/commit cycle.

        Returns:
            The placement check result, or None if the chosen cell was
            already occupied.
        """
        size = self.board.size
        self.output(render_board(self.board, self.config.empty_glyph))
        self.output("Cell indices?")
        row = prompt_int("Row.", 1, size, self.input_fn, self.output) - 1
        col = prompt_int("Column.", 1, size, self.input_fn, self.output) - 1
        self.stats.moves_attempted += 1

        if not self.board.is_empty(row, col):
            self.output("IMPOSSIBLE, the cell is not free.")
            self.stats.occupied_rejections += 1
            return None

        value = prompt_int("Value to insert?", 1, size, self.input_fn, self.output)
        result = check_placement(self.board, row, col, value)
        if result.legal:
            self.board.set(row, col, value)
            self.stats.placements += 1
            logger.debug("Placed %d at (%d, %d)", value, row, col)
        else:
            self.output(result.message(value))
            self.stats.conflict_rejections += 1
            logger.debug("Refused %d at (%d, %d): %s", value, row, col, result.conflict.value)
        return result

    def run(self) -> SessionStats:
        """Play turns until the board is full and return the collected stats."""
        while not is_full(self.board):
            self.play_turn()

        self.stats.completed = True
        self.output(render_board(self.board, self.config.empty_glyph))
        self.output("Grid full, game over.")
        return self.stats
