"""Settings for an editing session."""

from __future__ import annotations
from dataclasses import dataclass

import numpy as np


LOAD_ERROR_POLICIES = ("abort", "empty")


@dataclass
class EditorConfig:
    """
    Configuration shared by the loader, display and session.

    Attributes:
        box_size: Block side length B; the grid side is B * B.
        cell_dtype: numpy dtype of one stored cell in grid files.
            The default is a native-endian 4-byte C int.
        empty_glyph: Character shown for empty cells.
        on_load_error: "abort" to stop when the grid file cannot be read,
            "empty" to carry on with an empty grid.
    """
    box_size: int = 3
    cell_dtype: str = "=i4"
    empty_glyph: str = "."
    on_load_error: str = "abort"

    def __post_init__(self):
        if self.box_size < 1:
            raise ValueError(f"Box size must be at least 1, got {self.box_size}")
        if np.dtype(self.cell_dtype).kind not in "iu":
            raise ValueError(f"Cell dtype must be an integer type, got {self.cell_dtype}")
        if len(self.empty_glyph) != 1:
            raise ValueError(f"Empty glyph must be one character, got {self.empty_glyph!r}")
        if self.on_load_error not in LOAD_ERROR_POLICIES:
            raise ValueError(
                f"on_load_error must be one of {LOAD_ERROR_POLICIES}, got {self.on_load_error!r}"
            )

    @property
    def size(self) -> int:
        return self.box_size * self.box_size
