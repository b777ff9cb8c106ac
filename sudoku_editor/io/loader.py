"""Reading and writing grids stored as flat binary integer arrays."""

from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from typing import Optional, Union

import numpy as np

from ..core.board import SudokuBoard

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]

# Native-endian 4-byte C int per cell.
DEFAULT_CELL_DTYPE = "=i4"


class GridLoadError(Exception):
    """Raised when a grid file is required but could not be loaded."""


@dataclass
class LoadResult:
    """
    Outcome of reading a grid file.

    The board is always usable: on failure it is empty, or holds the cells
    read before a short file ran out. Callers check ``ok`` and choose whether
    to carry on with it.
    """
    board: SudokuBoard
    path: str
    cells_read: int = 0
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> SudokuBoard:
        """Return the board, or raise GridLoadError if loading failed."""
        if self.error is not None:
            raise GridLoadError(self.error)
        return self.board


def load_grid(path: PathLike, size: int = 9, dtype: str = DEFAULT_CELL_DTYPE) -> LoadResult:
    """
    Load a size x size grid of row-major integers from a binary file.

    Args:
        path: File to read.
        size: Grid side length.
        dtype: numpy dtype of one stored cell.

    Returns:
        A LoadResult. I/O failures are reported in ``error``, never raised.
    """
    path = os.fspath(path)
    board = SudokuBoard(size)
    total = size * size

    try:
        with open(path, "rb") as f:
            data = np.fromfile(f, dtype=np.dtype(dtype), count=total)
    except OSError as e:
        logger.debug("Could not open %s: %s", path, e)
        return LoadResult(board, path, error=f"ERROR on file {path}: {e.strerror or e}")

    cells_read = len(data)
    bad = (data < 0) | (data > size)
    if bad.any():
        idx = int(np.argmax(bad))
        return LoadResult(
            board, path, cells_read,
            error=(f"ERROR on file {path}: cell {idx} holds {int(data[idx])}, "
                   f"expected 0-{size}"),
        )

    board.grid.flat[:cells_read] = data
    logger.debug("Read %d/%d cells from %s", cells_read, total, path)

    if cells_read < total:
        return LoadResult(
            board, path, cells_read,
            error=f"ERROR on file {path}: expected {total} cells, found {cells_read}",
        )
    return LoadResult(board, path, cells_read)


def save_grid(board: SudokuBoard, path: PathLike, dtype: str = DEFAULT_CELL_DTYPE) -> None:
    """
    Write a board in the layout read by load_grid.

    Args:
        board: Board to write.
        path: Destination file; parent directories are created.
        dtype: numpy dtype of one stored cell.
    """
    path = os.fspath(path)
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "wb") as f:
        board.grid.astype(np.dtype(dtype)).tofile(f)
    logger.debug("Wrote %dx%d grid to %s", board.size, board.size, path)
