"""
Board Module - Live/dead bitmap for the hex board.
"""

import logging
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Tuple

import numpy as np

from .topology import COLS, ROWS, Cell, is_outer, is_valid_location

logger = logging.getLogger(__name__)


class InvalidCellError(ValueError):
    """Raised when board input decodes to a location outside the grid."""


def decode_cell_code(value: int) -> Tuple[int, int]:
    """
    Decode a two-digit input token into a location.

    Args:
        value: Token encoded as col * 10 + row

    Returns:
        (row, col) tuple (not validated)
    """
    return value % 10, value // 10


class Board:
    """
    Mutable board state.

    Cells only ever go from live to dead. The live outer-cell index is
    kept in lockstep with the bitmap by drop_cell(); nothing else writes
    to either.

    Attributes:
        cells: ROWS x COLS bool array, True = live
    """

    def __init__(self, cells: np.ndarray, live_outer_cells: Dict[Tuple[int, int], Cell]):
        """
        Initialize from an existing bitmap and outer index.

        Use Board.new() or Board.from_codes() rather than calling this
        directly.

        Args:
            cells: Bool array of shape (ROWS, COLS)
            live_outer_cells: Index of live outer cells keyed by (row, col)
        """
        self.cells = cells
        self._live_outer_cells = live_outer_cells

    @classmethod
    def new(cls) -> "Board":
        """
        Create a fully live board.

        Returns:
            Board with every cell live and the outer index populated
        """
        board = cls(np.ones((ROWS, COLS), dtype=bool), {})
        board._index_live_outer_cells()
        return board

    @classmethod
    def from_codes(cls, codes: Iterable[int]) -> "Board":
        """
        Create a board from raw input tokens.

        Each token names a cell that has already been removed.

        Args:
            codes: Tokens encoded as col * 10 + row

        Returns:
            Board with the listed cells dropped

        Raises:
            InvalidCellError: If any token decodes outside the grid
        """
        board = cls.new()
        dropped: List[Tuple[int, int]] = []

        for value in codes:
            row, col = decode_cell_code(value)
            if not is_valid_location(row, col):
                raise InvalidCellError(
                    f"Invalid cell code {value}: row={row}, col={col}"
                )
            dropped.append((row, col))
            board.drop_cell(row, col)

        logger.info(f"Will drop cells {dropped}")
        return board

    def _index_live_outer_cells(self) -> None:
        """Scan the grid once and index every live outer cell."""
        for row in range(1, ROWS + 1):
            for col in range(1, COLS + 1):
                if self.value_at(row, col) and is_outer(row, col):
                    self._live_outer_cells[(row, col)] = Cell(row, col)

    @property
    def live_outer_cells(self) -> Mapping[Tuple[int, int], Cell]:
        """Read-only view of the live outer-cell index."""
        return MappingProxyType(self._live_outer_cells)

    @property
    def live_outer_count(self) -> int:
        """Number of live outer cells."""
        return len(self._live_outer_cells)

    def drop_cell(self, row: int, col: int) -> None:
        """
        Remove a cell from the board.

        Dropping a dead cell is a no-op.

        Args:
            row: Row index (1-based)
            col: Column index (1-based)
        """
        self.cells[row - 1, col - 1] = False
        if is_outer(row, col):
            self._live_outer_cells.pop((row, col), None)

    def drop(self, cell: Cell) -> None:
        """Remove a cell from the board."""
        self.drop_cell(cell.row, cell.col)

    def copy(self) -> "Board":
        """Independent copy of this board."""
        return Board(self.cells.copy(), dict(self._live_outer_cells))

    def imagine(self, removing_cells: Iterable[Cell]) -> "Board":
        """
        Build a hypothetical board with extra cells removed.

        This board is left unchanged.

        Args:
            removing_cells: Cells to drop on the copy

        Returns:
            New Board with the cells dropped
        """
        new_board = self.copy()
        for cell in removing_cells:
            new_board.drop(cell)
        return new_board

    def value_at(self, row: int, col: int) -> bool:
        """Check whether the cell at (row, col) is live."""
        return bool(self.cells[row - 1, col - 1])

    def is_live(self, cell: Cell) -> bool:
        """Check whether a cell is live."""
        return bool(self.cells[cell.row - 1, cell.col - 1])

    def live_count(self) -> int:
        """Number of live cells on the board."""
        return int(np.count_nonzero(self.cells))

    def diff(self, other: "Board") -> List[Cell]:
        """
        Find cells whose state differs between two boards.

        Args:
            other: Board to compare against

        Returns:
            Differing cells in row-major order
        """
        if not isinstance(other, Board):
            raise TypeError("Can only diff against another Board")

        rows, cols = np.nonzero(self.cells != other.cells)
        return [Cell(int(r) + 1, int(c) + 1) for r, c in zip(rows, cols)]

    def to_rows(self) -> List[List[int]]:
        """
        Convert to a 2D list of 1 (live) and 0 (removed).

        Returns:
            ROWS lists of COLS ints
        """
        return self.cells.astype(np.uint8).tolist()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return False
        return bool(np.array_equal(self.cells, other.cells))

    def __repr__(self) -> str:
        return (
            f"Board(live={self.live_count()}, "
            f"live_outer={self.live_outer_count})"
        )
