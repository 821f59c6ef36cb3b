"""
Topology Module - Hex-grid geometry for the fixed 7x7 board.

Cells use 1-indexed (row, col) offset coordinates. Neighbor offsets
depend on column parity: even columns are shifted half a cell down
relative to odd columns.

All lookups are pure and the board size is constant, so they are
memoized with lru_cache; the exhaustive search calls them millions
of times.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Tuple

ROWS = 7
COLS = 7

# Fixed start position reachability is measured from
PIVOT_ROW = 4
PIVOT_COL = 4

# Removal budget for one accepted solution
MAX_BLOCKS_TO_REMOVE = 10


@dataclass(frozen=True, order=True)
class Cell:
    """
    Immutable board position.

    Attributes:
        row: Row index (1-based)
        col: Column index (1-based)
    """
    row: int
    col: int

    @property
    def is_outer(self) -> bool:
        """True if the cell sits on the border ring."""
        return is_outer(self.row, self.col)

    @property
    def neighbors(self) -> Tuple["Cell", ...]:
        """In-bounds hex neighbors of this cell."""
        return get_neighbors(self.row, self.col)

    def __str__(self) -> str:
        return f"({self.col}-{self.row})"


PIVOT = Cell(PIVOT_ROW, PIVOT_COL)


@lru_cache(maxsize=81)
def is_valid_location(row: int, col: int) -> bool:
    """Check that (row, col) lies inside the board."""
    return 0 < row <= ROWS and 0 < col <= COLS


@lru_cache(maxsize=49)
def is_outer(row: int, col: int) -> bool:
    """Check whether (row, col) is on the border ring."""
    return row % 6 == 1 or col % 6 == 1


@lru_cache(maxsize=49)
def get_neighbors(row: int, col: int) -> Tuple[Cell, ...]:
    """
    Get the hex neighbors of a location.

    Args:
        row: Row index (1-based)
        col: Column index (1-based)

    Returns:
        Tuple of neighbor cells in a stable order, out-of-bounds dropped
    """
    if col % 2 == 0:
        locations = (
            (row - 1, col),
            (row, col - 1),
            (row, col + 1),
            (row + 1, col - 1),
            (row + 1, col + 1),
            (row + 1, col),
        )
    else:
        locations = (
            (row - 1, col),
            (row - 1, col - 1),
            (row - 1, col + 1),
            (row, col - 1),
            (row, col + 1),
            (row + 1, col),
        )

    return tuple(
        Cell(r, c) for r, c in locations if is_valid_location(r, c)
    )


def all_cells() -> Tuple[Cell, ...]:
    """All board cells in row-major order."""
    return tuple(
        Cell(row, col)
        for row in range(1, ROWS + 1)
        for col in range(1, COLS + 1)
    )
