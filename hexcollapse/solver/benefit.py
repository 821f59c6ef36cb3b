"""
Benefit Module - Score a candidate removal set.
"""

from dataclasses import dataclass
from typing import Sequence, Tuple

from .board import Board
from .collapse import remove_redundant_blocks
from .reachability import get_reachable_cells
from .topology import MAX_BLOCKS_TO_REMOVE, Cell

# Score for candidates whose total removal exceeds the budget
INFEASIBLE = -1


@dataclass(frozen=True)
class Benefit:
    """
    Outcome of evaluating one candidate removal set.

    Attributes:
        score: Reachable interior cell count, or INFEASIBLE
        removing_cells: Reachable outer cells followed by the candidate
            cells; everything that must be cleared by hand
        collapsed_cells: Outer cells the cascade removed on its own
    """
    score: int
    removing_cells: Tuple[Cell, ...] = ()
    collapsed_cells: Tuple[Cell, ...] = ()

    @property
    def is_feasible(self) -> bool:
        """False if the candidate blew the removal budget."""
        return self.score != INFEASIBLE

    @property
    def effective_cells(self) -> Tuple[Cell, ...]:
        """Every cell gone once this candidate is played out."""
        return self.removing_cells + self.collapsed_cells


def calc_benefit(board: Board, removing_cells: Sequence[Cell]) -> Benefit:
    """
    Evaluate a candidate removal set on a hypothetical copy of the board.

    Drops the candidates, collapses the ring, then counts what the pivot
    can still reach. Reachable outer cells score nothing and count
    against the removal budget.

    Args:
        board: Base board (not modified)
        removing_cells: Interior cells to remove

    Returns:
        Benefit with the score and the cells involved
    """
    imaginary_board = board.imagine(removing_cells)
    batches = remove_redundant_blocks(imaginary_board)

    reachable_cells = get_reachable_cells(imaginary_board)
    border_cells = tuple(cell for cell in reachable_cells if cell.is_outer)

    if len(border_cells) + len(removing_cells) > MAX_BLOCKS_TO_REMOVE:
        return Benefit(INFEASIBLE)

    return Benefit(
        score=len(reachable_cells) - len(border_cells),
        removing_cells=border_cells + tuple(removing_cells),
        collapsed_cells=tuple(cell for batch in batches for cell in batch),
    )
