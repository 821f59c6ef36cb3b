"""
Combination Module - One evaluated candidate removal set.
"""

from dataclasses import dataclass
from typing import Sequence, Tuple

from .benefit import Benefit
from .topology import Cell


@dataclass(frozen=True)
class Combination:
    """
    A candidate removal set together with its evaluation.

    Attributes:
        cells: Interior cells chosen for removal
        benefit: Result of evaluating those cells
    """
    cells: Tuple[Cell, ...]
    benefit: Benefit

    @classmethod
    def create(cls, cells: Sequence[Cell], benefit: Benefit) -> "Combination":
        """
        Create a Combination with the cells converted to a tuple.

        Args:
            cells: Candidate cells
            benefit: Evaluation of the candidate

        Returns:
            Combination instance
        """
        return cls(cells=tuple(cells), benefit=benefit)

    @property
    def size(self) -> int:
        """Number of candidate cells."""
        return len(self.cells)

    @property
    def score(self) -> int:
        return self.benefit.score

    @property
    def removing_cells(self) -> Tuple[Cell, ...]:
        """Cells that have to be cleared to realize this outcome."""
        return self.benefit.removing_cells

    @property
    def collapsed_cells(self) -> Tuple[Cell, ...]:
        return self.benefit.collapsed_cells
