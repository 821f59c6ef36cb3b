"""
Base Strategy Module - Abstract base class for search strategies.
"""

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from itertools import combinations
from math import comb
from typing import Dict, List, Optional, Sequence

from .benefit import INFEASIBLE, calc_benefit
from .board import Board
from .combination import Combination
from .context import SearchContext
from .solution import SearchMetrics, SearchResult
from .topology import MAX_BLOCKS_TO_REMOVE, PIVOT, Cell, all_cells


@dataclass
class SizeEvaluation:
    """
    Outcome of scoring every combination of one size.

    Attributes:
        size: Number of cells per combination
        best_benefit: Best score at this size, None if nothing was scored
        combinations: Combinations reaching best_benefit (empty when the
            best is INFEASIBLE)
        evaluated: Number of combinations scored
        was_cancelled: True if the size was cut short
    """
    size: int
    best_benefit: Optional[int] = None
    combinations: List[Combination] = field(default_factory=list)
    evaluated: int = 0
    was_cancelled: bool = False


class SolverStrategy(ABC):
    """
    Abstract base class for all search strategies.

    Subclasses must implement the solve() method and define
    name and description class attributes.

    Attributes:
        name: Short identifier for the strategy
        description: Human-readable description for --list-strategies
    """
    name: str = "base"
    description: str = "Base strategy"

    def __init__(self, max_size: int = MAX_BLOCKS_TO_REMOVE):
        """
        Initialize strategy.

        Args:
            max_size: Largest combination size to consider
        """
        self.max_size = max_size

    @abstractmethod
    def solve(self, context: SearchContext) -> SearchResult:
        """
        Find the best-scoring removal combinations for the board.

        Must periodically check context.is_cancelled() and return
        the best result so far if True.

        Args:
            context: Search context with board, cancellation, progress

        Returns:
            SearchResult with best score, combinations and metrics
        """
        pass

    def get_available_blocks(self, board: Board) -> List[Cell]:
        """
        Find the cells that may be chosen for removal.

        Only live interior cells qualify, and never the pivot.

        Args:
            board: Current board

        Returns:
            Eligible cells in row-major order
        """
        return [
            cell for cell in all_cells()
            if board.is_live(cell) and cell != PIVOT and not cell.is_outer
        ]

    def count_combinations(self, available: Sequence[Cell]) -> int:
        """Total number of candidate sets of size 0..max_size."""
        return sum(comb(len(available), size) for size in range(self.max_size + 1))

    def evaluate_size(
        self,
        context: SearchContext,
        available: Sequence[Cell],
        size: int
    ) -> SizeEvaluation:
        """
        Score every combination of one size and keep the best ones.

        Args:
            context: Search context (board and cancellation)
            available: Eligible cells
            size: Number of cells per combination

        Returns:
            SizeEvaluation for this size
        """
        outcome = SizeEvaluation(size=size)

        for cells in combinations(available, size):
            if self._check_cancelled(context):
                outcome.was_cancelled = True
                break

            benefit = calc_benefit(context.board, cells)
            outcome.evaluated += 1

            if outcome.best_benefit is None or benefit.score > outcome.best_benefit:
                outcome.best_benefit = benefit.score
                outcome.combinations = []
            elif benefit.score < outcome.best_benefit:
                continue

            if benefit.score != INFEASIBLE:
                outcome.combinations.append(Combination.create(cells, benefit))

        return outcome

    def _check_cancelled(self, context: SearchContext) -> bool:
        """
        Convenience method to check cancellation.

        Args:
            context: Search context

        Returns:
            True if strategy should stop
        """
        return context.is_cancelled()

    def _build_result(
        self,
        best_benefit: int,
        best_combinations: List[Combination],
        size_benefits: Dict[int, int],
        combinations_evaluated: int,
        pruned_sizes: int,
        start_time: float,
        was_cancelled: bool
    ) -> SearchResult:
        """Build SearchResult object from computation results."""
        elapsed_ms = (time.perf_counter() - start_time) * 1000

        return SearchResult(
            best_benefit=best_benefit,
            combinations=best_combinations,
            size_benefits=size_benefits,
            was_cancelled=was_cancelled,
            metrics=SearchMetrics(
                computation_time_ms=elapsed_ms,
                combinations_evaluated=combinations_evaluated,
                sizes_evaluated=len(size_benefits),
                pruned_sizes=pruned_sizes,
                strategy_name=self.name
            )
        )
