"""
Solution Module - Result of a search run.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from .combination import Combination
from .topology import Cell


@dataclass
class SearchMetrics:
    """
    Performance metrics for a search run.

    Attributes:
        computation_time_ms: Time taken in milliseconds
        combinations_evaluated: Number of candidate sets scored
        sizes_evaluated: Number of combination sizes visited
        pruned_sizes: Sizes skipped by early termination
        strategy_name: Name of strategy that produced the result
    """
    computation_time_ms: float = 0.0
    combinations_evaluated: int = 0
    sizes_evaluated: int = 0
    pruned_sizes: int = 0
    strategy_name: str = ""


@dataclass
class SearchResult:
    """
    Result of a strategy computation.

    Attributes:
        best_benefit: Highest score found
        combinations: Every evaluated combination that reached best_benefit,
            in evaluation order
        size_benefits: Best score seen for each evaluated size
        was_cancelled: True if stopped before completion
        metrics: Performance statistics
    """
    best_benefit: int = 0
    combinations: List[Combination] = field(default_factory=list)
    size_benefits: Dict[int, int] = field(default_factory=dict)
    was_cancelled: bool = False
    metrics: SearchMetrics = field(default_factory=SearchMetrics)

    @property
    def combination_count(self) -> int:
        """Number of best-scoring combinations."""
        return len(self.combinations)

    @property
    def has_combinations(self) -> bool:
        return len(self.combinations) > 0

    @property
    def removal_sets(self) -> List[Tuple[Cell, ...]]:
        """Cells to clear for each best-scoring combination."""
        return [combo.removing_cells for combo in self.combinations]
