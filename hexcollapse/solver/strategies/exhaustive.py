"""
Exhaustive Strategy - Score every combination size without early stopping.

Slow on open boards; meant for cross-checking the countdown cutoff.
"""

import logging
import time
from typing import Dict, List

from ..base import SolverStrategy
from ..combination import Combination
from ..context import SearchContext
from ..factory import register_strategy
from ..solution import SearchResult

logger = logging.getLogger(__name__)


@register_strategy
class ExhaustiveStrategy(SolverStrategy):
    """Evaluates sizes 0..max_size and keeps the overall best."""
    name = "exhaustive"
    description = "Exhaustive (slow) - Score every combination up to max size"

    def solve(self, context: SearchContext) -> SearchResult:
        start_time = time.perf_counter()

        available = self.get_available_blocks(context.board)
        last_size = min(self.max_size, len(available))
        logger.info(
            f"[Exhaustive] {len(available)} available blocks, "
            f"{self.count_combinations(available)} combinations"
        )

        best_benefit = 0
        best_combinations: List[Combination] = []
        size_benefits: Dict[int, int] = {}
        combinations_evaluated = 0
        was_cancelled = False

        for size in range(last_size + 1):
            outcome = self.evaluate_size(context, available, size)
            combinations_evaluated += outcome.evaluated

            if outcome.best_benefit is not None:
                size_benefits[size] = outcome.best_benefit
                if outcome.best_benefit > best_benefit:
                    best_benefit = outcome.best_benefit
                    best_combinations = list(outcome.combinations)
                elif outcome.best_benefit == best_benefit:
                    best_combinations.extend(outcome.combinations)

            logger.debug(f"[Exhaustive] Size {size}: best {outcome.best_benefit}")

            if outcome.was_cancelled:
                logger.warning(f"[Exhaustive] Cancelled during size {size}")
                was_cancelled = True
                break

            context.report_progress(
                min(0.99, (size + 1) / (last_size + 1)),
                f"size {size}: best {outcome.best_benefit}"
            )

        return self._build_result(
            best_benefit, best_combinations, size_benefits,
            combinations_evaluated, 0, start_time, was_cancelled
        )
