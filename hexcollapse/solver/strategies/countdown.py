"""
Countdown Strategy - Grow combination size until the benefit stops improving.

Scores every combination of size 0, 1, 2, ... and stops once the best
score per size has fallen below the running best for COUNTDOWN_START
sizes in a row. Sizes where every combination is over budget do not
count as a decline.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Dict, List

from ..base import SolverStrategy
from ..benefit import INFEASIBLE
from ..combination import Combination
from ..context import SearchContext
from ..factory import register_strategy
from ..solution import SearchResult

logger = logging.getLogger(__name__)

# Sizes of declining benefit tolerated before giving up
COUNTDOWN_START = 2


@dataclass
class CountdownState:
    """
    Running best across sizes plus the early-stop counter.

    Attributes:
        best_benefit: Best per-size score recorded so far
        countdown: Declining sizes left before the search stops
        combinations: Every combination reaching best_benefit
    """
    best_benefit: int = 0
    countdown: int = COUNTDOWN_START
    combinations: List[Combination] = field(default_factory=list)

    @property
    def is_exhausted(self) -> bool:
        """True once the search should stop."""
        return self.countdown <= 0

    def record(self, size_benefit: int, size_combinations: List[Combination]) -> None:
        """
        Fold one size's best score into the running state.

        Args:
            size_benefit: Best score among combinations of the size
            size_combinations: Combinations reaching size_benefit
        """
        if size_benefit > self.best_benefit:
            logger.info(f"[Countdown] Update new max benefit = {size_benefit}")
            self.best_benefit = size_benefit
            self.combinations = list(size_combinations)
            self.countdown = COUNTDOWN_START
        elif size_benefit == self.best_benefit:
            logger.info("[Countdown] Benefit similar to the last loop")
            self.combinations.extend(size_combinations)
            self.countdown = COUNTDOWN_START
        elif size_benefit != INFEASIBLE:
            logger.info(f"[Countdown] Benefit is decreasing, counting down ({self.countdown})")
            self.countdown -= 1


@register_strategy
class CountdownStrategy(SolverStrategy):
    """
    Size-ascending enumeration with a diminishing-returns cutoff.

    Algorithm:
        1. Collect eligible cells (live, interior, not the pivot)
        2. For size = 0..max_size, score every combination of that size
        3. Feed the size's best score into CountdownState
        4. Stop when the countdown hits zero

    This bets that benefit is roughly unimodal in combination size;
    it is not guaranteed to find the global optimum.
    """
    name = "countdown"
    description = "Countdown (reference) - Stop after benefit declines for two sizes"

    def solve(self, context: SearchContext) -> SearchResult:
        """
        Search removal combinations of increasing size.

        Args:
            context: Search context with board and cancellation

        Returns:
            SearchResult with best benefit and all combinations reaching it
        """
        start_time = time.perf_counter()

        available = self.get_available_blocks(context.board)
        logger.info(
            f"[Countdown] Available blocks: {', '.join(str(c) for c in available)}"
        )
        logger.info(
            f"[Countdown] Found total {self.count_combinations(available)} combinations"
        )

        state = CountdownState()
        size_benefits: Dict[int, int] = {}
        combinations_evaluated = 0
        pruned_sizes = 0
        was_cancelled = False

        for size in range(self.max_size + 1):
            if state.is_exhausted:
                pruned_sizes = self.max_size - size + 1
                break
            if size > len(available):
                logger.debug(f"[Countdown] No combinations of size {size}, stopping")
                break

            logger.info(f"[Countdown] Calculating benefit for combination size = {size}")
            outcome = self.evaluate_size(context, available, size)
            combinations_evaluated += outcome.evaluated

            if outcome.best_benefit is not None:
                size_benefits[size] = outcome.best_benefit
                state.record(outcome.best_benefit, outcome.combinations)

            if outcome.was_cancelled:
                logger.warning(f"[Countdown] Cancelled during size {size}")
                was_cancelled = True
                break

            context.report_progress(
                min(0.99, (size + 1) / (self.max_size + 1)),
                f"size {size}: best {outcome.best_benefit}, overall {state.best_benefit}"
            )

        logger.info(
            f"[Countdown] Search complete: best benefit {state.best_benefit}, "
            f"{len(state.combinations)} combinations, "
            f"{combinations_evaluated} evaluated"
        )

        return self._build_result(
            state.best_benefit, state.combinations, size_benefits,
            combinations_evaluated, pruned_sizes, start_time, was_cancelled
        )
