"""
Search Context Module - Shared context for strategy execution.
"""

import threading
import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from .board import Board


@dataclass
class SearchContext:
    """
    Shared context passed to strategies containing the board,
    cancellation, and progress reporting.

    Attributes:
        board: Board to analyze (strategies never modify it)
        cancel_flag: Threading event for cancellation
        timeout_sec: Maximum computation time in seconds, None for no limit
        start_time: When computation started
        progress_callback: Optional callback for progress updates
    """
    board: Board
    cancel_flag: threading.Event = field(default_factory=threading.Event)
    timeout_sec: Optional[float] = None
    start_time: float = field(default_factory=time.time)
    progress_callback: Optional[Callable[[float, str], None]] = None

    def is_cancelled(self) -> bool:
        """
        Check if cancellation requested or timeout exceeded.

        Returns:
            True if strategy should stop execution
        """
        if self.cancel_flag.is_set():
            return True
        if self.timeout_sec is not None and self.elapsed_time() > self.timeout_sec:
            return True
        return False

    def cancel(self) -> None:
        """Request the running strategy to stop."""
        self.cancel_flag.set()

    def report_progress(self, percent: float, message: str = "") -> None:
        """
        Report progress to the caller.

        Args:
            percent: Progress from 0.0 to 1.0
            message: Optional status message
        """
        if self.progress_callback:
            self.progress_callback(percent, message)

    def elapsed_time(self) -> float:
        """Seconds elapsed since computation started."""
        return time.time() - self.start_time

    def remaining_time(self) -> Optional[float]:
        """
        Get seconds remaining before timeout.

        Returns:
            Remaining seconds (may be negative if exceeded), None without a timeout
        """
        if self.timeout_sec is None:
            return None
        return self.timeout_sec - self.elapsed_time()
