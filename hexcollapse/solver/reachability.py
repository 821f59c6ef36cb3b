"""
Reachability Module - Cells connected to the pivot after collapse.
"""

import logging
from collections import deque
from typing import Deque, List, Set

from .board import Board
from .topology import PIVOT, Cell

logger = logging.getLogger(__name__)


def get_reachable_cells(board: Board, pivot: Cell = PIVOT) -> List[Cell]:
    """
    Breadth-first search over live cells starting at the pivot.

    Two outer cells are never connected directly; the ring is only
    entered and left through interior cells.

    Args:
        board: Board to search
        pivot: Start cell

    Returns:
        Reachable cells in visit order, empty if the pivot is dead
    """
    if not board.is_live(pivot):
        logger.debug(f"Pivot {pivot} is not live, nothing reachable")
        return []

    queue: Deque[Cell] = deque([pivot])
    queued: Set[Cell] = {pivot}
    visited: List[Cell] = []

    while queue:
        cell = queue.popleft()
        visited.append(cell)

        for neighbor in cell.neighbors:
            if neighbor in queued or not board.is_live(neighbor):
                continue
            if cell.is_outer and neighbor.is_outer:
                continue
            queue.append(neighbor)
            queued.add(neighbor)

    return visited
