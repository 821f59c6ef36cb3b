"""
Collapse Module - Cascade removal of unsupported outer cells.

An outer cell stays up while it has two or more live neighbors, or a
single live neighbor that is an interior cell. Anything weaker falls,
and each fall can weaken the cells next to it, so passes repeat until
nothing changes.
"""

import logging
from typing import List, Tuple

from .board import Board
from .topology import Cell

logger = logging.getLogger(__name__)


def is_unsupported(board: Board, cell: Cell) -> bool:
    """
    Check whether an outer cell has lost structural support.

    Args:
        board: Board to inspect
        cell: Live outer cell

    Returns:
        True if the cell should collapse
    """
    live_neighbors = [n for n in cell.neighbors if board.is_live(n)]

    if len(live_neighbors) > 1:
        return False
    if not live_neighbors:
        return True
    return live_neighbors[0].is_outer


def remove_redundant_blocks(board: Board) -> List[Tuple[Cell, ...]]:
    """
    Collapse unsupported outer cells until a fixed point.

    Every pass judges all live outer cells against the same board, then
    drops the selected ones together. The board is modified in place.

    Args:
        board: Board to collapse

    Returns:
        One tuple of collapsed cells per pass that removed anything
    """
    batches: List[Tuple[Cell, ...]] = []

    while True:
        removing_cells = tuple(
            cell for cell in sorted(board.live_outer_cells.values())
            if is_unsupported(board, cell)
        )
        if not removing_cells:
            break

        for cell in removing_cells:
            board.drop(cell)
        batches.append(removing_cells)

        logger.debug(
            f"Collapse pass {len(batches)}: "
            f"{', '.join(str(c) for c in removing_cells)}"
        )

    return batches
