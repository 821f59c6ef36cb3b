"""
Report Module - Text rendering of boards and search results.
"""

from typing import Iterable, List

from .solver import Board, Cell, SearchResult


def format_cells(cells: Iterable[Cell]) -> str:
    """Render cells as '(col-row), (col-row), ...'."""
    return ", ".join(str(cell) for cell in cells)


def format_board(board: Board) -> str:
    """
    Render the board as rows of 1 (live) and 0 (removed).

    Args:
        board: Board to render

    Returns:
        One line per row, values separated by spaces
    """
    return "\n".join(
        " ".join(str(value) for value in row) for row in board.to_rows()
    )


def format_result(result: SearchResult) -> str:
    """
    Render a search result for the console.

    Each combination is shown as the cells that must be cleared.

    Args:
        result: Result from a strategy

    Returns:
        Multi-line report
    """
    lines: List[str] = [f"The maximum benefit is {result.best_benefit}"]
    if result.was_cancelled:
        lines.append("Search stopped early; result may not be optimal")
    lines.append("All combinations:")
    for combo in result.combinations:
        lines.append(f"Cells: {format_cells(combo.removing_cells)}")
    return "\n".join(lines)


def format_metrics(result: SearchResult) -> str:
    """One-line summary of search metrics."""
    m = result.metrics
    return (
        f"[{m.strategy_name}] {m.combinations_evaluated} combinations over "
        f"{m.sizes_evaluated} sizes ({m.pruned_sizes} pruned) "
        f"in {m.computation_time_ms:.1f}ms"
    )
