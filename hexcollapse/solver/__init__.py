"""
Solver Package - Collapse analysis and removal search for the hex board.

The core pipeline scores a candidate set of interior cells by dropping
them on a copy of the board, collapsing unsupported outer cells, and
counting the interior cells still reachable from the pivot. Search
strategies enumerate candidate sets and keep the best-scoring ones.

Public API:
    - Cell: Board position with hex neighbors
    - Board: Live/dead bitmap with the live outer-cell index
    - InvalidCellError: Raised for out-of-grid input
    - remove_redundant_blocks(): Cascade collapse to a fixed point
    - get_reachable_cells(): BFS from the pivot
    - calc_benefit(): Score one candidate set
    - Benefit, Combination: Evaluation results
    - SearchResult, SearchMetrics: Strategy output
    - SearchContext: Shared context for strategies
    - SolverStrategy: Abstract base for strategies
    - create_strategy(): Factory function

Usage:
    from hexcollapse.solver import (
        Board, SearchContext, create_strategy, remove_redundant_blocks
    )

    board = Board.from_codes([11, 12, 21])
    remove_redundant_blocks(board)

    strategy = create_strategy("countdown")
    result = strategy.solve(SearchContext(board=board))

    for combo in result.combinations:
        print(", ".join(str(c) for c in combo.removing_cells))
"""

# Core data structures
from .topology import (
    ROWS,
    COLS,
    PIVOT,
    MAX_BLOCKS_TO_REMOVE,
    Cell,
    is_valid_location,
    is_outer,
    get_neighbors,
)
from .board import Board, InvalidCellError, decode_cell_code
from .collapse import remove_redundant_blocks
from .reachability import get_reachable_cells
from .benefit import INFEASIBLE, Benefit, calc_benefit
from .combination import Combination
from .solution import SearchResult, SearchMetrics
from .context import SearchContext

# Strategy framework
from .base import SolverStrategy
from .factory import (
    create_strategy,
    get_strategy_names,
    get_strategy_info,
    get_default_strategy_name,
    register_strategy,
)

# Import strategies to register them
from . import strategies

__all__ = [
    # Topology
    "ROWS",
    "COLS",
    "PIVOT",
    "MAX_BLOCKS_TO_REMOVE",
    "Cell",
    "is_valid_location",
    "is_outer",
    "get_neighbors",
    # Board and analysis
    "Board",
    "InvalidCellError",
    "decode_cell_code",
    "remove_redundant_blocks",
    "get_reachable_cells",
    "INFEASIBLE",
    "Benefit",
    "calc_benefit",
    # Results
    "Combination",
    "SearchResult",
    "SearchMetrics",
    "SearchContext",
    # Strategy framework
    "SolverStrategy",
    "create_strategy",
    "get_strategy_names",
    "get_strategy_info",
    "get_default_strategy_name",
    "register_strategy",
]
