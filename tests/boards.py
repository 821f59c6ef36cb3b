"""
Shared test boards.

Input tokens list the cells already removed, encoded as col*10+row.

ANCHOR: every outer cell gone except (1,2), interior (2,3) gone. The
lone outer cell hangs on interior (2,2) alone.

LADDER: outer cells kept are row 7, (6,1), (1,2), (1,4) and (1,6);
interior (2,2), (2,4) and (2,5) gone. Eleven outer cells are reachable,
one more than the removal budget, so the empty combination is over
budget. Removing (2,3), (6,2) or (6,6) each drops two outer cells from
reach and scores 21.
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from hexcollapse.solver import COLS, ROWS, is_outer


def code(row: int, col: int) -> int:
    """Input token for a location."""
    return col * 10 + row


OUTER_LOCATIONS = [
    (r, c)
    for r in range(1, ROWS + 1)
    for c in range(1, COLS + 1)
    if is_outer(r, c)
]

ANCHOR_KEPT_OUTER = {(1, 2)}
ANCHOR_CODES = [
    code(r, c) for r, c in OUTER_LOCATIONS if (r, c) not in ANCHOR_KEPT_OUTER
] + [code(2, 3)]

LADDER_KEPT_OUTER = {(7, c) for c in range(1, COLS + 1)} | {(6, 1), (1, 2), (1, 4), (1, 6)}
LADDER_CODES = [
    code(r, c) for r, c in OUTER_LOCATIONS if (r, c) not in LADDER_KEPT_OUTER
] + [code(2, 2), code(2, 4), code(2, 5)]
