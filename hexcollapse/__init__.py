"""
hexcollapse - Removal planner for the 7x7 hex collapse board.

Subpackages:
    - solver: topology, board state, collapse, reachability, scoring, search
Modules:
    - parsing: input token parsing
    - report: text output
    - settings: JSON config
"""

__version__ = "0.1.0"
