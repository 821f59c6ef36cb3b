"""
Hex Collapse Analyzer - Entry Point

Reads the cells already removed from the board, settles the board,
and searches for the removal combinations with the highest benefit.

Example:
    python main.py
    python main.py --cells "11 12 21 32"
    python main.py --strategy exhaustive --timeout 60
"""

import sys
import logging
import argparse
from pathlib import Path
from typing import Any, Dict, List, Optional

from hexcollapse.parsing import parse_cell_codes, read_cell_codes
from hexcollapse.report import format_board, format_metrics, format_result
from hexcollapse.settings import SETTINGS_FILE, load_settings, save_settings
from hexcollapse.solver import (
    Board,
    InvalidCellError,
    SearchContext,
    create_strategy,
    get_strategy_info,
    remove_redundant_blocks,
)

logger = logging.getLogger(__name__)


def configure_logging(debug: bool, log_file: Optional[str]) -> None:
    """
    Configure logging - output to console and, if set, a log file.

    Args:
        debug: Log at DEBUG instead of INFO
        log_file: Log file path, None or "" to skip the file handler
    """
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=handlers,
        force=True,
    )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Hex Collapse Analyzer - Find the best cells to remove"
    )
    parser.add_argument(
        "--cells", "-c",
        default=None,
        help="Removed cells as col*10+row tokens (default: prompt on stdin)"
    )
    parser.add_argument(
        "--strategy", "-s",
        default=None,
        help="Search strategy (default: from config, else countdown)"
    )
    parser.add_argument(
        "--timeout", "-t",
        type=float,
        default=None,
        help="Stop searching after this many seconds"
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Enable debug logging (overrides saved setting)"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=SETTINGS_FILE,
        help=f"Settings file (default: {SETTINGS_FILE})"
    )
    parser.add_argument(
        "--save-settings",
        action="store_true",
        help="Write the effective strategy/timeout/debug options to the settings file"
    )
    parser.add_argument(
        "--list-strategies",
        action="store_true",
        help="List available strategies and exit"
    )
    return parser.parse_args(argv)


def merge_settings(settings: Dict[str, Any], args: argparse.Namespace) -> Dict[str, Any]:
    """Apply command line overrides on top of loaded settings."""
    effective = dict(settings)
    if args.strategy:
        effective["strategy_name"] = args.strategy
    if args.timeout is not None:
        effective["timeout_sec"] = args.timeout
    if args.debug:
        effective["debug_enabled"] = True
    return effective


def run(args: argparse.Namespace) -> int:
    """
    Run one analysis.

    Returns:
        Exit code
    """
    settings = merge_settings(load_settings(args.config), args)
    configure_logging(settings["debug_enabled"], settings["log_file"])

    if args.list_strategies:
        for info in get_strategy_info():
            print(f"{info['name']:<12} {info['description']}")
        return 0

    if args.save_settings:
        save_settings(settings, args.config)

    try:
        strategy = create_strategy(settings["strategy_name"])
    except ValueError as e:
        logger.error(str(e))
        return 2

    if args.cells is not None:
        codes = parse_cell_codes(args.cells)
    else:
        codes = read_cell_codes(sys.stdin, sys.stdout)

    try:
        board = Board.from_codes(codes)
    except InvalidCellError as e:
        logger.error(f"Invalid board input: {e}")
        return 1

    remove_redundant_blocks(board)
    print(format_board(board))
    print(f"Live outer has {board.live_outer_count} cells")

    context = SearchContext(board=board, timeout_sec=settings["timeout_sec"])
    result = strategy.solve(context)

    print(format_result(result))
    logger.info(format_metrics(result))
    return 0


def main():
    """Initialize and run the analyzer."""
    args = parse_args()
    sys.exit(run(args))


if __name__ == "__main__":
    main()
