#!/usr/bin/env python3
"""
Test script for input parsing, reporting, settings and the CLI.

Usage:
    python test_input.py
"""

import io
import json
import sys
import tempfile
from contextlib import redirect_stdout
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import main as cli
from boards import ANCHOR_CODES
from hexcollapse.parsing import parse_cell_codes, parse_token, read_cell_codes
from hexcollapse.report import format_board, format_cells, format_result
from hexcollapse.settings import DEFAULT_SETTINGS, load_settings, save_settings
from hexcollapse.solver import (
    Benefit,
    Board,
    Cell,
    Combination,
    SearchResult,
    decode_cell_code,
)


def _banner(title: str) -> None:
    print(f"\n{'='*60}")
    print(f"TEST: {title}")
    print('='*60)


def test_parse_tokens():
    """Tokens that are not unsigned bytes are dropped."""
    _banner("Token Parsing")

    assert parse_cell_codes("23 ab 71 -5 300 08 +12 4.5") == [23, 71, 8, 12]
    assert parse_cell_codes("") == []
    assert parse_cell_codes("  11\t12\n") == [11, 12]
    assert parse_token("255") == 255

    for bad in ("256", "-1", "x1", "1e2"):
        try:
            parse_token(bad)
        except ValueError:
            continue
        raise AssertionError(f"{bad!r} should not parse")

    prompt = io.StringIO()
    codes = read_cell_codes(io.StringIO("11 21 zz\nignored 33\n"), prompt)
    assert codes == [11, 21]
    assert prompt.getvalue() == "Enter cells: "
    print("  [PASS] Token parsing tests")


def test_decode():
    """col*10+row decoding."""
    _banner("Cell Decoding")

    assert decode_cell_code(23) == (3, 2)
    assert decode_cell_code(71) == (1, 7)
    assert decode_cell_code(8) == (8, 0)
    print("  [PASS] Cell decoding tests")


def test_report():
    """Board and result rendering."""
    _banner("Report")

    board = Board.from_codes([11, 77])
    lines = format_board(board).splitlines()
    assert len(lines) == 7
    assert lines[0] == "0 1 1 1 1 1 1"
    assert lines[6] == "1 1 1 1 1 1 0"

    assert format_cells([Cell(3, 2), Cell(1, 6)]) == "(2-3), (6-1)"

    combo = Combination.create(
        [Cell(2, 3)], Benefit(21, removing_cells=(Cell(1, 6), Cell(2, 3)))
    )
    text = format_result(SearchResult(best_benefit=21, combinations=[combo]))
    assert text.splitlines() == [
        "The maximum benefit is 21",
        "All combinations:",
        "Cells: (6-1), (3-2)",
    ]

    cancelled = format_result(SearchResult(was_cancelled=True))
    assert "stopped early" in cancelled
    print("  [PASS] Report tests")


def test_settings():
    """Defaults, merging and round trip."""
    _banner("Settings")

    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "config.json"

        assert load_settings(path) == DEFAULT_SETTINGS

        path.write_text("{not json", encoding="utf-8")
        assert load_settings(path) == DEFAULT_SETTINGS

        path.write_text("[1, 2]", encoding="utf-8")
        assert load_settings(path) == DEFAULT_SETTINGS

        path.write_text(json.dumps({"timeout_sec": 5, "bogus": 1}), encoding="utf-8")
        loaded = load_settings(path)
        assert loaded["timeout_sec"] == 5
        assert loaded["strategy_name"] == "countdown"
        assert "bogus" not in loaded

        settings = dict(DEFAULT_SETTINGS, strategy_name="exhaustive")
        save_settings(settings, path)
        assert load_settings(path) == settings
    print("  [PASS] Settings tests")


def _run_cli(argv):
    out = io.StringIO()
    with redirect_stdout(out):
        code = cli.run(cli.parse_args(argv))
    return code, out.getvalue()


def test_cli():
    """End-to-end runs of the entry point."""
    _banner("CLI")

    with tempfile.TemporaryDirectory() as tmp:
        config = Path(tmp) / "config.json"
        config.write_text(json.dumps({"log_file": ""}), encoding="utf-8")

        cells = " ".join(str(c) for c in ANCHOR_CODES)
        code, output = _run_cli(["--cells", cells, "--config", str(config)])
        assert code == 0
        lines = output.splitlines()
        assert lines[0] == "0 1 0 0 0 0 0"
        assert lines[1] == "0 1 0 1 1 1 0"
        assert "Live outer has 1 cells" in lines
        assert "The maximum benefit is 24" in lines
        assert "Cells: (2-1)" in lines

        code, _ = _run_cli(["--cells", "23 81", "--config", str(config)])
        assert code == 1

        code, _ = _run_cli(["--cells", "23", "--strategy", "nope", "--config", str(config)])
        assert code == 2

        code, output = _run_cli(["--list-strategies", "--config", str(config)])
        assert code == 0
        assert "countdown" in output and "exhaustive" in output

        # Settings are written before the board is read
        code, _ = _run_cli([
            "--cells", "81", "--config", str(config),
            "--strategy", "exhaustive", "--timeout", "30", "--save-settings",
        ])
        assert code == 1
        saved = load_settings(config)
        assert saved["strategy_name"] == "exhaustive"
        assert saved["timeout_sec"] == 30
        assert saved["log_file"] == ""
    print("  [PASS] CLI tests")


def main():
    """Run all tests."""
    tests = [
        ("Token Parsing", test_parse_tokens),
        ("Cell Decoding", test_decode),
        ("Report", test_report),
        ("Settings", test_settings),
        ("CLI", test_cli),
    ]

    failures = 0
    for name, test in tests:
        try:
            test()
        except AssertionError as e:
            print(f"  [FAIL] {name}: {e}")
            failures += 1

    print()
    if failures:
        print(f"{failures} test(s) FAILED!")
        return 1
    print("All tests PASSED!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
