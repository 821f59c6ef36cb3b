"""
Input Parsing - Turn a line of cell tokens into cell codes.

Tokens are unsigned bytes written in decimal; anything else on the
line is ignored. Decoding a code into a location happens in
Board.from_codes(), which rejects locations off the grid.
"""

import logging
import re
from typing import List, Optional, TextIO

logger = logging.getLogger(__name__)

# Largest value a token may hold
MAX_CODE = 255

_TOKEN_RE = re.compile(r"\+?[0-9]+")


def parse_token(token: str) -> int:
    """
    Parse one token as an unsigned byte.

    Args:
        token: Whitespace-free text

    Returns:
        Parsed value

    Raises:
        ValueError: If the token is not an integer in 0..MAX_CODE
    """
    if not _TOKEN_RE.fullmatch(token):
        raise ValueError(f"Not an unsigned integer: {token!r}")
    value = int(token)
    if value > MAX_CODE:
        raise ValueError(f"Token out of range: {token!r}")
    return value


def parse_cell_codes(text: str) -> List[int]:
    """
    Parse a line of whitespace-separated tokens.

    Tokens that do not parse are dropped silently (logged at debug).

    Args:
        text: Input line

    Returns:
        Parsed codes in input order
    """
    codes: List[int] = []
    for token in text.split():
        try:
            codes.append(parse_token(token))
        except ValueError as e:
            logger.debug(f"Skipping token: {e}")
    return codes


def read_cell_codes(stream: TextIO, prompt_stream: Optional[TextIO] = None) -> List[int]:
    """
    Prompt for and read one line of cell codes.

    Args:
        stream: Stream to read the line from
        prompt_stream: Stream to write the prompt to, None for no prompt

    Returns:
        Parsed codes
    """
    if prompt_stream is not None:
        prompt_stream.write("Enter cells: ")
        prompt_stream.flush()
    return parse_cell_codes(stream.readline())
