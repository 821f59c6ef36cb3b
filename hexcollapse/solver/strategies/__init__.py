"""
Strategies Package - Concrete search strategies.

Import this module to register all built-in strategies.
"""

from .countdown import CountdownState, CountdownStrategy
from .exhaustive import ExhaustiveStrategy

__all__ = [
    "CountdownState",
    "CountdownStrategy",
    "ExhaustiveStrategy",
]
