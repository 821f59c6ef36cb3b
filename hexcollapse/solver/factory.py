"""
Strategy Factory Module - Registry of search strategies.
"""

from typing import Any, Dict, List, Type

from .base import SolverStrategy

DEFAULT_STRATEGY = "countdown"

# Strategy name -> class, filled by @register_strategy at import time
_STRATEGIES: Dict[str, Type[SolverStrategy]] = {}


def register_strategy(cls: Type[SolverStrategy]) -> Type[SolverStrategy]:
    """
    Class decorator adding a strategy to the registry under cls.name.

    Raises:
        ValueError: If another class already claimed the name
    """
    existing = _STRATEGIES.get(cls.name)
    if existing is not None and existing is not cls:
        raise ValueError(
            f"Strategy name '{cls.name}' already registered by {existing.__name__}"
        )
    _STRATEGIES[cls.name] = cls
    return cls


def create_strategy(name: str, **kwargs: Any) -> SolverStrategy:
    """
    Instantiate a registered strategy.

    Args:
        name: Strategy name (e.g., "countdown", "exhaustive")
        **kwargs: Passed to the strategy constructor (e.g., max_size)

    Returns:
        Strategy instance

    Raises:
        ValueError: If no strategy has that name
    """
    try:
        strategy_cls = _STRATEGIES[name]
    except KeyError:
        available = ", ".join(sorted(_STRATEGIES))
        raise ValueError(f"Unknown strategy: {name}. Available: {available}") from None
    return strategy_cls(**kwargs)


def get_strategy_names() -> List[str]:
    """Registered strategy names, sorted."""
    return sorted(_STRATEGIES)


def get_strategy_info() -> List[Dict[str, str]]:
    """
    Describe every registered strategy.

    Returns:
        List of dicts with 'name' and 'description' keys, sorted by name
    """
    return [
        {"name": name, "description": _STRATEGIES[name].description}
        for name in sorted(_STRATEGIES)
    ]


def get_default_strategy_name() -> str:
    """
    Name of the strategy used when none is configured.

    Falls back to the first registered name if the reference strategy
    is missing, or "" when nothing is registered.
    """
    if DEFAULT_STRATEGY in _STRATEGIES:
        return DEFAULT_STRATEGY
    return next(iter(sorted(_STRATEGIES)), "")
