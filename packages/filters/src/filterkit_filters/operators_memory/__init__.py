"""
In-memory operator implementations.

Provides concrete MemoryOperator subclasses for each FilterOperator
and a factory function to create registries.

Usage::

    from filterkit_filters.operators_memory import build_default_registry

    registry = build_default_registry()
    registry.evaluate(eq("active"), "active")  # True
"""

from __future__ import annotations

import datetime
from collections.abc import Callable

from ..evaluator import MemoryOperatorRegistry
from ..utils import utc_now
from .nested import FindOperator, NotFindOperator
from .range import (
    GreaterEqualOperator,
    GreaterThanOperator,
    LessEqualOperator,
    LessThanOperator,
)
from .set import AllOperator, AnyOperator
from .standard import EqualOperator, NotEqualOperator
from .string import PrefixOperator


def build_default_registry(
    *,
    clock: Callable[[], datetime.datetime] = utc_now,
) -> MemoryOperatorRegistry:
    """
    Create a registry with all built-in operators.

    This factory function creates a fresh MemoryOperatorRegistry instance
    populated with all built-in operators.  Pass *clock* to pin "now" for
    relative-date conditions.

    Example:
        >>> registry = build_default_registry()
        >>> registry.evaluate(Condition("EQ", "active"), "active")
        True
    """
    registry = MemoryOperatorRegistry(clock=clock)
    registry.register_all(
        # Equality
        EqualOperator(),
        NotEqualOperator(),
        # Range
        LessThanOperator(),
        LessEqualOperator(),
        GreaterThanOperator(),
        GreaterEqualOperator(),
        # Combinators
        AllOperator(),
        AnyOperator(),
        # String
        PrefixOperator(),
        # Nested
        FindOperator(),
        NotFindOperator(),
    )
    return registry


__all__ = [
    "build_default_registry",
    "MemoryOperatorRegistry",
]
