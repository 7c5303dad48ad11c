"""
In-memory operator evaluation strategy.

Provides the MemoryOperator protocol and a registry that maps
FilterOperator → evaluation strategy.  The strategies follow the
semantics of a search index (multi-valued fields, ``None`` meaning
"missing") so that in-memory results agree with translated queries.

New operators are added by subclassing MemoryOperator and
registering via ``register()``.
"""

from __future__ import annotations

import datetime
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any

from .utils import resolve_field, utc_now

if TYPE_CHECKING:
    from .ast import Condition, Query, Statement
    from .operators import FilterOperator


class MemoryOperator(ABC):
    """
    Strategy interface for in-memory operator evaluation.

    Each operator is an isolated class with a single ``evaluate`` method.
    """

    @property
    @abstractmethod
    def name(self) -> FilterOperator:
        """The operator this strategy handles."""
        ...

    @abstractmethod
    def evaluate(
        self,
        field_value: Any,
        condition_value: Any,
        registry: MemoryOperatorRegistry,
    ) -> bool:
        """
        Evaluate the operator against concrete values.

        Args:
            field_value: The value resolved from the candidate (may be a list).
            condition_value: The value carried by the condition.
            registry: The calling registry, for operators that recurse into
                sub-conditions or nested queries.

        Returns:
            True if the condition is satisfied.
        """
        ...


class MemoryOperatorRegistry:
    """
    Registry of MemoryOperator instances keyed by FilterOperator.

    Usage::

        registry = MemoryOperatorRegistry()
        registry.register(EqualOperator())

        registry.evaluate(eq("active"), "active")  # True
    """

    def __init__(
        self,
        *,
        clock: Callable[[], datetime.datetime] = utc_now,
    ) -> None:
        self._operators: dict[FilterOperator, MemoryOperator] = {}
        self._clock = clock

    # -- registration --------------------------------------------------------

    def register(self, operator: MemoryOperator) -> None:
        """Register an operator strategy instance."""
        self._operators[operator.name] = operator

    def register_all(self, *operators: MemoryOperator) -> None:
        """Register multiple operator strategy instances at once."""
        for op in operators:
            self.register(op)

    def unregister(self, name: FilterOperator) -> None:
        """Remove an operator from the registry."""
        self._operators.pop(name, None)

    # -- look-up -------------------------------------------------------------

    def get(self, name: FilterOperator) -> MemoryOperator | None:
        """Return the registered operator or ``None``."""
        return self._operators.get(name)

    def has(self, name: FilterOperator) -> bool:
        return name in self._operators

    @property
    def supported_operators(self) -> set[FilterOperator]:
        return set(self._operators.keys())

    def now(self) -> datetime.datetime:
        """Current time used to resolve relative dates."""
        return self._clock()

    # -- evaluation ----------------------------------------------------------

    def evaluate(self, condition: Condition, field_value: Any) -> bool:
        """
        Look up the condition's operator and evaluate it.

        Raises:
            ValueError: If the operator is not registered.
        """
        op = self.get(condition.op)
        if op is None:
            raise ValueError(
                f"Unsupported operator for in-memory evaluation: {condition.op}"
            )
        return op.evaluate(field_value, condition.value, self)

    def matches_query(self, query: Query, candidate: Any) -> bool:
        """True when every condition of *query* holds on *candidate*."""
        return all(
            self.evaluate(condition, resolve_field(candidate, field_id))
            for field_id, condition in query
        )

    def matches_statements(
        self, statements: Iterable[Statement], candidate: Any
    ) -> bool:
        """AND across statements, OR across the queries of each statement."""
        return all(
            any(self.matches_query(query, candidate) for query in statement)
            for statement in statements
        )
