"""Nested collection operators: FIND, NFIND."""

from __future__ import annotations

from typing import Any

from ..evaluator import MemoryOperator, MemoryOperatorRegistry
from ..operators import FilterOperator
from ..utils import field_values


def _any_element_matches(
    field_value: Any, query: Any, registry: MemoryOperatorRegistry
) -> bool:
    return any(
        registry.matches_query(query, element) for element in field_values(field_value)
    )


class FindOperator(MemoryOperator):
    """Some element of the collection matches the nested query."""

    @property
    def name(self) -> FilterOperator:
        return FilterOperator.FIND

    def evaluate(
        self, field_value: Any, condition_value: Any, registry: MemoryOperatorRegistry
    ) -> bool:
        return _any_element_matches(field_value, condition_value, registry)


class NotFindOperator(MemoryOperator):
    """No element of the collection matches the nested query."""

    @property
    def name(self) -> FilterOperator:
        return FilterOperator.NFIND

    def evaluate(
        self, field_value: Any, condition_value: Any, registry: MemoryOperatorRegistry
    ) -> bool:
        return not _any_element_matches(field_value, condition_value, registry)
