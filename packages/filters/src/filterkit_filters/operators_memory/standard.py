"""Equality operators: EQ, NEQ (``None`` tests presence)."""

from __future__ import annotations

from typing import Any

from ..evaluator import MemoryOperator, MemoryOperatorRegistry
from ..operators import FilterOperator
from ..utils import comparable_pair, field_values


def _contains_value(values: list[Any], expected: Any) -> bool:
    for value in values:
        pair = comparable_pair(value, expected)
        if pair is not None and pair[0] == pair[1]:
            return True
    return False


class EqualOperator(MemoryOperator):
    @property
    def name(self) -> FilterOperator:
        return FilterOperator.EQ

    def evaluate(
        self, field_value: Any, condition_value: Any, registry: MemoryOperatorRegistry
    ) -> bool:
        values = field_values(field_value)
        if condition_value is None:
            return not values
        return _contains_value(values, condition_value)


class NotEqualOperator(MemoryOperator):
    @property
    def name(self) -> FilterOperator:
        return FilterOperator.NEQ

    def evaluate(
        self, field_value: Any, condition_value: Any, registry: MemoryOperatorRegistry
    ) -> bool:
        values = field_values(field_value)
        if condition_value is None:
            return bool(values)
        return not _contains_value(values, condition_value)
