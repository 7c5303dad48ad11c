"""Combinator operators: ALL, ANY over sub-conditions on one field."""

from __future__ import annotations

from typing import Any

from ..evaluator import MemoryOperator, MemoryOperatorRegistry
from ..operators import FilterOperator


class AllOperator(MemoryOperator):
    """Every sub-condition holds on the field."""

    @property
    def name(self) -> FilterOperator:
        return FilterOperator.ALL

    def evaluate(
        self, field_value: Any, condition_value: Any, registry: MemoryOperatorRegistry
    ) -> bool:
        return all(registry.evaluate(sub, field_value) for sub in condition_value)


class AnyOperator(MemoryOperator):
    """
    At least one sub-condition holds on the field.

    An empty ANY adds no restriction, as its translation is an empty
    ``filter`` list.
    """

    @property
    def name(self) -> FilterOperator:
        return FilterOperator.ANY

    def evaluate(
        self, field_value: Any, condition_value: Any, registry: MemoryOperatorRegistry
    ) -> bool:
        if not condition_value:
            return True
        return any(registry.evaluate(sub, field_value) for sub in condition_value)
