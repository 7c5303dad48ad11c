"""String operators: PREFIX."""

from __future__ import annotations

from typing import Any

from ..evaluator import MemoryOperator, MemoryOperatorRegistry
from ..operators import FilterOperator
from ..utils import field_values


class PrefixOperator(MemoryOperator):
    """Case-sensitive prefix match on any string value of the field."""

    @property
    def name(self) -> FilterOperator:
        return FilterOperator.PREFIX

    def evaluate(
        self, field_value: Any, condition_value: Any, registry: MemoryOperatorRegistry
    ) -> bool:
        if condition_value is None:
            return False
        expected = str(condition_value)
        return any(
            isinstance(value, str) and value.startswith(expected)
            for value in field_values(field_value)
        )
