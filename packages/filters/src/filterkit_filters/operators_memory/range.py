"""Range operators: LT, LTE, GT, GTE."""

from __future__ import annotations

import datetime
import operator
from collections.abc import Callable
from typing import Any

from ..ast import DaysAgo
from ..evaluator import MemoryOperator, MemoryOperatorRegistry
from ..operators import FilterOperator
from ..utils import comparable_pair, field_values


class _RangeOperator(MemoryOperator):
    """
    Match when any value of the field satisfies the bound.

    A :class:`DaysAgo` bound follows date-math rounding: ``gt`` / ``lte``
    round up to the end of the day, ``gte`` / ``lt`` round down.
    """

    compare: Callable[[Any, Any], bool]
    rounds_up: bool

    def _resolve_bound(
        self, bound: Any, now: datetime.datetime
    ) -> Any:
        if isinstance(bound, DaysAgo):
            return bound.ceil(now) if self.rounds_up else bound.floor(now)
        return bound

    def evaluate(
        self, field_value: Any, condition_value: Any, registry: MemoryOperatorRegistry
    ) -> bool:
        bound = self._resolve_bound(condition_value, registry.now())
        for value in field_values(field_value):
            pair = comparable_pair(value, bound)
            if pair is None:
                continue
            try:
                if type(self).compare(*pair):
                    return True
            except TypeError:
                continue
        return False


class LessThanOperator(_RangeOperator):
    compare = operator.lt
    rounds_up = False

    @property
    def name(self) -> FilterOperator:
        return FilterOperator.LT


class LessEqualOperator(_RangeOperator):
    compare = operator.le
    rounds_up = True

    @property
    def name(self) -> FilterOperator:
        return FilterOperator.LTE


class GreaterThanOperator(_RangeOperator):
    compare = operator.gt
    rounds_up = True

    @property
    def name(self) -> FilterOperator:
        return FilterOperator.GT


class GreaterEqualOperator(_RangeOperator):
    compare = operator.ge
    rounds_up = False

    @property
    def name(self) -> FilterOperator:
        return FilterOperator.GTE
