"""
Condition factories.

Example::

    from filterkit_filters.conditions import any_, eq, find, prefix, where

    prefix("j")                                   # PREFIX "j"
    any_([eq("doyle"), eq(None)])                 # doyle, or missing
    find(where("id", eq("vacancy1")).where("stage.id", eq("stage1")))
"""

from __future__ import annotations

import datetime
from collections.abc import Iterable
from typing import Any

from .ast import Condition, DaysAgo, Query
from .operators import FilterOperator

RangeValue = bool | int | float | str | datetime.date | DaysAgo


def eq(value: Any) -> Condition:
    """Field equals *value*; ``eq(None)`` means the field is missing."""
    return Condition(FilterOperator.EQ, value)


def neq(value: Any) -> Condition:
    """Field differs from *value*; ``neq(None)`` means the field is present."""
    return Condition(FilterOperator.NEQ, value)


def lt(value: RangeValue) -> Condition:
    return Condition(FilterOperator.LT, value)


def lte(value: RangeValue) -> Condition:
    return Condition(FilterOperator.LTE, value)


def gt(value: RangeValue) -> Condition:
    return Condition(FilterOperator.GT, value)


def gte(value: RangeValue) -> Condition:
    return Condition(FilterOperator.GTE, value)


def all_(conditions: Iterable[Condition]) -> Condition:
    """Every sub-condition must hold on the same field."""
    return Condition(FilterOperator.ALL, tuple(conditions))


def any_(conditions: Iterable[Condition]) -> Condition:
    """At least one sub-condition must hold on the same field."""
    return Condition(FilterOperator.ANY, tuple(conditions))


def prefix(value: str) -> Condition:
    return Condition(FilterOperator.PREFIX, value)


def find(query: Query) -> Condition:
    """Some element of a nested collection matches *query*."""
    return Condition(FilterOperator.FIND, query)


def nfind(query: Query) -> Condition:
    """No element of a nested collection matches *query*."""
    return Condition(FilterOperator.NFIND, query)


def days_ago(days: int) -> DaysAgo:
    return DaysAgo(days_ago=days)


def where(field_id: str, condition: Condition) -> Query:
    """Start a :class:`Query` (e.g. for ``find`` / ``nfind``)."""
    return Query().where(field_id, condition)
