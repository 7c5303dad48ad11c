"""Range operators: LT, LTE, GT, GTE."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from filterkit_filters.ast import DaysAgo
from filterkit_filters.operators import RANGE_OPERATORS

from ..serialization import to_search_value

if TYPE_CHECKING:
    from filterkit_filters.ast import Condition

    from ..context import CompileContext
    from ..merge import Fragment


def range_value(value: Any) -> Any:
    """
    Resolve a range bound.

    :class:`DaysAgo` becomes Elasticsearch date math rounded to the day
    (``now-7d/d``); the engine rounds it per operator so that, for
    example, ``gte`` includes the whole day.
    """
    if isinstance(value, DaysAgo):
        return f"now-{value.days_ago}d/d"
    return to_search_value(value)


def compile_range(
    field: str, condition: Condition, ctx: CompileContext
) -> Fragment | None:
    if condition.op not in RANGE_OPERATORS:
        return None
    return {
        "filter": [
            {"range": {field: {condition.op.value.lower(): range_value(condition.value)}}}
        ]
    }
