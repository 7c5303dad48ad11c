"""Equality operators: EQ and NEQ, including ``None`` existence checks."""

from __future__ import annotations

from typing import TYPE_CHECKING

from filterkit_filters.operators import FilterOperator

from ..serialization import to_search_value

if TYPE_CHECKING:
    from filterkit_filters.ast import Condition

    from ..context import CompileContext
    from ..merge import Fragment


def compile_standard(
    field: str, condition: Condition, ctx: CompileContext
) -> Fragment | None:
    """Compile EQ / NEQ to term or exists clauses."""
    if condition.op == FilterOperator.EQ:
        if condition.value is None:
            return {"must_not": [{"exists": {"field": field}}]}
        return {"filter": [{"term": {field: to_search_value(condition.value)}}]}

    if condition.op == FilterOperator.NEQ:
        if condition.value is None:
            return {"filter": [{"exists": {"field": field}}]}
        return {"must_not": [{"term": {field: to_search_value(condition.value)}}]}

    return None
