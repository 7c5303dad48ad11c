"""Nested-document operators: FIND and NFIND."""

from __future__ import annotations

from typing import TYPE_CHECKING

from filterkit_filters.operators import FilterOperator

if TYPE_CHECKING:
    from filterkit_filters.ast import Condition

    from ..context import CompileContext
    from ..merge import Fragment


def compile_nested(
    field: str, condition: Condition, ctx: CompileContext
) -> Fragment | None:
    """
    FIND: some element of the nested collection *field* matches the query.
    NFIND: no element does.

    Child field ids are resolved as ``<field>.<child>`` and then mapped.
    """
    if condition.op not in {FilterOperator.FIND, FilterOperator.NFIND}:
        return None

    nested = {
        "nested": {
            "path": field,
            "query": ctx.build_nested_query(condition.value, field),
        }
    }
    if condition.op == FilterOperator.FIND:
        return {"filter": [nested]}
    return {"must_not": [nested]}
