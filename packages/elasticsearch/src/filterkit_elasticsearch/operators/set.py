"""Combinator operators: ALL (AND) and ANY (OR) over one field."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from filterkit_filters.operators import FilterOperator

from ..merge import merge_fragments

if TYPE_CHECKING:
    from filterkit_filters.ast import Condition

    from ..context import CompileContext
    from ..merge import Fragment


def _as_disjunct(fragment: Fragment) -> list[dict[str, Any]]:
    # Only a non-empty filter-only fragment is inlined. An empty one is a
    # match-all alternative and must stay as its own bool query.
    if set(fragment) == {"filter"} and fragment["filter"]:
        return fragment["filter"]
    return [{"bool": fragment}]


def compile_set(field: str, condition: Condition, ctx: CompileContext) -> Fragment | None:
    """Compile ALL / ANY; sub-conditions reuse the already-mapped field."""
    if condition.op == FilterOperator.ALL:
        return merge_fragments(ctx.compile_mapped(field, sub) for sub in condition.value)

    if condition.op == FilterOperator.ANY:
        if not condition.value:
            return {"filter": []}
        queries: list[dict[str, Any]] = []
        for sub in condition.value:
            queries.extend(_as_disjunct(ctx.compile_mapped(field, sub)))
        return {"filter": [{"dis_max": {"queries": queries}}]}

    return None
