"""String operators."""

from __future__ import annotations

from typing import TYPE_CHECKING

from filterkit_filters.operators import FilterOperator

from ..serialization import to_search_value

if TYPE_CHECKING:
    from filterkit_filters.ast import Condition

    from ..context import CompileContext
    from ..merge import Fragment


def compile_string(
    field: str, condition: Condition, ctx: CompileContext
) -> Fragment | None:
    if condition.op != FilterOperator.PREFIX:
        return None
    return {"filter": [{"prefix": {field: to_search_value(condition.value)}}]}
