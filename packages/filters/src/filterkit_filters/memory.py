"""
Apply a :class:`Filter` directly to an in-memory collection.

Mirrors what a search index does with the translated query: match,
sort (missing values last, identifier tie-break) and limit.  Useful as
a reference in tests and for small in-process collections.
"""

from __future__ import annotations

import datetime
from collections.abc import Iterable
from functools import cmp_to_key
from typing import Any

from .ast import Filter
from .evaluator import MemoryOperatorRegistry
from .operators import SortDirection
from .operators_memory import build_default_registry
from .utils import field_values, resolve_field, to_utc_datetime


def matches_filter(
    flt: Filter,
    candidate: Any,
    *,
    registry: MemoryOperatorRegistry | None = None,
) -> bool:
    """True when *candidate* satisfies every statement of *flt*."""
    registry = registry if registry is not None else build_default_registry()
    return registry.matches_statements(flt.statements, candidate)


def sort_value(flt: Filter, candidate: Any, *, id_field: str = "id") -> Any:
    """
    Return the primary sort value of *candidate*, or ``None`` if missing.

    Multi-valued fields sort by their minimum ascending and their
    maximum descending.
    """
    field_id = flt.sort_field_id
    if not field_id or field_id == id_field:
        return None
    if flt.sort_field_sub_id and flt.sort_field_sub_prop:
        element = next(
            (
                el
                for el in field_values(resolve_field(candidate, field_id))
                if resolve_field(el, "id") == flt.sort_field_sub_id
            ),
            None,
        )
        raw = (
            resolve_field(element, flt.sort_field_sub_prop)
            if element is not None
            else None
        )
    else:
        raw = resolve_field(candidate, field_id)
    values = [
        to_utc_datetime(v) if isinstance(v, datetime.date) else v
        for v in field_values(raw)
    ]
    if not values:
        return None
    return min(values) if flt.sort_direction == SortDirection.ASC else max(values)


def _compare(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def sort_items(
    flt: Filter, items: Iterable[Any], *, id_field: str = "id"
) -> list[Any]:
    """Sort *items* the way the translated sort clause orders them."""
    sign = 1 if flt.sort_direction == SortDirection.ASC else -1
    keyed = [
        (sort_value(flt, item, id_field=id_field), resolve_field(item, id_field), item)
        for item in items
    ]

    def compare(left: tuple[Any, Any, Any], right: tuple[Any, Any, Any]) -> int:
        lval, rval = left[0], right[0]
        if lval is not None and rval is not None:
            result = _compare(lval, rval)
            if result:
                return result * sign
        elif lval is not None:
            return -1
        elif rval is not None:
            return 1
        return _compare(left[1], right[1]) * sign

    return [item for _, _, item in sorted(keyed, key=cmp_to_key(compare))]


def apply_filter(
    flt: Filter,
    items: Iterable[Any],
    *,
    registry: MemoryOperatorRegistry | None = None,
    id_field: str = "id",
) -> list[Any]:
    """Filter, sort and limit *items* according to *flt*."""
    registry = registry if registry is not None else build_default_registry()
    matched = [item for item in items if registry.matches_statements(flt.statements, item)]
    return sort_items(flt, matched, id_field=id_field)[: flt.limit]
