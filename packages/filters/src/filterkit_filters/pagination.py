"""
Keyset pagination: continue a sorted filter after the last seen item.

Instead of offsets, the next page is selected by an extra statement that
keeps only the items sorting after the last one of the previous page:

    (sort > last) OR (sort == last AND id > last_id) OR (sort missing)

with ``<`` for descending order.  Missing sort values always sort last.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from .ast import Condition, Filter, Query, Statement
from .conditions import eq, find, gt, lt, neq, nfind, where
from .exceptions import ValidationError
from .memory import sort_value
from .operators import SortDirection
from .utils import resolve_field

logger = logging.getLogger(__name__)

After = Callable[[Any], Condition]


def _plain_field_statement(
    field_id: str, value: Any, tie_break: tuple[str, Condition], after: After
) -> Statement:
    if value is None:
        return (where(field_id, eq(None)).where(*tie_break),)
    return (
        where(field_id, after(value)),
        where(field_id, eq(value)).where(*tie_break),
        where(field_id, eq(None)),
    )


def _nested_field_statement(
    field_id: str,
    sub_id: str,
    sub_prop: str,
    value: Any,
    tie_break: tuple[str, Condition],
    after: After,
) -> Statement:
    def element(condition: Condition) -> Query:
        return where("id", eq(sub_id)).where(sub_prop, condition)

    missing = where(field_id, nfind(element(neq(None))))
    if value is None:
        return (missing.where(*tie_break),)
    return (
        where(field_id, find(element(after(value)))),
        where(field_id, find(element(eq(value)))).where(*tie_break),
        missing,
    )


def create_paginated_filter(
    flt: Filter, last_item: Any, *, id_field: str = "id"
) -> Filter:
    """
    Return a copy of *flt* restricted to the items after *last_item*.

    *last_item* is the last item of the previous page (a dict or an
    object); ``None`` returns *flt* unchanged, for the first page.

    Raises:
        ValidationError: If *last_item* has no identifier.
    """
    if last_item is None:
        return flt

    last_id = resolve_field(last_item, id_field)
    if last_id is None:
        raise ValidationError(
            f"Cannot paginate after an item without '{id_field}'", path=id_field
        )

    after: After = gt if flt.sort_direction == SortDirection.ASC else lt
    tie_break = (id_field, after(last_id))
    field_id = flt.sort_field_id

    statement: Statement
    if not field_id or field_id == id_field:
        statement = (Query((tie_break,)),)
    else:
        value = sort_value(flt, last_item, id_field=id_field)
        if flt.sort_field_sub_id and flt.sort_field_sub_prop:
            statement = _nested_field_statement(
                field_id,
                flt.sort_field_sub_id,
                flt.sort_field_sub_prop,
                value,
                tie_break,
                after,
            )
        else:
            statement = _plain_field_statement(field_id, value, tie_break, after)

    logger.debug(
        "Paginating after %s=%r (sort=%s %s)",
        id_field,
        last_id,
        field_id or id_field,
        flt.sort_direction.value,
    )
    return flt.replace(statements=(*flt.statements, statement))
