"""Translation configuration."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

FieldMapFn = Callable[[str], "str | None"]


def identity_field_map(field_id: str) -> str:
    return field_id


class NestedSortStyle(str, Enum):
    """How nested sort clauses are written."""

    # ``nested_path`` / ``nested_filter`` keys (Elasticsearch < 8)
    LEGACY = "legacy"
    # ``nested: {path, filter}`` object (Elasticsearch >= 6.1)
    NESTED = "nested"


@dataclass(frozen=True)
class ElasticQueryConfig:
    """Configuration for :class:`ElasticQueryBuilder`.

    Attributes:
        field_map: Rewrites a logical field path to its indexed path.  A
            falsy result falls back to the logical path.
        id_field: Unique document identifier, used as the sort tie-break.
        missing: Placement of documents without a sort value.
        nested_sort_style: Shape of nested sort clauses.
        max_depth: Maximum nesting of ALL / ANY / FIND / NFIND conditions.
    """

    field_map: FieldMapFn = identity_field_map
    id_field: str = "id"
    missing: str = "_last"
    nested_sort_style: NestedSortStyle = NestedSortStyle.LEGACY
    max_depth: int = 32

    def with_field_map(self, field_map: FieldMapFn) -> ElasticQueryConfig:
        """Return a copy using *field_map*."""
        return dataclasses.replace(self, field_map=field_map)
