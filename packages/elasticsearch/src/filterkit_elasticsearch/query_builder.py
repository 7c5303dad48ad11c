"""Elasticsearch bool-query builder from the filter AST."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from typing import TYPE_CHECKING, Any

from filterkit_filters.operators import SortDirection

from .config import ElasticQueryConfig, FieldMapFn, NestedSortStyle
from .context import CompileContext
from .exceptions import UnsupportedOperatorError
from .field_mapping import map_field
from .merge import Fragment, merge_fragments
from .operators import DEFAULT_COMPILERS
from .serialization import to_search_value

if TYPE_CHECKING:
    from filterkit_filters.ast import Condition, Filter, Query, Statement

logger = logging.getLogger(__name__)

Compiler = Callable[[str, "Condition", CompileContext], "Fragment | None"]


class ElasticQueryBuilder:
    """
    Compiles :class:`~filterkit_filters.Filter` objects to search request
    bodies of the form ``{"query": ..., "size": ..., "sort": [...]}``.

    Compilers are tried in order; the first to return a fragment wins.
    Pass ``compilers`` to restrict or extend the supported operators.
    """

    def __init__(
        self,
        config: ElasticQueryConfig | None = None,
        *,
        compilers: Sequence[Compiler] | None = None,
    ) -> None:
        self._config = config or ElasticQueryConfig()
        self._compilers: tuple[Compiler, ...] = (
            tuple(compilers) if compilers is not None else DEFAULT_COMPILERS
        )

    @property
    def config(self) -> ElasticQueryConfig:
        return self._config

    # -- conditions ----------------------------------------------------------

    def translate_condition(
        self,
        field_id: str,
        condition: Condition,
        ctx: CompileContext | None = None,
    ) -> Fragment:
        """Map *field_id* and compile *condition* against it."""
        mapped = map_field(self._config.field_map, field_id)
        return self.compile_condition(mapped, condition, ctx or CompileContext(self))

    def compile_condition(
        self, mapped_field: str, condition: Condition, ctx: CompileContext
    ) -> Fragment:
        for compiler in self._compilers:
            result = compiler(mapped_field, condition, ctx)
            if result is not None:
                return result
        raise UnsupportedOperatorError(condition)

    # -- queries / statements ------------------------------------------------

    def build_query(
        self,
        query: Query,
        *,
        prefix: str | None = None,
        ctx: CompileContext | None = None,
    ) -> dict[str, Any]:
        """AND every condition of *query* into one ``{"bool": ...}``."""
        ctx = ctx or CompileContext(self)
        fragments = query.map_field_conditions(
            lambda field_id, condition: self.translate_condition(
                f"{prefix}.{field_id}" if prefix else field_id, condition, ctx
            )
        )
        return {"bool": merge_fragments(fragments)}

    def parse_statements(self, statements: Iterable[Statement]) -> dict[str, Any]:
        """OR the queries within each statement, AND the statements."""
        clauses: list[dict[str, Any]] = []
        for statement in statements:
            should = [self.build_query(query) for query in statement]
            if len(should) == 1:
                clauses.append(should[0])
            else:
                clauses.append({"bool": {"minimum_should_match": 1, "should": should}})
        if len(clauses) == 1:
            return clauses[0]
        return {"bool": {"filter": clauses}}

    # -- sort ----------------------------------------------------------------

    def build_sort(self, flt: Filter) -> list[dict[str, Any]]:
        """Primary sort clause (if any) followed by the id tie-break."""
        order = _ORDER[flt.sort_direction]
        sort: list[dict[str, Any]] = [{self._config.id_field: {"order": order}}]
        field_id = flt.sort_field_id
        if field_id and field_id != self._config.id_field:
            sort.insert(0, self._primary_sort(flt, field_id, order))
        return sort

    def _primary_sort(self, flt: Filter, field_id: str, order: str) -> dict[str, Any]:
        cfg = self._config
        sub_prop = flt.sort_field_sub_prop
        sub_id = flt.sort_field_sub_id
        if not (sub_prop and sub_id):
            return {map_field(cfg.field_map, field_id): {"order": order, "missing": cfg.missing}}

        path = map_field(cfg.field_map, f"{field_id}.{sub_prop}")
        nested_path = map_field(cfg.field_map, field_id)
        nested_filter = {
            "term": {map_field(cfg.field_map, f"{field_id}.id"): to_search_value(sub_id)}
        }
        if cfg.nested_sort_style == NestedSortStyle.NESTED:
            return {
                path: {
                    "order": order,
                    "missing": cfg.missing,
                    "nested": {"path": nested_path, "filter": nested_filter},
                }
            }
        return {
            path: {
                "order": order,
                "missing": cfg.missing,
                "nested_path": nested_path,
                "nested_filter": nested_filter,
            }
        }

    # -- top level -----------------------------------------------------------

    def build(self, flt: Filter) -> dict[str, Any]:
        """Build the complete search request body for *flt*."""
        body = {
            "query": self.parse_statements(flt.statements),
            "size": flt.limit,
            "sort": self.build_sort(flt),
        }
        logger.debug(
            "Built search body: %d statement(s), %d sort clause(s), size=%d",
            len(flt.statements),
            len(body["sort"]),
            flt.limit,
        )
        return body


_ORDER = {SortDirection.ASC: "asc", SortDirection.DESC: "desc"}


def to_elastic(
    flt: Filter,
    field_map: FieldMapFn | None = None,
    *,
    config: ElasticQueryConfig | None = None,
) -> dict[str, Any]:
    """
    Translate *flt* to an Elasticsearch search request body.

    Args:
        flt: The filter to translate.
        field_map: Optional logical → indexed field path mapping.  Takes
            precedence over ``config.field_map``.
        config: Optional translation configuration.
    """
    config = config or ElasticQueryConfig()
    if field_map is not None:
        config = config.with_field_map(field_map)
    return ElasticQueryBuilder(config).build(flt)
