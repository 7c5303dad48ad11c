"""
Fluent builder for constructing filters.

Example::

    flt = (
        FilterBuilder()
        .where("firstName", prefix("j"))
        .where("assignedTo", neq(None))
        .set_sort_field_id("createdAt")
        .set_sort_direction("ASC")
        .set_limit(50)
        .and_()
            .where("lists.id", eq("list-1"))
            .or_()
            .where("vacancies.id", eq("vacancy1"))
        .build()
    )
    # → (firstName ^= "j" AND assignedTo present)
    #   AND (lists.id == "list-1" OR vacancies.id == "vacancy1")
"""

from __future__ import annotations

from .ast import DEFAULT_LIMIT, Condition, Filter, Query, to_direction
from .exceptions import ValidationError
from .operators import SortDirection


class FilterBuilder:
    """
    Fluent builder for :class:`Filter`.

    Conditions added with ``where()`` go into the current query (AND).
    ``or_()`` starts a new query in the current statement and ``and_()``
    starts a new statement.
    """

    def __init__(self) -> None:
        self._statements: list[list[Query]] = []
        self._sort_field_id: str | None = None
        self._sort_field_sub_id: str | None = None
        self._sort_field_sub_prop: str | None = None
        self._sort_direction = SortDirection.ASC
        self._limit = DEFAULT_LIMIT
        self.reset()

    def reset(self) -> FilterBuilder:
        """Clear everything and return ``self`` for reuse."""
        self._statements = [[Query()]]
        self._sort_field_id = None
        self._sort_field_sub_id = None
        self._sort_field_sub_prop = None
        self._sort_direction = SortDirection.ASC
        self._limit = DEFAULT_LIMIT
        return self

    # -- conditions ----------------------------------------------------------

    def where(self, field_id: str, condition: Condition) -> FilterBuilder:
        """Add a condition to the current query."""
        statement = self._statements[-1]
        statement[-1] = statement[-1].where(field_id, condition)
        return self

    # -- grouping ------------------------------------------------------------

    def or_(self) -> FilterBuilder:
        """Start a new alternative query inside the current statement."""
        self._statements[-1].append(Query())
        return self

    def and_(self) -> FilterBuilder:
        """Start a new statement, AND-ed with the previous ones."""
        self._statements.append([Query()])
        return self

    # -- sort / size ---------------------------------------------------------

    def set_sort_field_id(
        self,
        field_id: str | None,
        sub_id: str | None = None,
        sub_prop: str | None = None,
    ) -> FilterBuilder:
        """
        Sort by *field_id*.

        With *sub_id* and *sub_prop*, sort by ``sub_prop`` of the element of
        the nested collection *field_id* whose ``id`` equals *sub_id*.
        """
        self._sort_field_id = field_id
        self._sort_field_sub_id = sub_id
        self._sort_field_sub_prop = sub_prop
        return self

    def set_sort_direction(self, direction: SortDirection | str) -> FilterBuilder:
        self._sort_direction = to_direction(direction)
        return self

    def set_limit(self, limit: int) -> FilterBuilder:
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
            raise ValidationError(
                f"Limit must be a positive integer, got {limit!r}", path="limit"
            )
        self._limit = limit
        return self

    # -- build ---------------------------------------------------------------

    def build(self) -> Filter:
        """Return an immutable :class:`Filter` snapshot of the builder."""
        return Filter(
            self._statements,
            sort_field_id=self._sort_field_id,
            sort_field_sub_id=self._sort_field_sub_id,
            sort_field_sub_prop=self._sort_field_sub_prop,
            sort_direction=self._sort_direction,
            limit=self._limit,
        )
