from __future__ import annotations

import datetime
from collections.abc import Callable, Iterable, Iterator
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import OperatorNotFoundError, ValidationError
from .operators import COMBINATOR_OPERATORS, FilterOperator, SortDirection
from .utils import to_utc_datetime, utc_now

R = TypeVar("R")

DEFAULT_LIMIT = 10

# Pre-compute valid operator values for validation
_VALID_OPERATORS: list[str] = [m.value for m in FilterOperator]


def to_operator(op: FilterOperator | str) -> FilterOperator:
    """Normalise *op* to a :class:`FilterOperator` (case-insensitive)."""
    if isinstance(op, FilterOperator):
        return op
    try:
        return FilterOperator(str(op).upper())
    except ValueError:
        raise OperatorNotFoundError(str(op), _VALID_OPERATORS) from None


def to_direction(direction: SortDirection | str) -> SortDirection:
    if isinstance(direction, SortDirection):
        return direction
    try:
        return SortDirection(str(direction).upper())
    except ValueError:
        raise ValidationError(
            f"Sort direction must be ASC or DESC, got {direction!r}",
            path="sort.direction",
        ) from None


class DaysAgo(BaseModel):
    """
    Relative date: *days_ago* whole days before now, at day granularity.

    Serialises as ``{"daysAgo": n}``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    days_ago: int = Field(ge=0, alias="daysAgo")

    def floor(self, now: datetime.datetime | None = None) -> datetime.datetime:
        """Start (UTC) of the day *days_ago* days before *now*."""
        current = to_utc_datetime(now) or utc_now()
        day = (current - datetime.timedelta(days=self.days_ago)).date()
        return datetime.datetime.combine(
            day, datetime.time.min, tzinfo=datetime.timezone.utc
        )

    def ceil(self, now: datetime.datetime | None = None) -> datetime.datetime:
        """Last millisecond (UTC) of the day *days_ago* days before *now*."""
        return (
            self.floor(now)
            + datetime.timedelta(days=1)
            - datetime.timedelta(milliseconds=1)
        )

    def to_dict(self) -> dict[str, Any]:
        return {"daysAgo": self.days_ago}


def _value_to_dict(value: Any) -> Any:
    if isinstance(value, Condition | Query | DaysAgo):
        return value.to_dict()
    if isinstance(value, tuple | list):
        return [_value_to_dict(v) for v in value]
    if isinstance(value, datetime.date):
        return value.isoformat()
    return value


class Condition:
    """
    A single operator applied to one field.

    The shape of ``value`` is determined by ``op``:

    - ``EQ`` / ``NEQ`` / ``PREFIX``: a scalar, or ``None`` for presence checks
    - ``LT`` / ``LTE`` / ``GT`` / ``GTE``: a scalar or :class:`DaysAgo`
    - ``ALL`` / ``ANY``: a tuple of sub-conditions on the same field
    - ``FIND`` / ``NFIND``: a :class:`Query` over nested elements
    """

    __slots__ = ("op", "value")

    def __init__(self, op: FilterOperator | str, value: Any = None) -> None:
        self.op = to_operator(op)
        if self.op in COMBINATOR_OPERATORS:
            value = tuple(value or ())
        self.value = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Condition):
            return NotImplemented
        return self.op == other.op and self.value == other.value

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Condition({self.op.value}, {self.value!r})"

    def to_dict(self) -> dict[str, Any]:
        return {"op": self.op.value, "value": _value_to_dict(self.value)}


class Query:
    """
    Immutable, ordered collection of ``(field_id, condition)`` pairs.

    All pairs must hold (AND).  The same field may appear more than once.
    """

    __slots__ = ("_field_conditions",)

    def __init__(self, field_conditions: Iterable[tuple[str, Condition]] = ()) -> None:
        self._field_conditions: tuple[tuple[str, Condition], ...] = tuple(
            field_conditions
        )

    @property
    def field_conditions(self) -> tuple[tuple[str, Condition], ...]:
        return self._field_conditions

    def where(self, field_id: str, condition: Condition) -> Query:
        """Return a copy with one more condition."""
        return Query((*self._field_conditions, (field_id, condition)))

    def map_field_conditions(self, fn: Callable[[str, Condition], R]) -> list[R]:
        """Apply ``fn(field_id, condition)`` to every pair."""
        return [fn(field_id, condition) for field_id, condition in self._field_conditions]

    def __iter__(self) -> Iterator[tuple[str, Condition]]:
        return iter(self._field_conditions)

    def __len__(self) -> int:
        return len(self._field_conditions)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Query):
            return NotImplemented
        return self._field_conditions == other._field_conditions

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Query({list(self._field_conditions)!r})"

    def to_dict(self) -> list[dict[str, Any]]:
        return [
            {"field": field_id, **condition.to_dict()}
            for field_id, condition in self._field_conditions
        ]


Statement = tuple[Query, ...]


class Filter:
    """
    Top-level filter: statements, sort and result size.

    ``statements`` are AND-ed together; the queries inside one statement
    are OR-ed.  Build instances with :class:`~filterkit_filters.FilterBuilder`
    or :class:`~filterkit_filters.FilterFactory`.
    """

    def __init__(
        self,
        statements: Iterable[Iterable[Query]] = (),
        *,
        sort_field_id: str | None = None,
        sort_field_sub_id: str | None = None,
        sort_field_sub_prop: str | None = None,
        sort_direction: SortDirection | str = SortDirection.ASC,
        limit: int = DEFAULT_LIMIT,
    ) -> None:
        self._statements: tuple[Statement, ...] = tuple(
            tuple(statement) for statement in statements
        )
        self._sort_field_id = sort_field_id
        self._sort_field_sub_id = sort_field_sub_id
        self._sort_field_sub_prop = sort_field_sub_prop
        self._sort_direction = to_direction(sort_direction)
        self._limit = limit

    # -- accessors -----------------------------------------------------------

    @property
    def statements(self) -> tuple[Statement, ...]:
        return self._statements

    @property
    def sort_field_id(self) -> str | None:
        return self._sort_field_id

    @property
    def sort_field_sub_id(self) -> str | None:
        return self._sort_field_sub_id

    @property
    def sort_field_sub_prop(self) -> str | None:
        return self._sort_field_sub_prop

    @property
    def sort_direction(self) -> SortDirection:
        return self._sort_direction

    @property
    def limit(self) -> int:
        return self._limit

    # -- copying -------------------------------------------------------------

    def _params(self) -> dict[str, Any]:
        return {
            "statements": self._statements,
            "sort_field_id": self._sort_field_id,
            "sort_field_sub_id": self._sort_field_sub_id,
            "sort_field_sub_prop": self._sort_field_sub_prop,
            "sort_direction": self._sort_direction,
            "limit": self._limit,
        }

    def replace(self, **changes: Any) -> Filter:
        """Return a copy with the given constructor arguments replaced."""
        params = self._params()
        unknown = set(changes) - set(params)
        if unknown:
            raise TypeError(f"Unknown Filter attribute(s): {', '.join(sorted(unknown))}")
        params.update(changes)
        return Filter(**params)

    # -- dunder / serialisation ---------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Filter):
            return NotImplemented
        return self._params() == other._params()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Filter(statements={len(self._statements)}, "
            f"sort={self._sort_field_id!r} {self._sort_direction.value}, "
            f"limit={self._limit})"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "statements": [
                [query.to_dict() for query in statement]
                for statement in self._statements
            ],
            "sort": {
                "field_id": self._sort_field_id,
                "sub_id": self._sort_field_sub_id,
                "sub_prop": self._sort_field_sub_prop,
                "direction": self._sort_direction.value,
            },
            "limit": self._limit,
        }
