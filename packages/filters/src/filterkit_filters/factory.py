"""
Factory for creating filters from dictionary / JSON representations.

The dict shape is the one produced by :meth:`Filter.to_dict`::

    {
        "statements": [                    # AND
            [                              #   OR
                [                          #     AND (one query)
                    {"field": "firstName", "op": "PREFIX", "value": "j"},
                    {"field": "lists", "op": "FIND",
                     "value": [{"field": "id", "op": "EQ", "value": "list-1"}]},
                    {"field": "createdAt", "op": "ANY",
                     "value": [{"op": "GT", "value": {"daysAgo": 3}}]},
                ]
            ]
        ],
        "sort": {"field_id": "createdAt", "direction": "DESC"},
        "limit": 50,
    }

Dates and datetimes are written as ISO-8601 text; EQ, NEQ and range values
in exactly that form are read back as ``date`` / ``datetime`` objects.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from typing import Any, cast

import pydantic

from .ast import DEFAULT_LIMIT, Condition, DaysAgo, Filter, Query, to_direction, to_operator
from .exceptions import OperatorNotFoundError, ValidationError
from .operators import (
    COMBINATOR_OPERATORS,
    NESTED_OPERATORS,
    RANGE_OPERATORS,
    FilterOperator,
)
from .utils import parse_iso_temporal

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 32

_TOP_LEVEL_KEYS = frozenset({"statements", "sort", "limit"})
_SORT_KEYS = ("field_id", "sub_id", "sub_prop")

# Values written by Filter.to_dict as ISO-8601 text and read back as dates
_TEMPORAL_OPERATORS = RANGE_OPERATORS | {FilterOperator.EQ, FilterOperator.NEQ}


class _Walker:
    """
    Recursive builder shared by ``from_dict`` and ``validate``.

    With ``errors=None`` the first problem raises (fail-fast); otherwise
    problems are appended to ``errors`` and the walk continues.
    """

    def __init__(
        self,
        *,
        allowed_fields: Sequence[str] | None,
        max_depth: int,
        errors: list[str] | None = None,
    ) -> None:
        self.allowed_fields = allowed_fields
        self.max_depth = max_depth
        self.errors = errors

    def fail(self, message: str, path: str) -> None:
        if self.errors is None:
            raise ValidationError(message, path=path)
        self.errors.append(f"{path}: {message}")

    # -- top level -----------------------------------------------------------

    def filter(self, data: Any) -> Filter | None:
        if not isinstance(data, dict):
            self.fail(f"Expected a dict, got {type(data).__name__}", "<root>")
            return None

        unknown = set(data) - _TOP_LEVEL_KEYS
        if unknown:
            logger.warning("Ignoring unknown filter keys: %s", ", ".join(sorted(unknown)))

        raw_statements = data.get("statements", [])
        statements: list[tuple[Query, ...]] = []
        if not isinstance(raw_statements, list):
            self.fail("'statements' must be a list", "statements")
        else:
            for idx, raw in enumerate(raw_statements):
                statement = self.statement(raw, f"statements[{idx}]")
                if statement is not None:
                    statements.append(statement)

        sort = data.get("sort") or {}
        if not isinstance(sort, dict):
            self.fail("'sort' must be an object", "sort")
            sort = {}
        for key in _SORT_KEYS:
            if sort.get(key) is not None and not isinstance(sort[key], str):
                self.fail(f"'{key}' must be a string", f"sort.{key}")

        direction = sort.get("direction") or "ASC"
        try:
            direction = to_direction(direction)
        except ValidationError as exc:
            self.fail(exc.message, "sort.direction")

        limit = data.get("limit", DEFAULT_LIMIT)
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
            self.fail(f"Limit must be a positive integer, got {limit!r}", "limit")

        if self.errors:
            return None
        return Filter(
            statements,
            sort_field_id=sort.get("field_id"),
            sort_field_sub_id=sort.get("sub_id"),
            sort_field_sub_prop=sort.get("sub_prop"),
            sort_direction=direction,
            limit=limit,
        )

    def statement(self, data: Any, path: str) -> tuple[Query, ...] | None:
        if not isinstance(data, list):
            self.fail("A statement must be a list of queries", path)
            return None
        queries = [self.query(raw, f"{path}[{idx}]") for idx, raw in enumerate(data)]
        return tuple(q for q in queries if q is not None)

    # -- queries / conditions -----------------------------------------------

    def query(
        self, data: Any, path: str, *, prefix: str | None = None, depth: int = 0
    ) -> Query | None:
        if not isinstance(data, list):
            self.fail("A query must be a list of field conditions", path)
            return None
        pairs: list[tuple[str, Condition]] = []
        for idx, leaf in enumerate(data):
            leaf_path = f"{path}[{idx}]"
            if not isinstance(leaf, dict):
                self.fail(f"Expected a dict, got {type(leaf).__name__}", leaf_path)
                continue
            field = leaf.get("field")
            if not field or not isinstance(field, str):
                self.fail(f"Field condition missing 'field': {leaf}", leaf_path)
                continue
            full_path = f"{prefix}.{field}" if prefix else field
            if self.allowed_fields is not None and full_path not in self.allowed_fields:
                self.fail(f"Field '{full_path}' is not in the allowed fields list", leaf_path)
                continue
            condition = self.condition(leaf, leaf_path, field_path=full_path, depth=depth)
            if condition is not None:
                pairs.append((field, condition))
        return Query(pairs)

    def condition(
        self, data: Any, path: str, *, field_path: str, depth: int
    ) -> Condition | None:
        if depth > self.max_depth:
            self.fail(f"Condition nesting exceeds maximum depth {self.max_depth}", path)
            return None
        if not isinstance(data, dict):
            self.fail(f"Expected a dict, got {type(data).__name__}", path)
            return None

        raw_op = data.get("op")
        if not raw_op or not isinstance(raw_op, str):
            self.fail("Missing or empty 'op' key", path)
            return None
        try:
            op = to_operator(raw_op)
        except OperatorNotFoundError as exc:
            if self.errors is None:
                raise OperatorNotFoundError(raw_op, exc.valid_operators, path=path) from None
            self.errors.append(f"{path}: unknown operator '{raw_op}'")
            return None

        value = data.get("value")
        value_path = f"{path}.value"

        if op in COMBINATOR_OPERATORS:
            if not isinstance(value, list):
                self.fail(f"'{op.value}' requires a list of conditions", value_path)
                return None
            subs = [
                self.condition(
                    sub, f"{value_path}[{idx}]", field_path=field_path, depth=depth + 1
                )
                for idx, sub in enumerate(value)
            ]
            return Condition(op, tuple(s for s in subs if s is not None))

        if op in NESTED_OPERATORS:
            nested = self.query(value, value_path, prefix=field_path, depth=depth + 1)
            return Condition(op, nested) if nested is not None else None

        if op in RANGE_OPERATORS and isinstance(value, dict):
            try:
                return Condition(op, DaysAgo.model_validate(value))
            except pydantic.ValidationError as exc:
                self.fail(f"Invalid relative date: {exc.errors()[0]['msg']}", value_path)
                return None

        if isinstance(value, dict | list):
            self.fail(f"'{op.value}' requires a scalar value", value_path)
            return None
        if op in _TEMPORAL_OPERATORS and isinstance(value, str):
            value = parse_iso_temporal(value) or value
        return Condition(op, value)


class FilterFactory:
    """
    Factory for creating filters from dictionary / JSON representations.

    Supports:
    - ``from_dict(data)``: parse a dict tree (fail-fast)
    - ``from_json(text)``: parse a JSON string
    - ``validate(data)``: collect every problem without constructing
    """

    @staticmethod
    def from_dict(
        data: dict[str, Any],
        *,
        allowed_fields: Sequence[str] | None = None,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> Filter:
        """
        Create a filter from a dictionary.

        Parameters
        ----------
        data:
            The filter dictionary (see module docstring).
        allowed_fields:
            Optional whitelist of valid field paths.  Fields inside
            ``FIND`` / ``NFIND`` are checked with their full dotted path.
        max_depth:
            Maximum nesting of ALL / ANY / FIND / NFIND conditions.

        Raises:
            ValidationError: On the first structural problem.
            OperatorNotFoundError: On an unknown operator.
        """
        walker = _Walker(allowed_fields=allowed_fields, max_depth=max_depth)
        return cast(Filter, walker.filter(data))

    @staticmethod
    def from_json(
        text: str,
        *,
        allowed_fields: Sequence[str] | None = None,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> Filter:
        """Parse a JSON string and build a filter."""
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ValidationError(f"Invalid JSON: {exc}", path="<root>") from exc

        if not isinstance(data, dict):
            raise ValidationError("Top-level JSON value must be an object", path="<root>")

        return FilterFactory.from_dict(
            data, allowed_fields=allowed_fields, max_depth=max_depth
        )

    @staticmethod
    def validate(
        data: Any,
        *,
        allowed_fields: Sequence[str] | None = None,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> list[str]:
        """
        Validate a filter dict and return a list of error messages.

        Returns an empty list when the structure is valid.
        """
        errors: list[str] = []
        _Walker(
            allowed_fields=allowed_fields, max_depth=max_depth, errors=errors
        ).filter(data)
        return errors
