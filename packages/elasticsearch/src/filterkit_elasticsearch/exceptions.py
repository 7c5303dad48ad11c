"""Elasticsearch translation exceptions."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from filterkit_filters.exceptions import FilterError

if TYPE_CHECKING:
    from filterkit_filters.ast import Condition


class ElasticQueryError(FilterError):
    """Base for errors raised while translating a filter."""


class UnsupportedOperatorError(ElasticQueryError):
    """
    Raised when no compiler handles a condition's operator.

    This is a configuration error: the condition is serialised into the
    message so the offending input can be diagnosed.
    """

    def __init__(self, condition: Condition) -> None:
        self.condition = condition
        self.operator = getattr(condition.op, "value", str(condition.op))
        serialized = json.dumps(condition.to_dict(), default=str)
        super().__init__(f"Cannot generate Elasticsearch query for: {serialized}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "UNSUPPORTED_OPERATOR",
            "operator": self.operator,
            "condition": self.condition.to_dict(),
        }


class QueryDepthExceededError(ElasticQueryError):
    """Raised when nested conditions go deeper than the configured limit."""

    def __init__(self, depth: int, max_depth: int) -> None:
        self.depth = depth
        self.max_depth = max_depth
        super().__init__(
            f"Condition nesting depth {depth} exceeds maximum of {max_depth}"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "QUERY_DEPTH_EXCEEDED",
            "depth": self.depth,
            "max_depth": self.max_depth,
        }
