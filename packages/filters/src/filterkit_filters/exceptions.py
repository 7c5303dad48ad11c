"""
Filter exception hierarchy with fuzzy-match suggestions.

All exceptions inherit from ``FilterError`` and provide
``to_dict()`` for API-friendly error responses.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any


class FilterError(Exception):
    """Root exception for the entire filterkit toolkit."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class ValidationError(FilterError):
    """Filter structure validation failed."""

    def __init__(self, message: str, path: str | None = None) -> None:
        self.message = message
        self.path = path
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "VALIDATION_ERROR",
            "message": self.message,
            "path": self.path,
        }


class OperatorNotFoundError(FilterError):
    """
    A condition names an operator the filter language does not define.

    ``path`` locates the offending condition when it came from a parsed
    filter tree; suggestions are fuzzy matches against the known operators.
    """

    def __init__(
        self, operator: str, valid_operators: list[str], path: str | None = None
    ) -> None:
        self.operator = operator
        self.valid_operators = valid_operators
        self.path = path
        self.suggestions = get_close_matches(
            operator.upper(), valid_operators, n=3, cutoff=0.6
        )

        message = f"Unknown filter operator '{operator}'"
        if path:
            message += f" at {path}"
        message += "."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        message += f" Valid operators: {', '.join(sorted(valid_operators))}"
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "OPERATOR_NOT_FOUND",
            "operator": self.operator,
            "path": self.path,
            "suggestions": self.suggestions,
            "valid_operators": sorted(self.valid_operators),
        }
