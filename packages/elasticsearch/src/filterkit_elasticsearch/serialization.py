"""Python values → JSON-safe query DSL values (datetime, UUID, Decimal, Enum)."""

from __future__ import annotations

import datetime
from decimal import Decimal
from enum import Enum
from typing import Any
from uuid import UUID


def to_search_value(value: Any) -> Any:
    """Convert Python types to values the query DSL accepts in JSON."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime.date | datetime.time):
        return value.isoformat()
    if isinstance(value, UUID):
        return str(value)
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, dict):
        return {k: to_search_value(v) for k, v in value.items()}
    if isinstance(value, list | tuple):
        return [to_search_value(v) for v in value]
    return value
