"""
Shared utility functions for the filters package.

These are pure-Python helpers with no infrastructure dependencies.
"""

from __future__ import annotations

import datetime
from typing import Any

# ---------------------------------------------------------------------------
# Field resolution
# ---------------------------------------------------------------------------


def resolve_field(obj: Any, field_path: str) -> Any:
    """
    Resolve a dot-separated field path on *obj*.

    Supports dict keys and attributes (``address.city``), and
    implicit list traversal (``items.name`` where ``items`` is a
    list returns ``[item.name for item in items]``).
    """
    parts = field_path.split(".")
    for index, part in enumerate(parts):
        if obj is None:
            return None
        if isinstance(obj, list | tuple):
            # Implicit list traversal: map the remaining path
            rest = ".".join(parts[index:])
            return [resolve_field(item, rest) for item in obj]
        obj = obj.get(part) if isinstance(obj, dict) else getattr(obj, part, None)
    return obj


def field_values(value: Any) -> list[Any]:
    """
    Flatten a resolved field value into its list of non-null values.

    A search index treats every field as multi-valued: ``None`` and
    empty lists mean the field is absent.
    """
    if value is None:
        return []
    if isinstance(value, list | tuple):
        flat: list[Any] = []
        for item in value:
            flat.extend(field_values(item))
        return flat
    return [value]


# ---------------------------------------------------------------------------
# Temporal coercion
# ---------------------------------------------------------------------------


def _is_temporal(value: Any) -> bool:
    return isinstance(value, datetime.date)


def to_utc_datetime(value: Any) -> datetime.datetime | None:
    """
    Coerce *value* to an aware UTC ``datetime``.

    Naive datetimes are assumed to be UTC, dates become midnight and
    ISO-8601 strings are parsed.  Returns ``None`` when *value* is not
    temporal.
    """
    if isinstance(value, datetime.datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=datetime.timezone.utc)
        return value.astimezone(datetime.timezone.utc)
    if isinstance(value, datetime.date):
        return datetime.datetime.combine(
            value, datetime.time.min, tzinfo=datetime.timezone.utc
        )
    if isinstance(value, str):
        try:
            parsed = datetime.datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return None
        return to_utc_datetime(parsed)
    return None


def parse_iso_temporal(text: str) -> datetime.date | None:
    """
    Read *text* back as the date or datetime whose ``isoformat()`` it is.

    Only canonical ISO-8601 text is accepted, so strings that merely look
    like dates (``"20240601"``, ``"2024-06-01Z"``) stay strings.
    """
    parsers: tuple[Any, ...] = (datetime.datetime.fromisoformat, datetime.date.fromisoformat)
    for parser in parsers:
        try:
            parsed = parser(text)
        except ValueError:
            continue
        if parsed.isoformat() == text:
            return parsed  # type: ignore[no-any-return]
    return None


def comparable_pair(value: Any, bound: Any) -> tuple[Any, Any] | None:
    """
    Return ``(value, bound)`` in a mutually comparable form.

    When either side is a date or datetime, both sides are coerced to
    UTC datetimes.  Returns ``None`` when the pair cannot be compared.
    """
    if _is_temporal(value) or _is_temporal(bound):
        left = to_utc_datetime(value)
        right = to_utc_datetime(bound)
        if left is None or right is None:
            return None
        return left, right
    return value, bound


def utc_now() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)
