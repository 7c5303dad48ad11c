"""Shared fixtures for filters tests."""

from __future__ import annotations

import datetime

import pytest

from filterkit_filters.operators_memory import build_default_registry

NOW = datetime.datetime(2024, 6, 15, 12, 0, tzinfo=datetime.timezone.utc)


def _at(day: int, hour: int = 9) -> datetime.datetime:
    return datetime.datetime(2024, 6, day, hour, 0, tzinfo=datetime.timezone.utc)


@pytest.fixture
def now() -> datetime.datetime:
    return NOW


@pytest.fixture
def registry():
    """Default in-memory operator registry with a pinned clock."""
    return build_default_registry(clock=lambda: NOW)


@pytest.fixture
def contacts() -> list[dict]:
    return [
        {
            "id": "c1",
            "firstName": "John",
            "lastName": "Doyle",
            "createdAt": _at(14),
            "assignedTo": "u1",
            "tags": ["vip", "lead"],
            "customFields": [
                {"id": "custom1", "value": "b"},
                {"id": "custom2", "value": "z"},
            ],
            "lists": [{"id": "list-1"}],
        },
        {
            "id": "c2",
            "firstName": "Jane",
            "lastName": "Smith",
            "createdAt": _at(5),
            "assignedTo": None,
            "tags": [],
            "customFields": [{"id": "custom1", "value": "a"}],
            "lists": [{"id": "list-2"}],
        },
        {
            "id": "c3",
            "firstName": "jack",
            "createdAt": _at(12, hour=8),
            "tags": ["lead"],
            "customFields": [],
            "lists": [],
        },
        {
            "id": "c4",
            "firstName": "Mary",
            "lastName": "Doyle",
            "createdAt": datetime.datetime(2024, 5, 16, 9, 0, tzinfo=datetime.timezone.utc),
            "assignedTo": "u2",
            "customFields": [{"id": "custom2", "value": "y"}],
            "lists": [{"id": "list-1"}, {"id": "list-2"}],
        },
        {
            "id": "c5",
            "firstName": "Jo",
            "lastName": "Adams",
            "createdAt": _at(14),
            "customFields": [{"id": "custom1", "value": "b"}],
            "lists": [{"id": "list-3"}],
        },
        {
            "id": "c6",
            "firstName": "Zed",
            "customFields": [{"id": "custom1"}],
        },
    ]
