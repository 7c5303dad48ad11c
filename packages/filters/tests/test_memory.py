"""Tests for applying filters to in-memory collections."""

from __future__ import annotations

import datetime

import pytest

from filterkit_filters import (
    Filter,
    FilterBuilder,
    apply_filter,
    matches_filter,
    sort_items,
)
from filterkit_filters.conditions import (
    any_,
    days_ago,
    eq,
    find,
    gte,
    lt,
    neq,
    nfind,
    prefix,
    where,
)


def _ids(items):
    return [item["id"] for item in items]


def _matching(flt, contacts, registry):
    return {c["id"] for c in contacts if matches_filter(flt, c, registry=registry)}


def _single(field_id, condition) -> Filter:
    return FilterBuilder().where(field_id, condition).build()


# -- matching ----------------------------------------------------------------


def test_statements_or_within_and_across(contacts, registry):
    flt = (
        FilterBuilder()
        .where("firstName", prefix("J"))
        .and_()
        .where("lastName", eq("Doyle"))
        .or_()
        .where("lastName", eq(None))
        .build()
    )
    assert _matching(flt, contacts, registry) == {"c1"}


def test_statement_with_no_queries_matches_nothing(contacts, registry):
    assert _matching(Filter([[]]), contacts, registry) == set()


def test_no_statements_matches_everything(contacts, registry):
    assert len(_matching(Filter(), contacts, registry)) == len(contacts)


@pytest.mark.parametrize(
    ("field_id", "value"),
    [("lastName", None), ("assignedTo", None), ("tags", None)],
)
def test_eq_null_and_neq_null_partition(contacts, registry, field_id, value):
    missing = _matching(_single(field_id, eq(value)), contacts, registry)
    present = _matching(_single(field_id, neq(value)), contacts, registry)
    assert missing.isdisjoint(present)
    assert missing | present == {c["id"] for c in contacts}


def test_eq_null_matches_missing_values(contacts, registry):
    assert _matching(_single("lastName", eq(None)), contacts, registry) == {"c3", "c6"}
    assert _matching(_single("tags", eq(None)), contacts, registry) == {
        "c2",
        "c4",
        "c5",
        "c6",
    }


def test_lt_and_gte_partition_documents_with_a_value(contacts, registry):
    below = _matching(_single("createdAt", lt(days_ago(3))), contacts, registry)
    above = _matching(_single("createdAt", gte(days_ago(3))), contacts, registry)
    assert below == {"c2", "c4"}
    assert above == {"c1", "c3", "c5"}
    # c6 has no createdAt and matches neither side
    assert "c6" not in below | above


def test_find_and_nfind_are_complementary(contacts, registry):
    query = where("id", eq("list-1"))
    found = _matching(_single("lists", find(query)), contacts, registry)
    not_found = _matching(_single("lists", nfind(query)), contacts, registry)
    assert found == {"c1", "c4"}
    assert not_found == {"c2", "c3", "c5", "c6"}


def test_any_with_missing(contacts, registry):
    flt = _single("lastName", any_([eq("Doyle"), eq(None)]))
    assert _matching(flt, contacts, registry) == {"c1", "c3", "c4", "c6"}


# -- sorting -----------------------------------------------------------------


@pytest.mark.parametrize(
    ("direction", "expected"),
    [
        ("ASC", ["c4", "c2", "c3", "c1", "c5", "c6"]),
        ("DESC", ["c5", "c1", "c3", "c2", "c4", "c6"]),
    ],
)
def test_sort_by_date_missing_last(contacts, direction, expected):
    flt = Filter(sort_field_id="createdAt", sort_direction=direction)
    assert _ids(sort_items(flt, contacts)) == expected


def test_sort_by_string(contacts):
    flt = Filter(sort_field_id="lastName")
    assert _ids(sort_items(flt, contacts)) == ["c5", "c1", "c4", "c2", "c3", "c6"]


@pytest.mark.parametrize(
    ("direction", "expected"),
    [
        ("ASC", ["c2", "c1", "c5", "c3", "c4", "c6"]),
        ("DESC", ["c5", "c1", "c2", "c6", "c4", "c3"]),
    ],
)
def test_nested_sort(contacts, direction, expected):
    flt = Filter(
        sort_field_id="customFields",
        sort_field_sub_id="custom1",
        sort_field_sub_prop="value",
        sort_direction=direction,
    )
    assert _ids(sort_items(flt, contacts)) == expected


@pytest.mark.parametrize(
    ("sort_field_id", "direction", "expected"),
    [
        (None, "ASC", ["c1", "c2", "c3", "c4", "c5", "c6"]),
        ("id", "DESC", ["c6", "c5", "c4", "c3", "c2", "c1"]),
    ],
)
def test_sort_by_identifier(contacts, sort_field_id, direction, expected):
    flt = Filter(sort_field_id=sort_field_id, sort_direction=direction)
    assert _ids(sort_items(flt, contacts)) == expected


def test_multi_valued_sort_uses_min_ascending_and_max_descending():
    items = [{"id": "a", "n": [1, 9]}, {"id": "b", "n": 5}]
    assert _ids(sort_items(Filter(sort_field_id="n"), items)) == ["a", "b"]
    assert _ids(sort_items(Filter(sort_field_id="n", sort_direction="DESC"), items)) == [
        "a",
        "b",
    ]


def test_sort_mixes_naive_and_aware_datetimes():
    items = [
        {"id": "a", "at": datetime.datetime(2024, 1, 2)},
        {"id": "b", "at": datetime.datetime(2024, 1, 1, tzinfo=datetime.timezone.utc)},
        {"id": "c", "at": datetime.date(2024, 1, 3)},
    ]
    assert _ids(sort_items(Filter(sort_field_id="at"), items)) == ["b", "a", "c"]


# -- apply_filter ------------------------------------------------------------


def test_apply_filter(contacts, registry):
    flt = (
        FilterBuilder()
        .where("firstName", prefix("J"))
        .set_sort_field_id("createdAt")
        .set_sort_direction("DESC")
        .set_limit(2)
        .build()
    )
    assert _ids(apply_filter(flt, contacts, registry=registry)) == ["c5", "c1"]


def test_apply_filter_custom_id_field(registry):
    items = [{"key": 2, "n": 1}, {"key": 1, "n": 1}]
    flt = Filter(sort_field_id="n")
    result = apply_filter(flt, items, registry=registry, id_field="key")
    assert [item["key"] for item in result] == [1, 2]
