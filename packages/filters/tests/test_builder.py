"""Tests for FilterBuilder."""

from __future__ import annotations

import pytest

from filterkit_filters import FilterBuilder, Query, SortDirection
from filterkit_filters.conditions import eq, neq, prefix, where
from filterkit_filters.exceptions import ValidationError


def test_fresh_builder_has_one_empty_query():
    flt = FilterBuilder().build()
    assert flt.statements == ((Query(),),)
    assert flt.limit == 10
    assert flt.sort_direction is SortDirection.ASC
    assert flt.sort_field_id is None


def test_where_adds_to_current_query():
    flt = (
        FilterBuilder()
        .where("firstName", prefix("j"))
        .where("assignedTo", neq(None))
        .build()
    )
    assert flt.statements == (
        (where("firstName", prefix("j")).where("assignedTo", neq(None)),),
    )


def test_or_and_grouping():
    flt = (
        FilterBuilder()
        .where("firstName", prefix("j"))
        .and_()
        .where("lists.id", eq("list-1"))
        .or_()
        .where("vacancies.id", eq("vacancy1"))
        .build()
    )
    assert flt.statements == (
        (where("firstName", prefix("j")),),
        (where("lists.id", eq("list-1")), where("vacancies.id", eq("vacancy1"))),
    )


def test_sort_settings():
    flt = (
        FilterBuilder()
        .set_sort_field_id("customFields", "custom1", "value")
        .set_sort_direction("desc")
        .set_limit(50)
        .build()
    )
    assert flt.sort_field_id == "customFields"
    assert flt.sort_field_sub_id == "custom1"
    assert flt.sort_field_sub_prop == "value"
    assert flt.sort_direction is SortDirection.DESC
    assert flt.limit == 50


@pytest.mark.parametrize("limit", [0, -1, 2.5, True, "10"])
def test_set_limit_rejects_invalid(limit):
    with pytest.raises(ValidationError, match="positive integer") as exc_info:
        FilterBuilder().set_limit(limit)
    assert exc_info.value.path == "limit"


def test_set_sort_direction_rejects_invalid():
    with pytest.raises(ValidationError):
        FilterBuilder().set_sort_direction("up")


def test_build_is_a_snapshot():
    builder = FilterBuilder().where("a", eq(1))
    first = builder.build()
    builder.where("b", eq(2)).or_()
    assert first.statements == ((where("a", eq(1)),),)
    assert len(builder.build().statements[0]) == 2


def test_reset():
    builder = (
        FilterBuilder()
        .where("a", eq(1))
        .and_()
        .set_sort_field_id("createdAt")
        .set_limit(3)
    )
    assert builder.reset() is builder
    assert builder.build() == FilterBuilder().build()
