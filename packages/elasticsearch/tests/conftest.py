"""Shared fixtures for Elasticsearch translation tests."""

from __future__ import annotations

import pytest

from filterkit_elasticsearch import ElasticQueryBuilder, ElasticQueryConfig, FieldMapping


@pytest.fixture
def keyword_map() -> FieldMapping:
    """Text fields that are matched on their ``keyword`` sub-field."""
    return FieldMapping(keyword_fields={"firstName", "lastName", "primaryEmail.value"})


@pytest.fixture
def builder() -> ElasticQueryBuilder:
    return ElasticQueryBuilder()


@pytest.fixture
def mapped_builder(keyword_map) -> ElasticQueryBuilder:
    return ElasticQueryBuilder(ElasticQueryConfig(field_map=keyword_map))
