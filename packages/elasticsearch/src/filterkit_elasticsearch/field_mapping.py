"""Logical → indexed field path mapping."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from .config import FieldMapFn

logger = logging.getLogger(__name__)


def map_field(field_map: FieldMapFn, field_id: str) -> str:
    """Apply *field_map*, falling back to *field_id* on a falsy result."""
    mapped = field_map(field_id)
    if not mapped:
        logger.debug("Field map returned %r for %r; using it unmapped", mapped, field_id)
        return field_id
    return mapped


class FieldMapping:
    """
    Field mapper built from explicit renames and keyword sub-fields.

    Text fields indexed with a ``keyword`` sub-field must be filtered and
    sorted on that sub-field::

        mapping = FieldMapping(
            {"owner": "createdBy.id"},
            keyword_fields={"firstName", "lastName", "primaryEmail.value"},
        )
        mapping("lastName")   # "lastName.keyword"
        mapping("owner")      # "createdBy.id"
        mapping("createdAt")  # "createdAt"
    """

    def __init__(
        self,
        mappings: Mapping[str, str] | None = None,
        *,
        keyword_fields: Iterable[str] = (),
        keyword_suffix: str = "keyword",
    ) -> None:
        self.mappings = dict(mappings or {})
        self.keyword_fields = frozenset(keyword_fields)
        self.keyword_suffix = keyword_suffix

    def __call__(self, field_id: str) -> str:
        if field_id in self.mappings:
            return self.mappings[field_id]
        if field_id in self.keyword_fields:
            return f"{field_id}.{self.keyword_suffix}"
        return field_id
