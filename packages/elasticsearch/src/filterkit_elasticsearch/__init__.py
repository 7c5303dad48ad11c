"""Elasticsearch bool-query translation for filterkit filters."""

from .config import ElasticQueryConfig, FieldMapFn, NestedSortStyle, identity_field_map
from .context import CompileContext
from .exceptions import (
    ElasticQueryError,
    QueryDepthExceededError,
    UnsupportedOperatorError,
)
from .field_mapping import FieldMapping, map_field
from .merge import Fragment, deep_merge, merge_fragments
from .operators import DEFAULT_COMPILERS
from .query_builder import Compiler, ElasticQueryBuilder, to_elastic
from .serialization import to_search_value

__all__ = [
    "DEFAULT_COMPILERS",
    "CompileContext",
    "Compiler",
    "ElasticQueryBuilder",
    "ElasticQueryConfig",
    "ElasticQueryError",
    "FieldMapFn",
    "FieldMapping",
    "Fragment",
    "NestedSortStyle",
    "QueryDepthExceededError",
    "UnsupportedOperatorError",
    "deep_merge",
    "identity_field_map",
    "map_field",
    "merge_fragments",
    "to_elastic",
    "to_search_value",
]
