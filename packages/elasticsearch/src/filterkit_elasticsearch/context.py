"""Per-translation state handed to operator compilers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .exceptions import QueryDepthExceededError

if TYPE_CHECKING:
    from filterkit_filters.ast import Condition, Query

    from .config import ElasticQueryConfig
    from .merge import Fragment
    from .query_builder import ElasticQueryBuilder


@dataclass(frozen=True)
class CompileContext:
    """
    Gives compilers access to the builder for recursive translation.

    ``depth`` counts how many ALL / ANY / FIND / NFIND levels enclose the
    condition being compiled.
    """

    builder: ElasticQueryBuilder
    depth: int = 0

    @property
    def config(self) -> ElasticQueryConfig:
        return self.builder.config

    def descend(self) -> CompileContext:
        depth = self.depth + 1
        if depth > self.config.max_depth:
            raise QueryDepthExceededError(depth, self.config.max_depth)
        return CompileContext(self.builder, depth)

    def compile_mapped(self, mapped_field: str, condition: Condition) -> Fragment:
        """Compile a sub-condition against an already-mapped field."""
        return self.builder.compile_condition(mapped_field, condition, self.descend())

    def build_nested_query(self, query: Query, path: str) -> dict[str, Any]:
        """Build ``{"bool": ...}`` for *query* with fields under *path*."""
        return self.builder.build_query(query, prefix=path, ctx=self.descend())
