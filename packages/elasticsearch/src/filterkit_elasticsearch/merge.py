"""
Merge algebra for bool-query fragments.

A fragment is ``{"filter": [...], "must_not": [...]}`` with either key
optional.  Merging concatenates same-key lists and recursively merges
same-key dicts, so folding fragments is an AND of their clauses.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from copy import deepcopy
from functools import reduce
from typing import Any

Fragment = dict[str, list[dict[str, Any]]]


def _merge_values(left: Any, right: Any) -> Any:
    if isinstance(left, Mapping) and isinstance(right, Mapping):
        return deep_merge(left, right)
    if isinstance(left, list) and isinstance(right, list):
        return left + deepcopy(right)
    return deepcopy(right)


def deep_merge(left: Mapping[str, Any], right: Mapping[str, Any]) -> dict[str, Any]:
    """
    Merge *right* into a copy of *left*.

    - Dicts are merged recursively.
    - Lists are concatenated (``left`` first).
    - Any other value is overwritten by ``right``.

    Neither input is mutated.
    """
    result = deepcopy(dict(left))
    for key, value in right.items():
        if key in result:
            result[key] = _merge_values(result[key], value)
        else:
            result[key] = deepcopy(value)
    return result


def merge_fragments(fragments: Iterable[Mapping[str, Any]]) -> dict[str, Any]:
    """Fold *fragments* with :func:`deep_merge`, starting from ``{}``."""
    return reduce(deep_merge, fragments, {})
