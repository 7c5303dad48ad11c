"""Operator compilers for Elasticsearch bool-query fragments.

Each compiler has the signature
``(mapped_field, condition, ctx) -> Fragment | None`` and returns ``None``
for operators it does not handle.
"""

from .nested import compile_nested
from .range import compile_range, range_value
from .set import compile_set
from .standard import compile_standard
from .string import compile_string

DEFAULT_COMPILERS = (
    compile_standard,
    compile_range,
    compile_string,
    compile_set,
    compile_nested,
)

__all__ = [
    "DEFAULT_COMPILERS",
    "compile_nested",
    "compile_range",
    "compile_set",
    "compile_standard",
    "compile_string",
    "range_value",
]
