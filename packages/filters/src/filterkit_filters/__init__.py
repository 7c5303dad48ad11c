from .ast import DEFAULT_LIMIT, Condition, DaysAgo, Filter, Query, Statement
from .builder import FilterBuilder
from .conditions import (
    all_,
    any_,
    days_ago,
    eq,
    find,
    gt,
    gte,
    lt,
    lte,
    neq,
    nfind,
    prefix,
    where,
)
from .evaluator import MemoryOperator, MemoryOperatorRegistry
from .exceptions import FilterError, OperatorNotFoundError, ValidationError
from .factory import FilterFactory
from .memory import apply_filter, matches_filter, sort_items
from .operators import RANGE_OPERATORS, FilterOperator, SortDirection
from .operators_memory import build_default_registry
from .pagination import create_paginated_filter

__all__ = [
    # Core types
    "FilterOperator",
    "SortDirection",
    "RANGE_OPERATORS",
    "Condition",
    "DaysAgo",
    "Query",
    "Statement",
    "Filter",
    "DEFAULT_LIMIT",
    # Builder / factory
    "FilterBuilder",
    "FilterFactory",
    # Condition factories
    "eq",
    "neq",
    "lt",
    "lte",
    "gt",
    "gte",
    "all_",
    "any_",
    "prefix",
    "find",
    "nfind",
    "where",
    "days_ago",
    # In-memory evaluation
    "MemoryOperator",
    "MemoryOperatorRegistry",
    "build_default_registry",
    "apply_filter",
    "matches_filter",
    "sort_items",
    # Pagination
    "create_paginated_filter",
    # Exceptions
    "FilterError",
    "ValidationError",
    "OperatorNotFoundError",
]
