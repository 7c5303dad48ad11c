from enum import Enum


class FilterOperator(str, Enum):
    """Supported condition operators."""

    # Equality (``None`` tests field presence)
    EQ = "EQ"
    NEQ = "NEQ"

    # Range
    LT = "LT"
    LTE = "LTE"
    GT = "GT"
    GTE = "GTE"

    # Combinators over sub-conditions on the same field
    ALL = "ALL"
    ANY = "ANY"

    # String
    PREFIX = "PREFIX"

    # Nested collection membership
    FIND = "FIND"
    NFIND = "NFIND"


class SortDirection(str, Enum):
    """Sort direction of a filter."""

    ASC = "ASC"
    DESC = "DESC"


RANGE_OPERATORS: frozenset[FilterOperator] = frozenset(
    {FilterOperator.LT, FilterOperator.LTE, FilterOperator.GT, FilterOperator.GTE}
)
COMBINATOR_OPERATORS: frozenset[FilterOperator] = frozenset(
    {FilterOperator.ALL, FilterOperator.ANY}
)
NESTED_OPERATORS: frozenset[FilterOperator] = frozenset(
    {FilterOperator.FIND, FilterOperator.NFIND}
)
