from pytest_archon import archrule


def test_filters_independence() -> None:
    """
    The filter model is the foundation: it must not know about any
    query backend.
    """
    (
        archrule("filters_are_independent")
        .match("filterkit_filters*")
        .should_not_import("filterkit_elasticsearch*")
        .check("filterkit_filters")
    )


def test_filter_model_isolation() -> None:
    """
    The AST, builder and factory must not depend on in-memory evaluation
    or pagination.
    """
    (
        archrule("filter_model_isolation")
        .match("filterkit_filters.ast")
        .match("filterkit_filters.builder")
        .match("filterkit_filters.factory")
        .match("filterkit_filters.conditions")
        .should_not_import("filterkit_filters.evaluator")
        .should_not_import("filterkit_filters.memory")
        .should_not_import("filterkit_filters.operators_memory*")
        .should_not_import("filterkit_filters.pagination")
        .check("filterkit_filters", only_direct_imports=True)
    )


def test_operator_compilers_do_not_import_the_builder() -> None:
    """
    Operator compilers recurse through the compile context only.
    """
    (
        archrule("compilers_use_context")
        .match("filterkit_elasticsearch.operators*")
        .should_not_import("filterkit_elasticsearch.query_builder")
        .check("filterkit_elasticsearch", only_direct_imports=True)
    )


def test_no_search_client_dependency() -> None:
    """
    Translation is pure: no Elasticsearch client may be imported.
    """
    (
        archrule("no_search_client")
        .match("filterkit_elasticsearch*")
        .should_not_import("elasticsearch*")
        .should_not_import("elastic_transport*")
        .check("filterkit_elasticsearch")
    )
