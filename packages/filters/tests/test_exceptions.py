"""Tests for exceptions module."""

from __future__ import annotations

from filterkit_filters.exceptions import (
    FilterError,
    OperatorNotFoundError,
    ValidationError,
)

VALID = ["EQ", "NEQ", "LT", "LTE", "GT", "GTE", "ALL", "ANY", "PREFIX", "FIND", "NFIND"]


def test_operator_not_found_fuzzy_suggestion():
    err = OperatorNotFoundError("nfnd", VALID)
    assert "nfnd" in str(err)
    assert "NFIND" in err.suggestions


def test_operator_not_found_no_matches():
    err = OperatorNotFoundError("zzzzz", VALID)
    d = err.to_dict()
    assert d["error"] == "OPERATOR_NOT_FOUND"
    assert d["suggestions"] == []
    assert "Did you mean" not in str(err)


def test_operator_not_found_lists_valid_operators():
    err = OperatorNotFoundError("x", ["GT", "EQ"])
    assert str(err).endswith("Valid operators: EQ, GT")
    assert err.to_dict()["valid_operators"] == ["EQ", "GT"]


def test_validation_error_to_dict():
    err = ValidationError("bad limit", path="limit")
    assert err.to_dict() == {
        "error": "VALIDATION_ERROR",
        "message": "bad limit",
        "path": "limit",
    }


def test_hierarchy():
    assert issubclass(ValidationError, FilterError)
    assert issubclass(OperatorNotFoundError, FilterError)


def test_base_to_dict():
    assert FilterError("boom").to_dict() == {"error": "FilterError", "message": "boom"}


def test_operator_not_found_without_path():
    err = OperatorNotFoundError("EQQ", VALID)
    assert str(err).startswith("Unknown filter operator 'EQQ'. Did you mean: EQ")
    assert err.to_dict()["path"] is None
