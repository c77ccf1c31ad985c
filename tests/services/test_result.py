"""Tests for ServiceResult and ServiceError."""

import json

import pytest

from gqlnno.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="shapes", data={"count": 2})
        assert result.ok is True
        assert result.op == "shapes"
        assert result.data == {"count": 2}
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="FIELD_NOT_FOUND", message="No such field")
        result = ServiceResult(ok=False, op="validate", error=error)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "FIELD_NOT_FOUND"

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="test", data={"key": "value"}, meta={"hits": 3})
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["key"] == "value"
        assert parsed["meta"]["hits"] == 3

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="test")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]


class TestServiceError:
    def test_default_detail(self) -> None:
        assert ServiceError(code="E", message="bad").detail == {}

    def test_null_violations_survive_serialization(self) -> None:
        error = ServiceError(
            code="NON_NULL_OPTIONAL",
            message="violated",
            detail={"violations": {"args": {"a": None}}},
        )
        parsed = json.loads(error.model_dump_json())
        assert parsed["detail"]["violations"] == {"args": {"a": None}}
