"""Tests for ServiceResult and ServiceError."""

import json

import pytest

from tcknctl.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="generate", data={"tckn": "12345678950"})
        assert result.ok is True
        assert result.op == "generate"
        assert result.data == {"tckn": "12345678950"}
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="INVALID_TCKN", message="Not a valid TCKN")
        result = ServiceResult(ok=False, op="validate", error=error)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "INVALID_TCKN"
        assert result.error.detail == {}

    def test_json_serialization(self) -> None:
        result = ServiceResult(
            ok=True,
            op="generate",
            data={"tckn": "12345678950", "valid": True},
            meta={"seed": 42},
        )
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["valid"] is True
        assert parsed["meta"]["seed"] == 42

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="generate")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]
