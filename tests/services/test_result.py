"""Tests for ServiceResult and ServiceError."""

import json

import pytest
from pydantic import ValidationError

from orgdir.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="hire_employee", data={"employee_id": "EMP0001"})
        assert result.ok is True
        assert result.data == {"employee_id": "EMP0001"}
        assert result.warnings == []
        assert result.error is None

    def test_failure_helper(self) -> None:
        result = ServiceResult.failure(
            "find_person", "NOT_FOUND", "No person found", kind="person", key="Ann"
        )
        assert result.ok is False
        assert result.error == ServiceError(
            code="NOT_FOUND", message="No person found", detail={"kind": "person", "key": "Ann"}
        )

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="give_raise", data={"new_salary": "82500"})
        parsed = json.loads(result.model_dump_json())
        assert parsed["op"] == "give_raise"
        assert parsed["data"]["new_salary"] == "82500"

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="test")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]
