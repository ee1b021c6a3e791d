"""Tests for PolicyResult and PolicyError."""

import json

import pytest

from credpolicy.services.result import PolicyError, PolicyErrorCode, PolicyResult, PolicyViolation


class TestPolicyResult:
    def test_success_construction(self) -> None:
        result = PolicyResult.success("validate_expiration", max_allowed="2026-05-30T12:00:00+00:00")
        assert result.ok is True
        assert result.op == "validate_expiration"
        assert result.data == {"max_allowed": "2026-05-30T12:00:00+00:00"}
        assert result.error is None

    def test_failure_construction(self) -> None:
        result = PolicyResult.failure(
            "validate_password",
            PolicyErrorCode.LENGTH_TOO_SHORT,
            "too short",
        )
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == PolicyErrorCode.LENGTH_TOO_SHORT
        assert result.error.detail == {}

    def test_log_detail_not_serialized(self) -> None:
        result = PolicyResult.failure(
            "validate_password",
            PolicyErrorCode.WEAKLY_RANKED,
            "password is easily cracked",
            log_detail="dictionary diagnostic: it is based on a dictionary word",
        )
        parsed = json.loads(result.model_dump_json())
        assert "log_detail" not in parsed["error"]
        assert "dictionary word" not in result.model_dump_json()
        assert "dictionary word" not in repr(result)
        assert result.error is not None
        assert result.error.log_detail is not None

    def test_json_serialization(self) -> None:
        result = PolicyResult.failure(
            "gate_request",
            PolicyErrorCode.EXPIRATION_SETTING_REQUIRED,
            "missing",
            detail={"option": "validUntil"},
        )
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is False
        assert parsed["error"]["code"] == "EXPIRATION_SETTING_REQUIRED"
        assert parsed["error"]["detail"]["option"] == "validUntil"

    def test_frozen(self) -> None:
        result = PolicyResult(ok=True, op="test")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]


class TestPolicyViolation:
    def test_raise_for_error(self) -> None:
        result = PolicyResult.failure("op", PolicyErrorCode.CONTAINS_USERNAME, "no user names")
        with pytest.raises(PolicyViolation, match="no user names") as excinfo:
            result.raise_for_error()
        assert excinfo.value.code == PolicyErrorCode.CONTAINS_USERNAME
        assert excinfo.value.result is result

    def test_success_does_not_raise(self) -> None:
        PolicyResult.success("op").raise_for_error()


class TestPolicyError:
    def test_default_detail(self) -> None:
        error = PolicyError(code=PolicyErrorCode.MISSING_EXPIRATION, message="bad")
        assert error.detail == {}
        assert error.log_detail is None
