"""Tests for ExpirationPolicy."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from credpolicy.config.models import ExpirationConfig
from credpolicy.services.expiration import ExpirationPolicy
from credpolicy.services.result import PolicyErrorCode
from tests.conftest import T


class TestExpirationPolicy:
    def test_missing_expiration(self) -> None:
        result = ExpirationPolicy().validate(T, None)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == PolicyErrorCode.MISSING_EXPIRATION
        assert result.error.message == "password expiration date must be specified"

    def test_ninety_one_days_too_far(self) -> None:
        result = ExpirationPolicy().validate(T, T + timedelta(days=91))
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == PolicyErrorCode.EXPIRATION_TOO_FAR
        assert "90 days" in result.error.message

    def test_exact_boundary_accepted(self) -> None:
        result = ExpirationPolicy().validate(T, T + timedelta(days=90))
        assert result.ok is True
        assert result.data["max_allowed"] == (T + timedelta(days=90)).isoformat()

    def test_one_second_past_boundary_rejected(self) -> None:
        result = ExpirationPolicy().validate(T, T + timedelta(days=90, seconds=1))
        assert result.ok is False

    @pytest.mark.parametrize(
        "offset",
        [timedelta(0), timedelta(days=1), timedelta(days=-30), timedelta(days=89, hours=23)],
    )
    def test_within_window_accepted(self, offset: timedelta) -> None:
        assert ExpirationPolicy().validate(T, T + offset).ok is True

    def test_other_zone_compared_as_instant(self) -> None:
        """An expiration expressed in another zone is compared by instant."""
        tokyo = timezone(timedelta(hours=9))
        boundary = (T + timedelta(days=90)).astimezone(tokyo)
        assert ExpirationPolicy().validate(T, boundary).ok is True
        assert ExpirationPolicy().validate(T, boundary + timedelta(seconds=1)).ok is False

    def test_naive_values_are_utc(self) -> None:
        naive_now = datetime(2026, 3, 1, 12, 0, 0)
        result = ExpirationPolicy().validate(naive_now, T + timedelta(days=90))
        assert result.ok is True

    def test_configured_window(self) -> None:
        policy = ExpirationPolicy(ExpirationConfig(max_validity_days=30))
        assert policy.validate(T, T + timedelta(days=30)).ok is True
        result = policy.validate(T, T + timedelta(days=31))
        assert result.error is not None
        assert "30 days" in result.error.message

    def test_idempotent(self) -> None:
        policy = ExpirationPolicy()
        first = policy.validate(T, T + timedelta(days=91))
        second = policy.validate(T, T + timedelta(days=91))
        assert first == second
