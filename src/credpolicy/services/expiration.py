"""ExpirationPolicy — expiration is mandatory and bounded.

The bound is ``now + max_validity_days * 86400`` seconds on an absolute
UTC instant. Exactly at the bound is accepted.
"""

from __future__ import annotations

from datetime import datetime

from credpolicy.config.models import ExpirationConfig
from credpolicy.domain.credentials import ExpirationWindow
from credpolicy.services.base import BasePolicy
from credpolicy.services.result import PolicyErrorCode, PolicyResult


class ExpirationPolicy(BasePolicy):
    """Accept or reject a candidate password expiration."""

    op = "validate_expiration"

    def __init__(self, config: ExpirationConfig | None = None) -> None:
        self._config = config or ExpirationConfig()

    @property
    def max_validity_days(self) -> int:
        return self._config.max_validity_days

    def window(self, now: datetime) -> ExpirationWindow:
        return ExpirationWindow.for_days(now, self.max_validity_days)

    def validate(
        self,
        now: datetime,
        expiration: datetime | None,
        *,
        username: str | None = None,
    ) -> PolicyResult:
        if expiration is None:
            return self._reject(
                PolicyErrorCode.MISSING_EXPIRATION,
                "password expiration date must be specified",
                username=username,
            )

        window = self.window(now)
        if not window.allows(expiration):
            return self._reject(
                PolicyErrorCode.EXPIRATION_TOO_FAR,
                "password expiration date must not be more than "
                f"{self.max_validity_days} days in the future",
                username=username,
                detail={"max_allowed": window.max_allowed.isoformat()},
            )

        return self._accept(max_allowed=window.max_allowed.isoformat())
