"""PasswordComplexityPolicy — length, user-name containment, character classes.

Checks run in a fixed order and the first failure wins:
length, then user-name containment, then character classes, then the
optional dictionary-strength check. Length counts UTF-8 bytes and the
classes are ASCII, so a multibyte character adds to the length and
counts as a symbol.
"""

from __future__ import annotations

from credpolicy.config.models import ComplexityConfig
from credpolicy.domain.complexity import classify_secret
from credpolicy.services.base import BasePolicy
from credpolicy.services.result import PolicyErrorCode, PolicyResult
from credpolicy.services.strength import NullStrengthChecker, StrengthChecker

COMPLEXITY_MESSAGE = (
    "password must contain letters, at least one uppercase letter, "
    "numbers, and non-alphanumeric characters"
)


class PasswordComplexityPolicy(BasePolicy):
    """Accept or reject a plaintext password for *username*."""

    op = "validate_password"

    def __init__(
        self,
        config: ComplexityConfig | None = None,
        *,
        strength_checker: StrengthChecker | None = None,
    ) -> None:
        self._config = config or ComplexityConfig()
        self._strength = strength_checker or NullStrengthChecker()

    @property
    def min_length(self) -> int:
        return self._config.min_length

    def validate(self, username: str, secret: str) -> PolicyResult:
        # Length is measured in UTF-8 bytes, as the host stores the secret.
        if len(secret.encode("utf-8")) < self.min_length:
            return self._reject(
                PolicyErrorCode.LENGTH_TOO_SHORT,
                f"password is too short (minimum length is {self.min_length} characters)",
                username=username,
            )

        # An empty user name is a substring of every secret.
        if username in secret:
            return self._reject(
                PolicyErrorCode.CONTAINS_USERNAME,
                "password must not contain user name",
                username=username,
            )

        verdict = classify_secret(secret)
        if not verdict.satisfied:
            return self._reject(
                PolicyErrorCode.INSUFFICIENT_COMPLEXITY,
                COMPLEXITY_MESSAGE,
                username=username,
                detail={"missing_classes": verdict.sorted_failures()},
            )

        reason = self._strength.check(secret)
        if reason is not None:
            return self._reject(
                PolicyErrorCode.WEAKLY_RANKED,
                "password is easily cracked",
                username=username,
                log_detail=f"dictionary diagnostic: {reason}",
            )

        return self._accept()
