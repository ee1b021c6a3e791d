"""PolicyResult and PolicyError — the universal policy decision contract.

INVARIANT: Every policy and entry point returns a PolicyResult.
Rejections are values, not exceptions; hosts that abort by raising call
:meth:`PolicyResult.raise_for_error`.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class PolicyErrorCode(StrEnum):
    """Every way a credential or attribute change can be rejected."""

    MISSING_EXPIRATION = "MISSING_EXPIRATION"
    EXPIRATION_TOO_FAR = "EXPIRATION_TOO_FAR"
    LENGTH_TOO_SHORT = "LENGTH_TOO_SHORT"
    CONTAINS_USERNAME = "CONTAINS_USERNAME"
    INSUFFICIENT_COMPLEXITY = "INSUFFICIENT_COMPLEXITY"
    WEAKLY_RANKED = "WEAKLY_RANKED"
    SECRET_EQUALS_USERNAME = "SECRET_EQUALS_USERNAME"
    EXPIRATION_SETTING_REQUIRED = "EXPIRATION_SETTING_REQUIRED"


class PolicyError(BaseModel):
    """Structured rejection payload within a PolicyResult.

    ``log_detail`` holds diagnostics meant for the server log only. It is
    excluded from serialization and from ``repr``.
    """

    model_config = {"frozen": True}

    code: PolicyErrorCode
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)
    log_detail: str | None = Field(default=None, exclude=True, repr=False)


class PolicyResult(BaseModel):
    """Outcome of one policy decision.

    Attributes:
        ok: Whether the input was accepted.
        op: Name of the decision (e.g. ``"validate_expiration"``).
        data: Decision-specific payload on success.
        error: Structured rejection if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    error: PolicyError | None = None

    @classmethod
    def success(cls, op: str, **data: Any) -> PolicyResult:
        return cls(ok=True, op=op, data=data)

    @classmethod
    def failure(
        cls,
        op: str,
        code: PolicyErrorCode,
        message: str,
        *,
        detail: dict[str, Any] | None = None,
        log_detail: str | None = None,
    ) -> PolicyResult:
        error = PolicyError(
            code=code,
            message=message,
            detail=detail or {},
            log_detail=log_detail,
        )
        return cls(ok=False, op=op, error=error)

    def raise_for_error(self) -> None:
        """Raise :class:`PolicyViolation` if this result is a rejection."""
        if not self.ok:
            raise PolicyViolation(self)


class PolicyViolation(Exception):
    """Raised by hosts that abort the in-progress request on rejection."""

    def __init__(self, result: PolicyResult) -> None:
        self.result = result
        self.error = result.error
        message = result.error.message if result.error else f"{result.op} rejected"
        super().__init__(message)

    @property
    def code(self) -> PolicyErrorCode | None:
        return self.error.code if self.error else None
