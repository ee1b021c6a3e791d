"""Request-scoped credential values handed to the policies.

Nothing here outlives a single validation call and nothing is mutated
after construction (every model is frozen).
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timedelta
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field, field_validator

from credpolicy.domain.timeutil import as_utc
from credpolicy.domain.types import (
    MAX_VALIDITY_DAYS,
    SECONDS_PER_DAY,
    RequestKind,
    SecretKind,
)


class PlaintextSecret(BaseModel):
    """A raw secret as typed by the user."""

    model_config = {"frozen": True}

    kind: Literal[SecretKind.PLAINTEXT] = SecretKind.PLAINTEXT
    value: str = Field(repr=False)


class PreHashedSecret(BaseModel):
    """An already-encoded secret whose content cannot be inspected."""

    model_config = {"frozen": True}

    kind: Literal[SecretKind.PREHASHED] = SecretKind.PREHASHED
    value: str = Field(repr=False)


Secret = Annotated[PlaintextSecret | PreHashedSecret, Field(discriminator="kind")]


class CredentialSubmission(BaseModel):
    """A new or changed credential for one role.

    The secret's ``kind`` tag decides whether complexity rules or the
    pre-hashed equality guard apply.
    """

    model_config = {"frozen": True}

    username: str
    secret: Secret
    expiration: datetime | None = None

    @field_validator("expiration")
    @classmethod
    def _normalize_expiration(cls, value: datetime | None) -> datetime | None:
        return as_utc(value) if value is not None else None

    @classmethod
    def from_parts(
        cls,
        username: str,
        secret: str,
        secret_kind: SecretKind | str,
        expiration: datetime | None,
    ) -> CredentialSubmission:
        """Build a submission from the flat argument list a host hook receives."""
        kind = SecretKind(secret_kind)
        wrapped: PlaintextSecret | PreHashedSecret
        if kind is SecretKind.PLAINTEXT:
            wrapped = PlaintextSecret(value=secret)
        else:
            wrapped = PreHashedSecret(value=secret)
        return cls(username=username, secret=wrapped, expiration=expiration)

    @property
    def is_plaintext(self) -> bool:
        return self.secret.kind == SecretKind.PLAINTEXT


class ExpirationWindow(BaseModel):
    """Sliding window of acceptable expirations, anchored at *reference_instant*."""

    model_config = {"frozen": True}

    reference_instant: datetime
    max_validity: timedelta = Field(
        default_factory=lambda: timedelta(seconds=MAX_VALIDITY_DAYS * SECONDS_PER_DAY)
    )

    @field_validator("reference_instant")
    @classmethod
    def _normalize_reference(cls, value: datetime) -> datetime:
        return as_utc(value)

    @classmethod
    def for_days(cls, reference_instant: datetime, days: int) -> ExpirationWindow:
        """Window of *days* fixed 86400-second days (no calendar walking)."""
        return cls(
            reference_instant=reference_instant,
            max_validity=timedelta(seconds=days * SECONDS_PER_DAY),
        )

    @property
    def max_allowed(self) -> datetime:
        """Latest acceptable expiration instant (inclusive)."""
        return self.reference_instant + self.max_validity

    def allows(self, expiration: datetime) -> bool:
        """Whether *expiration* falls on or before :attr:`max_allowed`."""
        return as_utc(expiration) <= self.max_allowed


class AttributeChangeRequest(BaseModel):
    """A parsed attribute-change statement, built per statement by the host."""

    model_config = {"frozen": True}

    kind: RequestKind
    role: str | None = None
    options: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_options(
        cls,
        kind: RequestKind | str,
        options: Iterable[tuple[str, Any]],
        *,
        role: str | None = None,
    ) -> AttributeChangeRequest:
        """Build a request from ``(name, value)`` pairs.

        Raises:
            ValueError: If an option name appears more than once.
        """
        collected: dict[str, Any] = {}
        for name, value in options:
            if name in collected:
                msg = f"conflicting or redundant options: {name}"
                raise ValueError(msg)
            collected[name] = value
        return cls(kind=RequestKind(kind), role=role, options=collected)

    def has_option(self, name: str) -> bool:
        """Exact-match presence test on the option's canonical name."""
        return name in self.options
