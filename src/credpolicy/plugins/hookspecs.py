"""Pluggy hook specifications for the credential policy host.

Two decision hooks mirror the host's interception points: a new
credential being set, and an attribute-change statement about to run.
Both are ``firstresult``: a handler returns a failed PolicyResult to veto
or ``None`` to let the next handler decide. One setup-time hook lets a
plugin supply the dictionary-strength checker.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from datetime import datetime

    from credpolicy.domain.credentials import AttributeChangeRequest
    from credpolicy.domain.types import SecretKind
    from credpolicy.services.result import PolicyResult
    from credpolicy.services.strength import StrengthChecker

PROJECT_NAME = "credpolicy"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class CredPolicyHookSpec:
    """Hook specifications for the credpolicy plugin system."""

    @hookspec(firstresult=True)
    def check_password(
        self,
        username: str,
        secret: str,
        secret_kind: SecretKind,
        expiration: datetime | None,
        now: datetime,
    ) -> PolicyResult | None:
        """Called when a role's secret is created or changed."""

    @hookspec(firstresult=True)
    def process_utility(self, request: AttributeChangeRequest) -> PolicyResult | None:
        """Called before an attribute-change request executes."""

    @hookspec(firstresult=True)
    def register_strength_checker(self) -> StrengthChecker | None:
        """Return a StrengthChecker to replace the configured one."""
