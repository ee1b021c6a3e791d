"""CredentialChangeGate — ALTER ROLE must say VALID UNTIL.

Only the presence of the option key is checked. Whether the value is
within the validity window is decided later, on the credential path,
by ExpirationPolicy.
"""

from __future__ import annotations

from credpolicy.config.models import GateConfig
from credpolicy.domain.credentials import AttributeChangeRequest
from credpolicy.domain.types import RequestKind
from credpolicy.services.base import BasePolicy
from credpolicy.services.result import PolicyErrorCode, PolicyResult


class CredentialChangeGate(BasePolicy):
    """Reject alter-role requests that omit the expiration option."""

    op = "gate_request"

    def __init__(self, config: GateConfig | None = None) -> None:
        self._config = config or GateConfig()

    @property
    def expiration_option(self) -> str:
        return self._config.expiration_option

    def validate(self, request: AttributeChangeRequest) -> PolicyResult:
        if request.kind != RequestKind.ALTER_ROLE:
            return self._accept(gated=False)

        if not request.has_option(self.expiration_option):
            return self._reject(
                PolicyErrorCode.EXPIRATION_SETTING_REQUIRED,
                "ALTER ROLE must specify a password expiration date using VALID UNTIL",
                username=request.role,
                detail={"option": self.expiration_option},
            )

        return self._accept(gated=True)
