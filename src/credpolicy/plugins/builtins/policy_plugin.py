"""Built-in policy plugin: the credential check and the alter-role gate.

Ordering within the hook chain:

- ``check_password`` is ``trylast`` so handlers installed before this
  one get to veto first; their veto is final.
- ``process_utility`` is ``tryfirst`` so the gate decides before the
  request is handed on to any other handler.
"""

from __future__ import annotations

import logging
from datetime import datetime

from credpolicy.domain.credentials import AttributeChangeRequest
from credpolicy.domain.types import SecretKind
from credpolicy.plugins.hookspecs import hookimpl
from credpolicy.services.credential import CredentialCheckService
from credpolicy.services.gate import CredentialChangeGate
from credpolicy.services.result import PolicyResult

logger = logging.getLogger(__name__)


class PolicyPlugin:
    """Adapts the policy services to the host hook signatures."""

    def __init__(
        self,
        credentials: CredentialCheckService,
        gate: CredentialChangeGate,
    ) -> None:
        self._credentials = credentials
        self._gate = gate

    @hookimpl(trylast=True)
    def check_password(
        self,
        username: str,
        secret: str,
        secret_kind: SecretKind,
        expiration: datetime | None,
        now: datetime,
    ) -> PolicyResult | None:
        result = self._credentials.check_new_credential(
            username,
            secret,
            secret_kind,
            expiration,
            now=now,
        )
        return None if result.ok else result

    @hookimpl(tryfirst=True)
    def process_utility(self, request: AttributeChangeRequest) -> PolicyResult | None:
        result = self._gate.validate(request)
        return None if result.ok else result
