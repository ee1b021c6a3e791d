"""PreHashedSecretGuard — a pre-hashed secret must not encode the user name.

Complexity cannot be judged on an opaque hash, so the only check is
whether the hash would accept the user name itself.
"""

from __future__ import annotations

from credpolicy.services.base import BasePolicy
from credpolicy.services.result import PolicyErrorCode, PolicyResult
from credpolicy.services.verification import CredentialVerifier


class PreHashedSecretGuard(BasePolicy):
    op = "validate_prehashed"

    def __init__(self, verifier: CredentialVerifier) -> None:
        self._verifier = verifier

    def validate(self, username: str, stored_hash: str) -> PolicyResult:
        if self._verifier.verify(username, stored_hash):
            return self._reject(
                PolicyErrorCode.SECRET_EQUALS_USERNAME,
                "password must not equal user name",
                username=username,
            )
        return self._accept()
