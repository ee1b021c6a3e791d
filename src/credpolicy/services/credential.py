"""CredentialCheckService — the "check new credential" entry point.

Runs the expiration policy first, then branches on the secret kind:
plaintext secrets go through the complexity policy, pre-hashed secrets
through the user-name equality guard.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from credpolicy.config.models import PolicyConfig
from credpolicy.domain.credentials import CredentialSubmission
from credpolicy.domain.timeutil import as_utc, utc_now
from credpolicy.domain.types import SecretKind
from credpolicy.services.complexity import PasswordComplexityPolicy
from credpolicy.services.expiration import ExpirationPolicy
from credpolicy.services.hashed import PreHashedSecretGuard
from credpolicy.services.result import PolicyResult
from credpolicy.services.strength import StrengthChecker, build_strength_checker
from credpolicy.services.verification import CredentialVerifier, PasslibVerifier

logger = logging.getLogger(__name__)

OP = "check_credential"

Clock = Callable[[], datetime]


class CredentialCheckService:
    """Compose the credential policies for one submission at a time.

    Holds only immutable collaborators, so a single instance can serve
    concurrent requests.
    """

    def __init__(
        self,
        config: PolicyConfig | None = None,
        *,
        strength_checker: StrengthChecker | None = None,
        verifier: CredentialVerifier | None = None,
        clock: Clock = utc_now,
    ) -> None:
        config = config or PolicyConfig()
        if strength_checker is None:
            strength_checker = build_strength_checker(config.strength)
        self.expiration = ExpirationPolicy(config.expiration)
        self.complexity = PasswordComplexityPolicy(
            config.complexity,
            strength_checker=strength_checker,
        )
        self.prehashed = PreHashedSecretGuard(verifier or PasslibVerifier(config.verification))
        self._clock = clock

    def check_new_credential(
        self,
        username: str,
        secret: str,
        secret_kind: SecretKind | str,
        expiration: datetime | None,
        *,
        now: datetime | None = None,
    ) -> PolicyResult:
        """Validate a credential given the host hook's flat arguments."""
        submission = CredentialSubmission.from_parts(username, secret, secret_kind, expiration)
        return self.check_submission(submission, now=now)

    def check_submission(
        self,
        submission: CredentialSubmission,
        *,
        now: datetime | None = None,
    ) -> PolicyResult:
        reference = as_utc(now) if now is not None else self._clock()

        result = self.expiration.validate(
            reference,
            submission.expiration,
            username=submission.username,
        )
        if not result.ok:
            return result

        if submission.is_plaintext:
            result = self.complexity.validate(submission.username, submission.secret.value)
        else:
            result = self.prehashed.validate(submission.username, submission.secret.value)
        if not result.ok:
            return result

        logger.debug("Credential accepted for %s", submission.username)
        return PolicyResult.success(
            OP,
            username=submission.username,
            secret_kind=str(submission.secret.kind),
            expiration=submission.expiration.isoformat() if submission.expiration else None,
        )
