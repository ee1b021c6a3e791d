"""BasePolicy — shared foundation for the policy decision classes.

Every policy receives its config section at construction time and is
otherwise stateless: ``validate`` is a pure function of its arguments,
so one instance is safe to share across concurrent requests.
"""

from __future__ import annotations

import logging
from typing import Any

from credpolicy.services.result import PolicyErrorCode, PolicyResult

logger = logging.getLogger(__name__)


class BasePolicy:
    """Abstract base for policy decisions.

    Subclasses set :attr:`op` and implement ``validate``. Rejections go
    through :meth:`_reject` so every one of them is logged the same way.

    Usage::

        class ExpirationPolicy(BasePolicy):
            op = "validate_expiration"

            def validate(self, now, expiration) -> PolicyResult:
                if expiration is None:
                    return self._reject(PolicyErrorCode.MISSING_EXPIRATION, ...)
                ...
    """

    op: str = "validate"

    def _accept(self, **data: Any) -> PolicyResult:
        return PolicyResult.success(self.op, **data)

    def _reject(
        self,
        code: PolicyErrorCode,
        message: str,
        *,
        username: str | None = None,
        detail: dict[str, Any] | None = None,
        log_detail: str | None = None,
    ) -> PolicyResult:
        """Build a failed result and log the rejection (never the secret)."""
        if log_detail is not None:
            logger.info(
                "%s rejected: %s (user=%s, diagnostic=%s)",
                self.op,
                code,
                username,
                log_detail,
            )
        else:
            logger.info("%s rejected: %s (user=%s)", self.op, code, username)
        return PolicyResult.failure(
            self.op,
            code,
            message,
            detail=detail,
            log_detail=log_detail,
        )
