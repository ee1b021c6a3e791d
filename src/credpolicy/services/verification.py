"""Credential verification against stored hashes.

Used only to ask whether a pre-hashed secret would also accept the user
name as its plaintext. The hash schemes come from ``[verification]``.
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from passlib.context import CryptContext
from passlib.exc import MissingBackendError, UnknownHashError

from credpolicy.config.models import VerificationConfig

logger = logging.getLogger(__name__)


@runtime_checkable
class CredentialVerifier(Protocol):
    """Host-provided check of a candidate input against a stored hash."""

    def verify(self, candidate: str, stored_hash: str) -> bool: ...


class PasslibVerifier:
    """CredentialVerifier backed by a passlib CryptContext."""

    def __init__(self, config: VerificationConfig | None = None) -> None:
        config = config or VerificationConfig()
        self._context = CryptContext(schemes=config.schemes, deprecated="auto")

    def verify(self, candidate: str, stored_hash: str) -> bool:
        """Return True if *stored_hash* accepts *candidate*.

        Hashes in an unrecognised format, or in a scheme whose backend is
        not installed, cannot be verified and count as a mismatch.
        """
        try:
            return self._context.verify(candidate, stored_hash)
        except MissingBackendError as exc:
            logger.warning("No backend to verify stored hash: %s", exc)
            return False
        except (UnknownHashError, ValueError):
            logger.debug("Stored hash format not recognised; skipping verification")
            return False
