"""Tests for PreHashedSecretGuard."""

from __future__ import annotations

from passlib.hash import pbkdf2_sha256

from credpolicy.services.hashed import PreHashedSecretGuard
from credpolicy.services.result import PolicyErrorCode
from credpolicy.services.verification import PasslibVerifier
from tests.conftest import FakeVerifier


class TestPreHashedSecretGuard:
    def test_hash_of_username_rejected(self) -> None:
        guard = PreHashedSecretGuard(PasslibVerifier())
        result = guard.validate("alice", pbkdf2_sha256.hash("alice"))
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == PolicyErrorCode.SECRET_EQUALS_USERNAME
        assert result.error.message == "password must not equal user name"

    def test_other_hash_accepted(self) -> None:
        guard = PreHashedSecretGuard(PasslibVerifier())
        assert guard.validate("alice", pbkdf2_sha256.hash("Secret1!")).ok is True

    def test_username_is_trial_input(self) -> None:
        verifier = FakeVerifier()
        PreHashedSecretGuard(verifier).validate("alice", "stored")
        assert verifier.calls == [("alice", "stored")]
