"""Service layer — the policy decisions and the credential-check entry point."""

from credpolicy.services.result import PolicyError, PolicyErrorCode, PolicyResult, PolicyViolation

__all__ = ["PolicyError", "PolicyErrorCode", "PolicyResult", "PolicyViolation"]
