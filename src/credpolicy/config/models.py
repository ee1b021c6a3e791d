"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, credpolicy.toml only contains
overrides. An empty file (or none at all) yields the stock policy:
8-character minimum, 90-day maximum validity, no dictionary check.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

from credpolicy.domain.types import MAX_VALIDITY_DAYS, MIN_PASSWORD_LENGTH, VALID_UNTIL_OPTION

# --- credpolicy.toml sections ---


class ExpirationConfig(BaseModel):
    """[expiration] section."""

    model_config = {"frozen": True}

    max_validity_days: int = Field(default=MAX_VALIDITY_DAYS, ge=1)


class ComplexityConfig(BaseModel):
    """[complexity] section."""

    model_config = {"frozen": True}

    min_length: int = Field(default=MIN_PASSWORD_LENGTH, ge=1)


class StrengthConfig(BaseModel):
    """[strength] section."""

    model_config = {"frozen": True}

    checker: Literal["none", "dictionary"] = "none"
    wordlist_path: Path | None = None


class VerificationConfig(BaseModel):
    """[verification] section — hash schemes the verifier understands."""

    model_config = {"frozen": True}

    schemes: list[str] = Field(
        default_factory=lambda: ["bcrypt", "pbkdf2_sha256", "sha256_crypt", "md5_crypt"]
    )


class GateConfig(BaseModel):
    """[gate] section."""

    model_config = {"frozen": True}

    expiration_option: str = VALID_UNTIL_OPTION


class PolicyConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    expiration: ExpirationConfig = Field(default_factory=ExpirationConfig)
    complexity: ComplexityConfig = Field(default_factory=ComplexityConfig)
    strength: StrengthConfig = Field(default_factory=StrengthConfig)
    verification: VerificationConfig = Field(default_factory=VerificationConfig)
    gate: GateConfig = Field(default_factory=GateConfig)
