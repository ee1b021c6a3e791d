"""Enums and policy constants shared across the domain and service layers."""

from __future__ import annotations

from enum import StrEnum

MIN_PASSWORD_LENGTH = 8
MAX_VALIDITY_DAYS = 90
SECONDS_PER_DAY = 24 * 60 * 60

# Canonical option name an ALTER ROLE statement uses for VALID UNTIL.
VALID_UNTIL_OPTION = "validUntil"


class SecretKind(StrEnum):
    """How the submitted secret is encoded."""

    PLAINTEXT = "plaintext"
    PREHASHED = "prehashed"


class RequestKind(StrEnum):
    """Attribute-change statements the host may route through the gate."""

    ALTER_ROLE = "alter role"
    CREATE_ROLE = "create role"
    DROP_ROLE = "drop role"
    OTHER = "other"


class CharacterClass(StrEnum):
    """Character classes a plaintext password must cover."""

    LETTER = "letter"
    UPPERCASE = "uppercase"
    DIGIT = "digit"
    SYMBOL = "symbol"
