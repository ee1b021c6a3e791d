"""Character-class coverage for plaintext passwords.

A password must contain an ASCII letter, an ASCII uppercase letter, an
ASCII digit, and a character that is none of these. Every non-ASCII
character is a symbol, accented letters and other scripts' digits
included. The uppercase class overlaps the letter class; both are kept
as separate requirements.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from credpolicy.domain.types import CharacterClass

REQUIRED_CLASSES: frozenset[CharacterClass] = frozenset(CharacterClass)


class ComplexityVerdict(BaseModel):
    """Which required character classes a secret fails to cover."""

    model_config = {"frozen": True}

    failed_classes: frozenset[CharacterClass] = Field(default_factory=frozenset)

    @property
    def satisfied(self) -> bool:
        return not self.failed_classes

    def sorted_failures(self) -> list[str]:
        return sorted(str(c) for c in self.failed_classes)


def classify_char(ch: str) -> set[CharacterClass]:
    """Return the classes a single character belongs to."""
    if not ch.isascii():
        return {CharacterClass.SYMBOL}
    if ch.isalpha():
        if ch.isupper():
            return {CharacterClass.LETTER, CharacterClass.UPPERCASE}
        return {CharacterClass.LETTER}
    if ch.isdigit():
        return {CharacterClass.DIGIT}
    return {CharacterClass.SYMBOL}


def classify_secret(secret: str) -> ComplexityVerdict:
    """Scan *secret* once and report the uncovered classes."""
    seen: set[CharacterClass] = set()
    for ch in secret:
        seen |= classify_char(ch)
        if len(seen) == len(REQUIRED_CLASSES):
            break
    return ComplexityVerdict(failed_classes=REQUIRED_CLASSES - seen)
