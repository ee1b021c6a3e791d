"""Dictionary-strength checkers for plaintext passwords.

A checker returns ``None`` when the secret is acceptable, or a free-form
diagnostic when it is crackable. Diagnostics are for the server log only.
The checker is chosen once at startup from ``[strength] checker``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

from credpolicy.config.models import StrengthConfig

logger = logging.getLogger(__name__)

DICTIONARY_WORD = "it is based on a dictionary word"


@runtime_checkable
class StrengthChecker(Protocol):
    """Capability interface for an external dictionary-strength check."""

    def check(self, secret: str) -> str | None:
        """Return a diagnostic if *secret* is crackable, else None."""
        ...


class NullStrengthChecker:
    """Default checker: accepts everything."""

    def check(self, secret: str) -> str | None:
        return None


class DictionaryStrengthChecker:
    """Reject secrets that reduce to a word from a word list.

    The secret is lowercased and stripped of everything but letters, so
    ``Summer2024!`` reduces to ``summer``. Words shorter than
    *min_word_length* are ignored when loading.
    """

    def __init__(self, words: set[str], *, min_word_length: int = 4) -> None:
        self._words = {w for w in words if len(w) >= min_word_length}

    @classmethod
    def from_file(cls, path: Path, *, min_word_length: int = 4) -> DictionaryStrengthChecker:
        """Load a newline-separated word list (``#`` lines are comments)."""
        words: set[str] = set()
        with path.open(encoding="utf-8") as fh:
            for line in fh:
                word = line.strip().lower()
                if word and not word.startswith("#"):
                    words.add(word)
        logger.debug("Loaded %d dictionary words from %s", len(words), path)
        return cls(words, min_word_length=min_word_length)

    def __len__(self) -> int:
        return len(self._words)

    def check(self, secret: str) -> str | None:
        core = "".join(ch for ch in secret.lower() if ch.isalpha())
        if core in self._words or core[::-1] in self._words:
            return DICTIONARY_WORD
        return None


def build_strength_checker(config: StrengthConfig) -> StrengthChecker:
    """Select the strength checker named by *config*.

    Raises:
        ValueError: If the dictionary checker is selected without a word list.
    """
    if config.checker == "dictionary":
        if config.wordlist_path is None:
            msg = "[strength] checker = 'dictionary' requires wordlist_path"
            raise ValueError(msg)
        return DictionaryStrengthChecker.from_file(config.wordlist_path)
    return NullStrengthChecker()
