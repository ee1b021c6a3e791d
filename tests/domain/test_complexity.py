"""Tests for character-class classification."""

from __future__ import annotations

import pytest

from credpolicy.domain.complexity import classify_char, classify_secret
from credpolicy.domain.types import CharacterClass


class TestClassifyChar:
    @pytest.mark.parametrize(
        ("ch", "expected"),
        [
            ("a", {CharacterClass.LETTER}),
            ("Z", {CharacterClass.LETTER, CharacterClass.UPPERCASE}),
            ("7", {CharacterClass.DIGIT}),
            ("!", {CharacterClass.SYMBOL}),
            (" ", {CharacterClass.SYMBOL}),
            ("\u00e9", {CharacterClass.SYMBOL}),
            ("\u00c9", {CharacterClass.SYMBOL}),
            ("\u03a9", {CharacterClass.SYMBOL}),
            ("\u0663", {CharacterClass.SYMBOL}),
        ],
    )
    def test_classes(self, ch: str, expected: set[CharacterClass]) -> None:
        assert classify_char(ch) == expected


class TestClassifySecret:
    def test_all_classes_present(self) -> None:
        verdict = classify_secret("Secret1!")
        assert verdict.satisfied is True
        assert verdict.failed_classes == frozenset()

    def test_missing_uppercase(self) -> None:
        verdict = classify_secret("secret1!")
        assert verdict.satisfied is False
        assert verdict.failed_classes == {CharacterClass.UPPERCASE}

    def test_digits_only_misses_three(self) -> None:
        verdict = classify_secret("12345678")
        assert verdict.sorted_failures() == ["letter", "symbol", "uppercase"]

    def test_empty_misses_everything(self) -> None:
        assert classify_secret("").failed_classes == frozenset(CharacterClass)

    def test_accented_letters_do_not_cover_letter_classes(self) -> None:
        verdict = classify_secret("Été-2024")
        assert verdict.sorted_failures() == ["uppercase"]
