"""Shared pytest fixtures and test helpers for credpolicy tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from datetime import UTC, datetime
from pathlib import Path

import pytest
from click.testing import CliRunner

from credpolicy.config.settings import PolicySettings
from credpolicy.plugins.host import PolicyHost
from credpolicy.plugins.manager import PluginHandle

# Fixed reference instant used wherever a test needs "now".
T = datetime(2026, 3, 1, 12, 0, 0, tzinfo=UTC)


class FakeVerifier:
    """CredentialVerifier that treats the stored "hash" as the plaintext."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []

    def verify(self, candidate: str, stored_hash: str) -> bool:
        self.calls.append((candidate, stored_hash))
        return candidate == stored_hash


class FixedChecker:
    """StrengthChecker returning a canned diagnostic for listed secrets."""

    def __init__(self, weak: dict[str, str]) -> None:
        self._weak = weak

    def check(self, secret: str) -> str | None:
        return self._weak.get(secret)


@pytest.fixture
def now() -> datetime:
    return T


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    """Undo configure_logging() side effects from CLI invocations."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    policy_logger = logging.getLogger("credpolicy")
    policy_level = policy_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    policy_logger.setLevel(policy_level)


@pytest.fixture(autouse=True)
def _no_ambient_config(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host env vars from leaking into settings under test."""
    monkeypatch.delenv("CREDPOLICY_CONFIG", raising=False)
    monkeypatch.delenv("CREDPOLICY_JSON_OUTPUT", raising=False)
    monkeypatch.delenv("CREDPOLICY_VERBOSE", raising=False)


@pytest.fixture
def _isolated_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to an empty temp dir so no credpolicy.toml is discovered."""
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings(tmp_path: Path) -> PolicySettings:
    return PolicySettings.from_cli(start=tmp_path)


@pytest.fixture
def verifier() -> FakeVerifier:
    return FakeVerifier()


@pytest.fixture
def loaded_host(
    settings: PolicySettings, verifier: FakeVerifier
) -> Iterator[tuple[PolicyHost, PluginHandle]]:
    """PolicyHost with the built-in plugin installed and a fixed clock."""
    host = PolicyHost(settings, verifier=verifier, clock=lambda: T)
    handle = host.load()
    try:
        yield host, handle
    finally:
        host.unload(handle)
