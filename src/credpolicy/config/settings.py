"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click, or the embedding host
  2. Env vars     — ``CREDPOLICY_*`` prefix, ``__`` for nested sections
  3. TOML file    — ``credpolicy.toml`` discovered via walk-up
  4. Code defaults — baked into the section models
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from credpolicy.config.discovery import find_config
from credpolicy.config.models import (
    ComplexityConfig,
    ExpirationConfig,
    GateConfig,
    PolicyConfig,
    StrengthConfig,
    VerificationConfig,
)


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``credpolicy.toml`` file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                import click

                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class PolicySettings(BaseSettings):
    """Unified settings for the policy host and the CLI.

    Attributes:
        config_path: The TOML file the settings were read from, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "CREDPOLICY_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    expiration: ExpirationConfig = Field(default_factory=ExpirationConfig)
    complexity: ComplexityConfig = Field(default_factory=ComplexityConfig)
    strength: StrengthConfig = Field(default_factory=StrengthConfig)
    verification: VerificationConfig = Field(default_factory=VerificationConfig)
    gate: GateConfig = Field(default_factory=GateConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> PolicySettings:
        """Construct settings from a CLI invocation or host startup.

        Discovers ``credpolicy.toml`` via walk-up from *start* (or uses the
        explicit *config_path*) and merges *cli_flags* as highest-priority
        overrides.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(start)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **cli_flags)
        finally:
            _tls.toml_path = None

    @property
    def policy(self) -> PolicyConfig:
        """The policy sections alone, without CLI flags."""
        return PolicyConfig(
            expiration=self.expiration,
            complexity=self.complexity,
            strength=self.strength,
            verification=self.verification,
            gate=self.gate,
        )
