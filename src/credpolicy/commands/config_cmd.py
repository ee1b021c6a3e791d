"""Command: print the effective policy configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from credpolicy.commands._base import PolicyCommand
from credpolicy.services.result import PolicyResult

if TYPE_CHECKING:
    from credpolicy.commands._context import AppContext


@click.command(
    "show-config",
    cls=PolicyCommand,
    examples="""\
  credpolicy show-config
  credpolicy --json show-config
  credpolicy -c /etc/credpolicy.toml show-config""",
)
@click.pass_obj
def show_config(app: AppContext) -> None:
    """Show the effective policy settings and where they came from."""
    settings = app.settings
    source = str(settings.config_path) if settings.config_path else None
    app.emit(
        PolicyResult.success(
            "show_config",
            config_path=source,
            **settings.policy.model_dump(mode="json"),
        )
    )
