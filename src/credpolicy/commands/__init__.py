"""Subcommand modules for credpolicy.

Provides register_commands() which uses deferred imports to keep
``credpolicy --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from credpolicy.commands.check import check_alter, check_password
    from credpolicy.commands.config_cmd import show_config

    cli.add_command(check_password)
    cli.add_command(check_alter)
    cli.add_command(show_config)
