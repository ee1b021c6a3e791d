"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Provides a lazily loaded PolicyHost and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from credpolicy.output.formatters import format_result

if TYPE_CHECKING:
    from credpolicy.config.settings import PolicySettings
    from credpolicy.plugins.host import PolicyHost
    from credpolicy.services.result import PolicyResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The policy host is loaded on first use so ``--help`` and
    ``--version`` never touch plugin discovery or word lists.
    """

    def __init__(self, settings: PolicySettings) -> None:
        self.settings = settings
        self._host: PolicyHost | None = None

        from credpolicy.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def host(self) -> PolicyHost:
        """The policy host with the built-in plugin installed."""
        if self._host is None:
            from credpolicy.plugins.host import PolicyHost

            host = PolicyHost(self.settings)
            try:
                host.load(discover=True)
            except (OSError, ValueError) as exc:
                raise click.ClickException(f"Could not load policy: {exc}") from exc
            self._host = host
        return self._host

    def emit(self, result: PolicyResult) -> None:
        """Format and output a PolicyResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        output = format_result(result, json_output=self.settings.json_output)
        if result.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
