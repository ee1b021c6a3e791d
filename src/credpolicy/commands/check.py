"""Commands: dry-run a credential change or an attribute-change request."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

import click

from credpolicy.commands._base import PolicyCommand
from credpolicy.domain.credentials import AttributeChangeRequest
from credpolicy.domain.timeutil import parse_instant
from credpolicy.domain.types import RequestKind, SecretKind

if TYPE_CHECKING:
    from credpolicy.commands._context import AppContext


def _instant(
    _ctx: click.Context, param: click.Parameter, value: str | None
) -> datetime | None:
    if value is None:
        return None
    try:
        return parse_instant(value)
    except ValueError as exc:
        raise click.BadParameter(f"not an ISO-8601 timestamp: {value!r}", param=param) from exc


def _split_option(raw: str) -> tuple[str, str]:
    name, sep, value = raw.partition("=")
    if not sep or not name:
        raise click.BadParameter(f"expected KEY=VALUE, got {raw!r}", param_hint="--option")
    return name, value


@click.command(
    "check-password",
    cls=PolicyCommand,
    examples="""\
  credpolicy check-password alice --valid-until 2026-12-01T00:00:00+00:00
  credpolicy --json check-password alice --secret 'Secret1!' --valid-until 2026-12-01
  credpolicy check-password alice --prehashed --secret '$pbkdf2-sha256$...' \\
      --valid-until 2026-12-01""",
)
@click.argument("username")
@click.option(
    "--secret",
    prompt=True,
    hide_input=True,
    help="Secret to check (prompted when omitted).",
)
@click.option("--prehashed", is_flag=True, help="Treat the secret as an already-hashed value.")
@click.option(
    "--valid-until",
    "valid_until",
    default=None,
    callback=_instant,
    help="Password expiration (ISO-8601).",
)
@click.option(
    "--now",
    default=None,
    callback=_instant,
    help="Reference instant for the validity window (ISO-8601; default: now).",
)
@click.pass_obj
def check_password(
    app: AppContext,
    username: str,
    secret: str,
    prehashed: bool,
    valid_until: datetime | None,
    now: datetime | None,
) -> None:
    """Check a new credential against the password policy."""
    if not username:
        raise click.BadParameter("user name must not be empty", param_hint="USERNAME")
    kind = SecretKind.PREHASHED if prehashed else SecretKind.PLAINTEXT
    app.emit(app.host.check_password(username, secret, kind, valid_until, now=now))


@click.command(
    "check-alter",
    cls=PolicyCommand,
    examples="""\
  credpolicy check-alter --role alice --option validUntil=2026-12-01
  credpolicy check-alter --role alice --option password=secret
  credpolicy check-alter --kind 'create role' --role bob""",
)
@click.option("--role", default=None, help="Role the statement targets.")
@click.option(
    "--kind",
    type=click.Choice([k.value for k in RequestKind]),
    default=RequestKind.ALTER_ROLE.value,
    show_default=True,
    help="Statement kind.",
)
@click.option(
    "--option",
    "options",
    multiple=True,
    help="Statement option as KEY=VALUE (repeatable).",
)
@click.pass_obj
def check_alter(app: AppContext, role: str | None, kind: str, options: tuple[str, ...]) -> None:
    """Check an attribute-change request against the expiration gate."""
    try:
        request = AttributeChangeRequest.from_options(
            kind,
            (_split_option(raw) for raw in options),
            role=role,
        )
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--option") from exc
    app.emit(app.host.check_utility(request))
