"""Rich/JSON output helpers.

The CLI renders PolicyResult for humans (Rich markup) or machines
(--json). ``log_detail`` never appears in either form.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.markup import escape

from credpolicy.output.console import create_console, get_output

if TYPE_CHECKING:
    from credpolicy.services.result import PolicyResult


def _format_value(value: Any) -> str:
    if isinstance(value, (dict, list)):
        return _json.dumps(value, separators=(",", ":"))
    return str(value)


def format_result(
    result: PolicyResult,
    *,
    json_output: bool = False,
    no_color: bool = False,
) -> str:
    """Format a PolicyResult for display.

    Args:
        result: The policy result to format.
        json_output: If True, return JSON; otherwise return human-readable text.
        no_color: Strip ANSI styling from human output.
    """
    if json_output:
        return result.model_dump_json(indent=2)

    console = create_console(no_color=no_color)
    if result.ok:
        console.print(f"[policy.ok]OK[/]: [policy.op]{escape(result.op)}[/]")
        for key, value in result.data.items():
            console.print(f"  [policy.key]{escape(key)}:[/] {escape(_format_value(value))}")
    else:
        error = result.error
        message = error.message if error else "Unknown error"
        code = f" [policy.code]({error.code})[/]" if error else ""
        console.print(
            f"[policy.error]ERROR[/]: [policy.op]{escape(result.op)}[/] - {escape(message)}{code}"
        )
        if error:
            for key, value in error.detail.items():
                console.print(f"  [policy.key]{escape(key)}:[/] {escape(_format_value(value))}")
    return get_output(console).rstrip("\n")
