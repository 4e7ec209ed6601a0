"""Human and JSON rendering of ServiceResult.

Human output is built with Rich markup; --json returns the serialized
model unchanged so scripts see the same shape as the service layer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.markup import escape

from wholesale_guard.output.console import create_console, get_output

if TYPE_CHECKING:
    from wholesale_guard.services.result import ServiceResult


def _render_value(value: Any) -> str:
    if isinstance(value, list):
        if not value:
            return "-"
        return ", ".join(f"[guard.code]{escape(str(v))}[/]" for v in value)
    if isinstance(value, dict):
        return escape(json.dumps(value, separators=(",", ":")))
    return escape(str(value))


def format_result(
    result: ServiceResult,
    *,
    json_output: bool = False,
    no_color: bool = False,
) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        json_output: Return JSON instead of human-readable text.
        no_color: Strip ANSI styling from human output.
    """
    if json_output:
        return result.model_dump_json(indent=2)

    console = create_console(no_color=no_color)
    if result.ok:
        console.print(f"[guard.ok]OK[/]: [guard.op]{result.op}[/]", soft_wrap=True)
    else:
        message = result.error.message if result.error else "Unknown error"
        console.print(
            f"[guard.error]ERROR[/]: [guard.op]{result.op}[/] - {escape(message)}",
            soft_wrap=True,
        )
    for key, value in result.data.items():
        console.print(f"  [guard.key]{key}[/]: {_render_value(value)}", soft_wrap=True)
    return get_output(console).rstrip("\n")
