"""Rich/JSON output for ServiceResult.

``--json`` dumps the whole ServiceResult.  ``--quiet`` prints only the
canonical wire value (or the error line).  The default mode renders a
status line, the summary fields, and the canonical wire value with Rich.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rich.text import Text

from pushwire.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from pushwire.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Output flags resolved from the CLI settings."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    indent: int = 2
    sort_keys: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=settings.indent or None)
    if settings.quiet:
        return _format_quiet(result, settings)

    console = create_console()
    if result.ok:
        _render_ok(console, result, settings)
    else:
        _render_error(console, result, verbose=settings.verbose)
    return get_output(console).rstrip("\n")


def dump_wire(value: Any, settings: OutputSettings) -> str:
    """Serialize a wire value as JSON using the configured layout."""
    return json.dumps(value, indent=settings.indent or None, sort_keys=settings.sort_keys)


def _format_quiet(result: ServiceResult, settings: OutputSettings) -> str:
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"
    if "value" in result.data:
        return dump_wire(result.data["value"], settings)
    return f"OK: {result.op}"


def _render_ok(console: Console, result: ServiceResult, settings: OutputSettings) -> None:
    console.print(Text("OK", style="pw.ok"), Text(f"  {result.op}", style="pw.op"))
    for key, value in result.data.get("summary", {}).items():
        console.print(Text.assemble((f"  {key}: ", "pw.key"), _inline(value)))
    if "value" in result.data:
        console.print(dump_wire(result.data["value"], settings), markup=False, soft_wrap=True)
    if settings.verbose and result.meta:
        console.print(Text("  meta:", style="dim"))
        for key, value in result.meta.items():
            console.print(f"    {key}: {_inline(value)}", markup=False)


def _render_error(console: Console, result: ServiceResult, *, verbose: bool) -> None:
    error = result.error
    if error is None:
        console.print(Text("ERROR", style="pw.error"), Text(f"  {result.op}", style="pw.op"))
        return
    console.print(
        Text("ERROR", style="pw.error"),
        Text(f"  {result.op}", style="pw.op"),
        Text(f"  [{error.code}]", style="pw.code"),
    )
    console.print(f"  {error.message}", markup=False, soft_wrap=True)
    if error.path:
        console.print(Text.assemble(("  at: ", "pw.key"), (error.path, "pw.path")))
    if verbose:
        for key, value in error.detail.items():
            console.print(Text.assemble((f"  {key}: ", "pw.key"), _inline(value)))


def _inline(value: Any) -> str:
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"))
    return str(value)
