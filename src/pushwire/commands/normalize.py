"""Command: print the canonical wire form of a JSON payload."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, TextIO

import click

from pushwire.commands._base import PushwireCommand, payload_type_argument, source_argument
from pushwire.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from pushwire.commands._context import AppContext


@click.command(
    cls=PushwireCommand,
    examples="""\
  pushwire -q normalize ruleset pushrules.json > canonical.json
  echo '{"value": 1, "set_tweak": "sound"}' | pushwire normalize action""",
)
@payload_type_argument()
@source_argument()
@click.pass_obj
def normalize(app: AppContext, payload_type: str, source: TextIO) -> None:
    """Decode PAYLOAD_TYPE from SOURCE and re-encode it canonically."""
    text = source.read()
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        app.emit(
            ServiceResult(
                ok=False,
                op=f"normalize_{payload_type}",
                error=ServiceError(code="INVALID_JSON", message=f"Input is not valid JSON: {exc.msg}"),
            )
        )
        return
    app.emit(app.codec.normalize(payload_type, raw))
