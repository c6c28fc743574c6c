"""Command: decode a JSON payload and report its structure."""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

import click

from pushwire.commands._base import PushwireCommand, payload_type_argument, source_argument

if TYPE_CHECKING:
    from pushwire.commands._context import AppContext


@click.command(
    cls=PushwireCommand,
    examples="""\
  echo '"dont_notify"' | pushwire decode action
  echo '{"set_tweak": "highlight", "value": true}' | pushwire decode action
  pushwire decode ruleset pushrules.json
  pushwire --json decode claim_keys_response response.json""",
)
@payload_type_argument()
@source_argument()
@click.pass_obj
def decode(app: AppContext, payload_type: str, source: TextIO) -> None:
    """Decode PAYLOAD_TYPE from SOURCE (a JSON file, or '-' for stdin)."""
    app.emit(app.codec.decode_json(payload_type, source.read()))
