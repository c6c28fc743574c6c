"""Command: list the payload types the codec service understands."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pushwire.commands._base import PushwireCommand
from pushwire.services.result import ServiceResult

if TYPE_CHECKING:
    from pushwire.commands._context import AppContext


@click.command("types", cls=PushwireCommand)
@click.pass_obj
def types_cmd(app: AppContext) -> None:
    """List the supported payload types."""
    types = app.codec.payload_types
    app.emit(
        ServiceResult(
            ok=True,
            op="list_payload_types",
            data={"summary": {"count": len(types)}, "value": types},
        )
    )
