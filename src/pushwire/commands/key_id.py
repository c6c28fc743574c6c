"""Command: build a composite ``<algorithm>:<device_id>`` key id."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pushwire.commands._base import PushwireCommand
from pushwire.domain.keys import KeyAlgorithm, KeyId
from pushwire.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from pushwire.commands._context import AppContext


@click.command(
    "key-id",
    cls=PushwireCommand,
    examples="""\
  pushwire key-id ed25519 JLAFKJWSCS
  pushwire -q key-id signed_curve25519 AAAAHQ""",
)
@click.argument("algorithm", type=click.Choice([a.value for a in KeyAlgorithm]))
@click.argument("device_id")
@click.pass_obj
def key_id(app: AppContext, algorithm: str, device_id: str) -> None:
    """Combine ALGORITHM and DEVICE_ID into a key id."""
    try:
        value = KeyId(KeyAlgorithm(algorithm), device_id)
    except ValueError as exc:
        app.emit(
            ServiceResult(
                ok=False,
                op="encode_key_id",
                error=ServiceError(
                    code="INVALID_DEVICE_ID",
                    message=str(exc),
                    detail={"device_id": device_id},
                ),
            )
        )
        return
    app.emit(app.codec.encode("key_id", value))
