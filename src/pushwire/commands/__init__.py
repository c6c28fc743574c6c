"""Subcommand modules for pushwire.

Provides register_commands() which uses deferred imports to keep
``pushwire --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from pushwire.commands.decode import decode
    from pushwire.commands.key_id import key_id
    from pushwire.commands.normalize import normalize
    from pushwire.commands.types import types_cmd

    cli.add_command(decode)
    cli.add_command(normalize)
    cli.add_command(key_id)
    cli.add_command(types_cmd)
