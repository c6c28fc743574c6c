"""Root CLI group for pushwire with global flags and command registration."""

from __future__ import annotations

import click

from pushwire import __version__
from pushwire.commands import register_commands
from pushwire.commands._context import AppContext
from pushwire.config.settings import PushwireSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="pushwire")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the wire value.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Path to a pushwire.toml.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """pushwire: push rule and key management wire codecs."""
    settings = PushwireSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
