"""Configuration CLI commands."""

import json

import click
from rich.console import Console

from ...core.config import resolve_config_path, save_settings
from ...core.exceptions import ConfigurationError
from .enhance import parse_option_pairs

console = Console()


@click.group()
def config():
    """Show or save configuration."""
    pass


@config.command()
@click.pass_context
def show(ctx):
    """Print the effective configuration as JSON."""
    settings = ctx.obj["settings"]
    click.echo(json.dumps(settings.to_file_dict(), indent=2))


@config.command()
@click.option(
    "-s", "--set", "pairs",
    multiple=True,
    metavar="FIELD=VALUE",
    help="Setting to change, e.g. -s log_level=debug -s enabled_enhancers='[\"context\"]'"
)
@click.pass_context
def save(ctx, pairs):
    """Merge settings into the configuration file.

    Example:

        pb config save -s default_example_count=3
    """
    overrides = parse_option_pairs(pairs)
    path = resolve_config_path(ctx.obj["config_path"])

    try:
        save_settings(ctx.obj["settings"], path, **overrides)
    except ConfigurationError as e:
        console.print(f"[red]Error:[/red] {e.message}")
        ctx.exit(1)

    console.print(f"[green]Saved to:[/green] {path}")
