"""Main CLI entry point."""

import os

import click
from rich.console import Console

from .. import __version__
from ..core.config import CONFIG_FILE_ENV, load_settings
from ..core.logging_setup import setup_logging
from .commands import enhance, strategies, legacy, config

console = Console()


@click.group()
@click.version_option(version=__version__, prog_name="promptboost")
@click.option(
    "-c", "--config", "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Configuration file (default: ./prompt-boost-config.json)"
)
@click.pass_context
def cli(ctx, config_path):
    """PromptBoost - prompt enhancement strategies.

    Adds context, examples, instructions, or domain knowledge to prompts.

    \b
    Examples:
        pb enhance "Explain quantum computing"
        pb enhance "Explain quantum computing" -s domain-knowledge -O domain=physics
        pb strategies
        pb mcp

    Use --help on any command for more details.
    """
    settings = load_settings(config_path)
    setup_logging(settings)
    ctx.obj = {"settings": settings, "config_path": config_path}


cli.add_command(enhance)
cli.add_command(strategies)
cli.add_command(legacy)
cli.add_command(config)


@cli.command()
@click.option("-h", "--host", default="0.0.0.0", help="Host to bind to")
@click.option("-p", "--port", default=8000, type=int, help="Port to listen on")
@click.option("--reload", is_flag=True, help="Enable auto-reload")
@click.option("-w", "--workers", default=1, type=int, help="Number of workers")
@click.pass_context
def serve(ctx, host, port, reload, workers):
    """Start the REST API server.

    Example:

        pb serve --port 8080 --reload
    """
    console.print("[bold]Starting PromptBoost API server...[/bold]")
    console.print(f"  Host: {host}")
    console.print(f"  Port: {port}")
    console.print(f"  Workers: {workers}")
    console.print(f"  Reload: {'Yes' if reload else 'No'}")
    console.print(f"\n[dim]API docs available at http://{host}:{port}/docs[/dim]\n")

    if ctx.obj["config_path"]:
        # The app module loads its own settings on import
        os.environ[CONFIG_FILE_ENV] = str(ctx.obj["config_path"])

    from ..api import run_server
    run_server(
        host=host, port=port, reload=reload, workers=workers, settings=ctx.obj["settings"]
    )


@cli.command()
@click.pass_context
def mcp(ctx):
    """Serve the enhancers as MCP tools over stdio.

    Example:

        pb mcp
    """
    import asyncio
    from ..mcp_server import serve_stdio

    asyncio.run(serve_stdio(ctx.obj["settings"]))


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
