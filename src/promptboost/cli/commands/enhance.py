"""Enhancement CLI commands."""

import json
from typing import Any, Dict, Iterable, Tuple

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ...dispatch import ToolDispatcher, is_error
from ...enhancers import BUILTIN_ENHANCERS
from ...templates.legacy import INSTRUCTION_TYPES

console = Console()

STRATEGY_NAMES = [cls.name for cls in BUILTIN_ENHANCERS]


def parse_option_pairs(pairs: Iterable[str]) -> Dict[str, Any]:
    """
    Parse ``KEY=VALUE`` pairs into an options mapping.

    Values are read as JSON when possible (``true``, ``3``), else as text.
    """
    options: Dict[str, Any] = {}
    for pair in pairs:
        key, sep, raw = pair.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"Expected KEY=VALUE, got '{pair}'", param_hint="--option")
        try:
            options[key] = json.loads(raw)
        except ValueError:
            options[key] = raw
    return options


def _read_prompt(prompt, input_file) -> str:
    if input_file:
        with open(input_file) as f:
            prompt = f.read()
    elif not prompt:
        prompt = click.get_text_stream("stdin").read()

    if not prompt or not prompt.strip():
        console.print("[red]Error:[/red] No prompt provided")
        raise click.Abort()
    return prompt


def _emit(ctx: click.Context, envelope: Dict[str, Any], output_file) -> None:
    if is_error(envelope):
        console.print(f"[red]Error:[/red] {envelope['error']}")
        ctx.exit(1)

    if output_file:
        with open(output_file, "w") as f:
            f.write(envelope["enhancedPrompt"])
        console.print(f"[green]Saved to:[/green] {output_file}")
    else:
        click.echo(envelope["enhancedPrompt"])


@click.command()
@click.argument("prompt", required=False)
@click.option("-f", "--file", "input_file", type=click.Path(exists=True), help="Read prompt from file")
@click.option("-o", "--output", "output_file", type=click.Path(), help="Write result to file")
@click.option(
    "-s", "--strategy",
    type=click.Choice(STRATEGY_NAMES),
    default="context",
    help="Enhancement strategy"
)
@click.option(
    "-O", "--option", "option_pairs",
    multiple=True,
    metavar="KEY=VALUE",
    help="Strategy option, e.g. -O domain=physics -O exampleCount=3"
)
@click.option("--json", "as_json", is_flag=True, help="Print the full result as JSON")
@click.option("-v", "--verbose", is_flag=True, help="Show detailed output")
@click.pass_context
def enhance(ctx, prompt, input_file, output_file, strategy, option_pairs, as_json, verbose):
    """Enhance a prompt with a strategy.

    Examples:

        pb enhance "Explain quantum computing"

        pb enhance "Explain quantum computing" -s domain-knowledge -O domain=physics

        pb enhance -f prompt.txt -s example -O exampleCount=3 -O position=after
    """
    prompt = _read_prompt(prompt, input_file)
    options = parse_option_pairs(option_pairs)

    dispatcher = ToolDispatcher.from_settings(ctx.obj["settings"])
    envelope = dispatcher.enhance_prompt(prompt, strategy, options)

    if as_json and not is_error(envelope):
        click.echo(json.dumps(envelope, indent=2))
        return

    if verbose and not is_error(envelope) and not output_file:
        console.print(Panel(envelope["enhancedPrompt"], title="Enhanced Prompt"))
    else:
        _emit(ctx, envelope, output_file)

    if verbose:
        metadata = envelope["metadata"]
        table = Table(title="Enhancement Results")
        table.add_column("Field", style="cyan")
        table.add_column("Value", style="green")

        for key, value in metadata.items():
            if isinstance(value, list):
                value = ", ".join(str(v) for v in value) or "None"
            table.add_row(key, str(value))

        console.print(table)


@click.command()
@click.pass_context
def strategies(ctx):
    """List the enabled enhancement strategies.

    Example:

        pb strategies
    """
    dispatcher = ToolDispatcher.from_settings(ctx.obj["settings"])

    table = Table(title="Enhancement Strategies")
    table.add_column("Name", style="cyan")
    table.add_column("Description")

    for info in dispatcher.list_enhancers():
        table.add_row(info["name"], info["description"])

    console.print(table)


LEGACY_MODES: Tuple[str, ...] = ("context", "examples", "instructions", "comprehensive")


@click.command()
@click.argument("prompt", required=False)
@click.option("-f", "--file", "input_file", type=click.Path(exists=True), help="Read prompt from file")
@click.option("-o", "--output", "output_file", type=click.Path(), help="Write result to file")
@click.option(
    "-m", "--mode",
    type=click.Choice(LEGACY_MODES),
    default="comprehensive",
    help="Which template chain to run"
)
@click.option("-t", "--topic", help="Topic for context and examples")
@click.option("-d", "--depth", type=int, help="Context depth (1-5)")
@click.option("-n", "--count", type=int, help="Number of examples (1-5)")
@click.option(
    "-i", "--instruction-type",
    type=click.Choice(INSTRUCTION_TYPES),
    default="clarity",
    help="Instruction type"
)
@click.option("--custom", "custom_instructions", help="Instructions for --instruction-type custom")
@click.pass_context
def legacy(ctx, prompt, input_file, output_file, mode, topic, depth, count,
           instruction_type, custom_instructions):
    """Run the deprecated template-chain enhancers.

    Examples:

        pb legacy "What is machine learning?" -t "machine learning"

        pb legacy "Explain loops" -m examples -t "JavaScript loops" -n 3
    """
    prompt = _read_prompt(prompt, input_file)
    dispatcher = ToolDispatcher.from_settings(ctx.obj["settings"])

    if mode == "context":
        envelope = dispatcher.enhance_with_context(prompt, topic, depth)
    elif mode == "examples":
        envelope = dispatcher.enhance_with_examples(prompt, topic, count)
    elif mode == "instructions":
        envelope = dispatcher.enhance_with_instructions(prompt, instruction_type, custom_instructions)
    else:
        envelope = dispatcher.enhance_comprehensive(
            prompt, topic, depth, count, instruction_type, custom_instructions
        )

    _emit(ctx, envelope, output_file)
