"""
Gauger CLI
===========

Click-based command-line interface over the Gauger engine.

Usage::

    python -m gauger analyze            # prompts with hidden input
    python -m gauger analyze "MyP@ssw0rd!"
    python -m gauger suggest "hunter2"
    python -m gauger generate --count 3
    python -m gauger --output json analyze "hunter2"

Passing a password as an argument leaves it in shell history; prefer the
prompt for real credentials.

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

import json
from typing import Any, Optional

import click

from shared.config import GaugeConfig
from shared.console import GaugeConsole

from gauger import __version__
from gauger.core.engine import GaugeEngine
from gauger.output.console import GaugeConsoleOutput, mask_password


# ===================================================================== #
#  CLI Group
# ===================================================================== #

@click.group()
@click.version_option(__version__, prog_name="gauger")
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to a Gauger configuration file (TOML).",
)
@click.option(
    "--output", "-o",
    type=click.Choice(["console", "json"]),
    default="console",
    help="Output format.",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Suppress the banner.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    output: str,
    quiet: bool,
) -> None:
    """Gauger -- Password Strength Analyzer.

    Score a password, list what to improve, and generate strong
    alternatives. Everything runs locally.
    """
    ctx.ensure_object(dict)

    # TOMLDecodeError is a ValueError too.
    try:
        gauge_config = GaugeConfig.load(config) if config else GaugeConfig()
        engine = GaugeEngine(gauge_config)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--config") from exc

    console = GaugeConsole(quiet=output == "json")
    ctx.obj["config"] = gauge_config
    ctx.obj["output_format"] = output
    ctx.obj["console"] = console
    ctx.obj["engine"] = engine
    ctx.obj["display"] = GaugeConsoleOutput(console)

    if output == "console" and not quiet:
        console.banner(version=__version__)


def _emit_json(payload: Any) -> None:
    click.echo(json.dumps(payload, indent=2, ensure_ascii=False, default=str))


def _read_password(password: Optional[str]) -> str:
    if password is not None:
        return password
    return click.prompt("Password", hide_input=True, default="", show_default=False)


# ===================================================================== #
#  Subcommands
# ===================================================================== #

@cli.command()
@click.argument("password", required=False)
@click.option(
    "--no-generate",
    is_flag=True,
    default=False,
    help="Do not include a generated strong password.",
)
@click.pass_context
def analyze(ctx: click.Context, password: Optional[str], no_generate: bool) -> None:
    """Analyse password strength and list weaknesses and suggestions."""
    engine: GaugeEngine = ctx.obj["engine"]
    display: GaugeConsoleOutput = ctx.obj["display"]

    password = _read_password(password)
    report = engine.evaluate(password, include_generated=not no_generate)

    if ctx.obj["output_format"] == "json":
        _emit_json(report.model_dump(mode="json"))
    else:
        display.display_report(report, masked=mask_password(password))


@cli.command()
@click.argument("password", required=False)
@click.pass_context
def suggest(ctx: click.Context, password: Optional[str]) -> None:
    """List improvement suggestions only."""
    engine: GaugeEngine = ctx.obj["engine"]
    display: GaugeConsoleOutput = ctx.obj["display"]

    suggestions = engine.suggest(_read_password(password))

    if ctx.obj["output_format"] == "json":
        _emit_json({"suggestions": suggestions})
    elif suggestions:
        display.display_suggestions(suggestions)
    else:
        ctx.obj["console"].success("Nothing to improve.")


@cli.command()
@click.option(
    "--count", "-n",
    type=click.IntRange(min=1, max=100),
    default=1,
    help="Number of passwords to generate.",
)
@click.pass_context
def generate(ctx: click.Context, count: int) -> None:
    """Generate strong random passwords."""
    engine: GaugeEngine = ctx.obj["engine"]

    passwords = [engine.generate() for _ in range(count)]

    if ctx.obj["output_format"] == "json":
        _emit_json([p.model_dump(mode="json") for p in passwords])
        return

    for generated in passwords:
        ctx.obj["display"].display_generated(generated)


# ===================================================================== #
#  Entry Point
# ===================================================================== #

def main() -> None:
    """Main entry point for the Gauger CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
