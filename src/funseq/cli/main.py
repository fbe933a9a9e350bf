"""CLI entry point for funseq.

Invoked as::

    funseq [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m funseq.cli.main

Commands
--------
demo        Run the built-in map/filter/reduce demo and print the result
closures    Print what loop-created callbacks return under each capture mode
run         Run a YAML or JSON pipeline document
operators   List registered operators
version     Show version information
"""
from __future__ import annotations

import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table
from rich.text import Text

console = Console()
err_console = Console(stderr=True)

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def _configure_logging(level: str) -> None:
    """Route the ``funseq`` logger through Rich on stderr."""
    logger = logging.getLogger("funseq")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.addHandler(RichHandler(console=err_console, show_path=False))
    logger.setLevel(level.upper())


def _print_value(value: object) -> None:
    """Print ``str(value)`` verbatim on one line, without markup or wrapping."""
    console.print(str(value), markup=False, highlight=False, soft_wrap=True)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="funseq")
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging verbosity (written to stderr).",
)
def cli(log_level: str) -> None:
    """Chainable map/filter/reduce sequences and closure capture demos."""
    _configure_logging(log_level)


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from funseq import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]funseq[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# demo command
# ---------------------------------------------------------------------------


@cli.command(name="demo")
def demo_command() -> None:
    """Triple [10, 20, 30, 40, 50], keep values over 100 and print the sum."""
    from funseq import run_demo

    _print_value(run_demo())


# ---------------------------------------------------------------------------
# closures command
# ---------------------------------------------------------------------------


@cli.command(name="closures")
@click.option(
    "--mode",
    type=click.Choice(["value", "reference", "factory", "both"], case_sensitive=False),
    default="both",
    show_default=True,
    help="Capture strategy; 'both' runs value then reference.",
)
@click.option("--count", type=click.IntRange(min=0), default=4, show_default=True)
def closures_command(mode: str, count: int) -> None:
    """Print what each loop-created callback returns, one per line.

    Examples:

    \b
        funseq closures                    # 0 1 2 3 then 4 4 4 4
        funseq closures --mode factory
    """
    from funseq import capture

    modes = ["value", "reference"] if mode.lower() == "both" else [mode.lower()]
    for name in modes:
        for result in capture(name, count):
            _print_value(result)


# ---------------------------------------------------------------------------
# run command
# ---------------------------------------------------------------------------


@cli.command(name="run")
@click.argument("file", type=click.Path(exists=False))
@click.option(
    "--verbose-steps",
    is_flag=True,
    default=False,
    help="Show the output of every step before the result.",
)
def run_command(file: str, verbose_steps: bool) -> None:
    """Run a pipeline document and print its result.

    FILE is a .yaml, .yml or .json pipeline document.
    """
    from funseq.operators import (
        ENTRYPOINT_GROUP,
        OperatorArgumentError,
        OperatorNotFoundError,
        default_registry,
    )
    from funseq.pipeline import PipelineConfig, PipelineConfigError, PipelineRunner

    try:
        config = PipelineConfig.load(file)
    except FileNotFoundError:
        err_console.print(f"[red]Error:[/red] File not found: {escape(file)}", soft_wrap=True)
        sys.exit(1)
    except OSError as exc:
        err_console.print(f"[red]Error:[/red] Cannot read {escape(file)}: {escape(str(exc))}", soft_wrap=True)
        sys.exit(1)
    except PipelineConfigError as exc:
        err_console.print(f"[red]Error:[/red] invalid pipeline in {escape(file)}: {escape(str(exc))}", soft_wrap=True)
        sys.exit(1)

    default_registry.load_entrypoints(ENTRYPOINT_GROUP)
    try:
        result = PipelineRunner(default_registry).run(config)
    except (PipelineConfigError, OperatorNotFoundError, OperatorArgumentError) as exc:
        err_console.print(f"[red]Error:[/red] invalid pipeline in {escape(file)}: {escape(str(exc))}", soft_wrap=True)
        sys.exit(1)
    except Exception as exc:  # noqa: BLE001
        err_console.print(f"[red]Error:[/red] pipeline failed: {type(exc).__name__}: {escape(str(exc))}", soft_wrap=True)
        sys.exit(1)

    if verbose_steps:
        table = Table(title=f"Pipeline: {escape(file)}", show_lines=True)
        table.add_column("#", justify="right")
        table.add_column("Op", style="bold")
        table.add_column("Operator")
        table.add_column("Output")
        table.add_row("", "values", "", Text(str(list(config.values))))
        for step_result in result.steps:
            step = step_result.step
            operator = Text(step.fn if step.arg is None else f"{step.fn}({step.arg!r})")
            table.add_row(
                str(step_result.index),
                step.op.value,
                operator,
                Text(str(step_result.output)),
            )
        console.print(table)

    _print_value(result.value)


# ---------------------------------------------------------------------------
# operators command
# ---------------------------------------------------------------------------


@cli.command(name="operators")
@click.option(
    "--entrypoints/--no-entrypoints",
    default=True,
    help="Also load operators installed by other packages.",
)
def operators_command(entrypoints: bool) -> None:
    """List all registered operators."""
    from funseq.operators import ENTRYPOINT_GROUP, default_registry

    if entrypoints:
        default_registry.load_entrypoints(ENTRYPOINT_GROUP)

    table = Table(title="Registered operators")
    table.add_column("Name", style="bold")
    table.add_column("Kind")
    table.add_column("Operand")
    table.add_column("Description")
    for spec in default_registry:
        table.add_row(
            spec.name,
            spec.kind.value,
            "yes" if spec.takes_arg else "no",
            spec.description,
        )
    console.print(table)


if __name__ == "__main__":
    cli()
