# cli.py
from __future__ import annotations

import sys

import click

from lintgate.pipeline import lint_pipeline
from lintgate.runner import run as run_pipeline
from lintgate.ui.console import Console, get_console, set_console


def _run() -> None:
    console = get_console()

    try:
        pipeline = lint_pipeline()
        console.print_run_started(step_count=len(pipeline))

        result = run_pipeline(pipeline, console=console)

        console.print_results(result.statuses())
        sys.exit(result.exit_code)

    except KeyboardInterrupt:
        console.print_interrupted()
        sys.exit(130)
    except Exception as e:
        console.print_exception(e)
        sys.exit(1)


@click.group(invoke_without_command=True)
@click.option(
    "--debug",
    is_flag=True,
    default=False,
    help="Enable debug mode (show stack traces and per-step timing)",
)
@click.pass_context
def cli(ctx, debug):
    """lintgate: format check, wasm build and lint, stopping at the first failure."""
    console = Console(debug=debug)
    set_console(console)

    if ctx.invoked_subcommand is None:
        _run()


@cli.command()
def run():
    """Run the pipeline (same as invoking lintgate with no command)."""
    _run()


@cli.command()
def plan():
    """List the configured steps in order without running them."""
    console = get_console()
    console.print_header("PLAN")
    for index, step in enumerate(lint_pipeline(), start=1):
        console.print_plan_step(index, step.name, step.command_line)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
