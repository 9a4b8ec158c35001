"""Terminal output for lintgate runs."""

from __future__ import annotations

import sys
from typing import Optional


class Console:
    """Everything lintgate shows the operator goes through here."""

    def __init__(self, debug: bool = False):
        """
        Args:
            debug: also emit per-step timing and full tracebacks
        """
        self.debug = debug

    def print_header(self, title: str) -> None:
        print(f"\n{title}")
        print("-" * len(title))

    def print_run_started(self, step_count: int) -> None:
        print("\nRUN STARTED")
        print(f"Steps: {step_count}")
        print()

    def print_trace(self, command_line: str) -> None:
        """
        Echo a command before it runs, the way `set -x` does.

        Written to stderr whether or not debug is on.
        """
        print(f"+ {command_line}", file=sys.stderr, flush=True)

    def print_plan_step(self, index: int, name: str, command_line: str) -> None:
        print(f"  {index}. {name}: {command_line}")

    def print_step_output(self, stdout: Optional[str], stderr: Optional[str]) -> None:
        """Replay captured tool output on the stream it came from."""
        if stdout:
            sys.stdout.write(stdout)
            sys.stdout.flush()
        if stderr:
            sys.stderr.write(stderr)
            sys.stderr.flush()

    def print_failure(
        self,
        name: str,
        exit_code: Optional[int] = None,
        hint: Optional[str] = None,
    ) -> None:
        """
        Report the step that stopped the run.

        Args:
            name: step name
            exit_code: status the run will exit with
            hint: how to fix a missing tool, when known
        """
        print(f"STEP FAILED: {name}", file=sys.stderr)
        if exit_code is not None:
            print(f"Exit code: {exit_code}", file=sys.stderr)
        if hint:
            print(f"Hint: {hint}", file=sys.stderr)

    def print_results(self, results: dict[str, str]) -> None:
        """Summary of the steps that ran; skipped steps are not listed."""
        print("\n" + "=" * 40)
        print("RESULTS")
        print("=" * 40)
        for name, status in results.items():
            label = "SUCCESS" if status == "ok" else status.upper()
            print(f"  {name}: {label}")

    def print_exception(self, exc: BaseException) -> None:
        """One-line error, or the whole traceback under --debug."""
        if self.debug:
            import traceback
            traceback.print_exception(type(exc), exc, exc.__traceback__)
        else:
            print(f"Error: {exc}", file=sys.stderr)

    def print_interrupted(self) -> None:
        print("\nInterrupted by user", file=sys.stderr)

    def print_debug(self, message: str) -> None:
        if self.debug:
            print(f"[DEBUG] {message}", file=sys.stderr)


# set by the CLI from --debug; library callers get a plain console
_console: Optional[Console] = None


def get_console() -> Console:
    global _console
    if _console is None:
        _console = Console()
    return _console


def set_console(console: Console) -> None:
    global _console
    _console = console
