# runner.py
from __future__ import annotations

import subprocess
import time
from dataclasses import dataclass
from functools import partial
from typing import Callable, Optional

from .model import Pipeline, RunResult, Step, StepOutcome
from .ui.console import Console, get_console

# shell conventions for statuses the child never got to report itself
EXIT_TIMEOUT = 124
EXIT_NOT_EXECUTABLE = 126
EXIT_NOT_FOUND = 127

# keep the tail of captured output on failures
OUTPUT_TAIL = 4000

Executor = Callable[[Step], StepOutcome]


# ----------------------------------------------------------------------
# Errors
# ----------------------------------------------------------------------

TOOL_HINTS = {
    "cargo": "Install the Rust toolchain (https://rustup.rs) or fix PATH.",
    "rustup": "Install rustup (https://rustup.rs) or fix PATH.",
}


@dataclass
class StepFailure(Exception):
    """The single error kind: a step finished with a non-zero status."""
    index: int
    step: str
    cmd: str
    exit_code: int
    stdout: Optional[str] = None
    stderr: Optional[str] = None
    hint: Optional[str] = None

    def __str__(self) -> str:
        return f"step {self.index} '{self.step}' failed (exit={self.exit_code}): {self.cmd}"


# ----------------------------------------------------------------------
# Execution primitives
# ----------------------------------------------------------------------

def _text(data: str | bytes | None) -> Optional[str]:
    # TimeoutExpired carries raw bytes on POSIX even with text=True
    if isinstance(data, bytes):
        return data.decode(errors="replace")
    return data


def execute_step(step: Step, *, capture: bool = False) -> StepOutcome:
    """
    Run one step as a child process and wait for it.

    The child inherits cwd, environment and (unless capture is set) the
    standard streams. Never raises for a non-zero exit; a missing
    executable is reported as 127, one that exists but cannot be run as
    126, and an expired timeout as 124.
    """
    start_t = time.monotonic()
    try:
        proc = subprocess.run(
            step.argv,
            shell=False,
            text=True,
            capture_output=capture,
            timeout=step.timeout,
        )
    except FileNotFoundError:
        return StepOutcome(
            returncode=EXIT_NOT_FOUND,
            stderr=f"{step.command}: command not found\n",
            elapsed_s=time.monotonic() - start_t,
        )
    except OSError as e:
        # EACCES, ENOEXEC and friends: the tool exists but could not start
        return StepOutcome(
            returncode=EXIT_NOT_EXECUTABLE,
            stderr=f"{step.command}: cannot execute: {e.strerror or e}\n",
            elapsed_s=time.monotonic() - start_t,
        )
    except subprocess.TimeoutExpired as e:
        stdout = _text(e.stdout)
        stderr = _text(e.stderr) or ""
        return StepOutcome(
            returncode=EXIT_TIMEOUT,
            stdout=stdout,
            stderr=f"{stderr}\nTimeout expired after {step.timeout}s.\n",
            elapsed_s=time.monotonic() - start_t,
        )

    return StepOutcome(
        returncode=proc.returncode,
        stdout=proc.stdout,
        stderr=proc.stderr,
        elapsed_s=time.monotonic() - start_t,
    )


def _run_step(index: int, step: Step, executor: Executor, console: Console) -> StepOutcome:
    console.print_trace(step.command_line)
    outcome = executor(step)
    console.print_debug(f"{step.name}: exit={outcome.returncode} in {outcome.elapsed_s:.2f}s")

    # pass-through mode leaves these empty unless the runner itself had
    # something to say (missing or unrunnable tool, timeout)
    console.print_step_output(outcome.stdout, outcome.stderr)

    if outcome.returncode != 0:
        hint = TOOL_HINTS.get(step.command) if outcome.returncode == EXIT_NOT_FOUND else None
        raise StepFailure(
            index=index,
            step=step.name,
            cmd=step.command_line,
            exit_code=outcome.returncode,
            stdout=outcome.stdout[-OUTPUT_TAIL:] if outcome.stdout else outcome.stdout,
            stderr=outcome.stderr[-OUTPUT_TAIL:] if outcome.stderr else outcome.stderr,
            hint=hint,
        )
    return outcome


# ----------------------------------------------------------------------
# Public API
# ----------------------------------------------------------------------

def run(
    pipeline: Pipeline,
    *,
    executor: Executor | None = None,
    console: Console | None = None,
    capture: bool = False,
) -> RunResult:
    """
    Run every step in declared order, stopping at the first failure.

    Returns a RunResult; a failing step is reported, never retried.
    """
    console = console or get_console()
    if executor is None:
        executor = partial(execute_step, capture=capture)

    result = RunResult()
    for index, step in enumerate(pipeline, start=1):
        try:
            _run_step(index, step, executor, console)
        except StepFailure as e:
            result.executed.append(step.name)
            result.failed_index = e.index
            result.failed_step = step
            result.returncode = e.exit_code
            result.stdout = e.stdout
            result.stderr = e.stderr
            console.print_failure(step.name, exit_code=result.exit_code, hint=e.hint)
            return result

        result.executed.append(step.name)

    return result
