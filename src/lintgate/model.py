# model.py
from __future__ import annotations

import shlex
from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class Step:
    """A single external-tool invocation (one quality gate)."""
    name: str
    command: str
    args: Tuple[str, ...] = ()
    timeout: float | None = None  # seconds; None waits forever

    @property
    def argv(self) -> list[str]:
        return [self.command, *self.args]

    @property
    def command_line(self) -> str:
        return shlex.join(self.argv)


@dataclass(frozen=True)
class Pipeline:
    """
    Ordered, fixed sequence of steps.

    Order is significant: steps run exactly as declared.
    """
    steps: Tuple[Step, ...]

    def __post_init__(self) -> None:
        # accept any sequence, store a tuple
        object.__setattr__(self, "steps", tuple(self.steps))
        if not self.steps:
            raise ValueError("Pipeline must have at least one step")

        names = [s.name for s in self.steps]
        if len(set(names)) != len(names):
            dupes = sorted({n for n in names if names.count(n) > 1})
            raise ValueError(f"Duplicate step names found: {dupes}")

    def __iter__(self):
        return iter(self.steps)

    def __len__(self) -> int:
        return len(self.steps)


@dataclass(frozen=True)
class StepOutcome:
    """Raw outcome of one step execution."""
    returncode: int
    stdout: Optional[str] = None
    stderr: Optional[str] = None
    elapsed_s: float = 0.0


@dataclass
class RunResult:
    """
    Outcome of a pipeline run.

    `failed_index` is the 1-indexed position of the first failing step,
    or None when every step passed. Steps after a failure never run and
    never appear in `executed`.
    """
    executed: List[str] = field(default_factory=list)
    failed_index: Optional[int] = None
    failed_step: Optional[Step] = None
    returncode: int = 0
    stdout: Optional[str] = None
    stderr: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.failed_index is None

    @property
    def exit_code(self) -> int:
        if self.ok:
            return 0
        # killed by signal N -> 128+N, as a shell would report it
        if self.returncode < 0:
            return 128 - self.returncode
        return self.returncode

    def statuses(self) -> dict[str, str]:
        """Status per executed step, in execution order."""
        out = {name: "ok" for name in self.executed}
        if self.failed_step is not None:
            out[self.failed_step.name] = "failed"
        return out
