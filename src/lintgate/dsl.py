# src/lintgate/dsl.py
from __future__ import annotations

from .model import Pipeline, Step


# ---------------------------------------------------------------------
# Step helper
# ---------------------------------------------------------------------

def step(name: str, command: str, *args: str, timeout: float | None = None) -> Step:
    """Create a tool step: step("lint", "cargo", "clippy")."""
    if not command:
        raise ValueError(f"step({name!r}) must have a command")
    return Step(name=name, command=command, args=tuple(args), timeout=timeout)


# ---------------------------------------------------------------------
# Pipeline helper
# ---------------------------------------------------------------------

def pipeline(*steps: Step) -> Pipeline:
    """
    Pipeline definition helper. Steps run in the order given:

        pipeline(
            step("format", "cargo", "fmt", "--check"),
            step("lint", "cargo", "clippy"),
        )
    """
    return Pipeline(steps=steps)
