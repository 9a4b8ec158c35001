# pipeline.py
# Fixed gate configuration: format check, wasm library build, workspace lint.
from __future__ import annotations

from .dsl import pipeline, step
from .model import Pipeline

CARGO = "cargo"
WEB_PACKAGE = "crates/maelstrom-web"
WASM_TARGET = "wasm32-unknown-unknown"


def lint_pipeline() -> Pipeline:
    """
    Build the pipeline run on every invocation.

    format-check precedes build and build precedes lint: unformatted sources
    are rejected before compiling, and sources that don't compile never
    reach lint.
    """
    return pipeline(
        step("format", CARGO, "fmt", "--check"),
        step(
            "build",
            CARGO,
            "build",
            "--lib",
            "--package",
            WEB_PACKAGE,
            "--target",
            WASM_TARGET,
        ),
        step("lint", CARGO, "clippy"),
    )
