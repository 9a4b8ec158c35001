from .dsl import pipeline, step
from .model import Pipeline, RunResult, Step, StepOutcome
from .pipeline import lint_pipeline
from .runner import StepFailure, execute_step, run

__all__ = [
    "pipeline",
    "step",
    "Pipeline",
    "RunResult",
    "Step",
    "StepOutcome",
    "lint_pipeline",
    "StepFailure",
    "execute_step",
    "run",
]
