import pytest

from lintgate.model import Step, StepOutcome
from lintgate.ui.console import Console, set_console


class RecordingExecutor:
    """Test double: records invocations and returns scripted exit codes."""

    def __init__(self, codes=None):
        self.codes = dict(codes or {})
        self.calls = []

    def __call__(self, step: Step) -> StepOutcome:
        self.calls.append(step.name)
        return StepOutcome(returncode=self.codes.get(step.name, 0))

    def count(self, name: str) -> int:
        return self.calls.count(name)


@pytest.fixture
def recorder():
    return RecordingExecutor


@pytest.fixture(autouse=True)
def fresh_console():
    console = Console()
    set_console(console)
    yield console
