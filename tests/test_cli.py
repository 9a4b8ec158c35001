import sys

import pytest
from click.testing import CliRunner

from lintgate import cli as cli_module
from lintgate.cli import cli
from lintgate.dsl import pipeline, step

runner = CliRunner()


def _exit_with(name: str, code: int):
    return step(name, sys.executable, "-c", f"import sys; sys.exit({code})")


@pytest.fixture
def fake_pipeline(monkeypatch):
    def install(*codes):
        names = ["format", "build", "lint"]
        steps = [_exit_with(n, c) for n, c in zip(names, codes)]
        monkeypatch.setattr(cli_module, "lint_pipeline", lambda: pipeline(*steps))
    return install


def test_cli_help():
    res = runner.invoke(cli, ["--help"])
    assert res.exit_code == 0
    assert "first failure" in res.output


def test_plan_lists_steps_in_order():
    res = runner.invoke(cli, ["plan"])
    assert res.exit_code == 0
    lines = [l.strip() for l in res.output.splitlines() if l.strip()[:2] in ("1.", "2.", "3.")]
    assert lines == [
        "1. format: cargo fmt --check",
        "2. build: cargo build --lib --package crates/maelstrom-web --target wasm32-unknown-unknown",
        "3. lint: cargo clippy",
    ]


def test_no_command_runs_pipeline(fake_pipeline):
    fake_pipeline(0, 0, 0)
    res = runner.invoke(cli, [])
    assert res.exit_code == 0
    assert "RESULTS" in res.output
    assert "lint: SUCCESS" in res.output


def test_run_command_propagates_status(fake_pipeline):
    fake_pipeline(0, 0, 5)
    res = runner.invoke(cli, ["run"])
    assert res.exit_code == 5
    assert "lint: FAILED" in res.output


def test_first_failure_status_wins(fake_pipeline):
    fake_pipeline(0, 9, 5)
    res = runner.invoke(cli, ["run"])
    assert res.exit_code == 9
    assert "lint" not in res.output.split("RESULTS")[-1]


def test_unexpected_error_exits_one(monkeypatch):
    def boom():
        raise RuntimeError("bad config")

    monkeypatch.setattr(cli_module, "lint_pipeline", boom)
    res = runner.invoke(cli, ["run"])
    assert res.exit_code == 1
    assert "bad config" in res.output


def test_interrupt_exits_130(monkeypatch):
    def interrupted(*args, **kwargs):
        raise KeyboardInterrupt

    monkeypatch.setattr(cli_module, "run_pipeline", interrupted)
    res = runner.invoke(cli, ["run"])
    assert res.exit_code == 130
    assert "Interrupted by user" in res.output


def test_debug_reports_each_step(fake_pipeline):
    fake_pipeline(0, 0, 0)
    res = runner.invoke(cli, ["--debug", "run"])
    assert res.exit_code == 0
    for name in ("format", "build", "lint"):
        assert f"[DEBUG] {name}: exit=0" in res.output


def test_no_debug_lines_by_default(fake_pipeline):
    fake_pipeline(0, 0, 0)
    res = runner.invoke(cli, ["run"])
    assert "[DEBUG]" not in res.output
