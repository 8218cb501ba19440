"""Pytest configuration and fixtures for testdoc tests."""

from pathlib import Path

import pytest

from testdoc_mcp.config import Interpreter
from testdoc_mcp.core.extractor import DocExample
from testdoc_mcp.core.runner import BaseExecutor, ExecutionOutcome


class FakeExecutor(BaseExecutor):
    """Records every program it is asked to run and replays canned outcomes."""

    def __init__(self, outcomes: list | None = None):
        self.outcomes = list(outcomes or [])
        self.calls: list[tuple[str, Path, int]] = []

    async def execute(self, program: str, working_dir: Path, timeout_ms: int) -> ExecutionOutcome:
        self.calls.append((program, working_dir, timeout_ms))

        outcome = self.outcomes.pop(0) if self.outcomes else ExecutionOutcome(0, "", "")
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


@pytest.fixture
def fake_executor():
    """Executor that never spawns a process."""
    return FakeExecutor()


@pytest.fixture
def node_interpreter():
    """Run synthesized units with plain node as ES modules."""
    return Interpreter(command=("node",), suffix=".mjs")


@pytest.fixture
def make_example(tmp_path: Path):
    """Factory for DocExample records whose origin file lives in tmp_path."""

    def _make(code: str, name: str = "add", origin: str = "math.mjs", line: int = 1) -> DocExample:
        return DocExample(
            origin_file=str(tmp_path / origin),
            line=line,
            name=name,
            code=code,
        )

    return _make


@pytest.fixture
def math_module(tmp_path: Path) -> Path:
    """A small ES module with documented exports."""
    path = tmp_path / "math.mjs"
    path.write_text(
        '/**\n'
        ' * Adds two numbers together.\n'
        ' *\n'
        ' * @example\n'
        ' * ```js\n'
        ' * assertEqual(add(2, 3), 5);\n'
        ' * ```\n'
        ' */\n'
        'export function add(a, b) {\n'
        '  return a + b;\n'
        '}\n'
        '\n'
        'export function multiply(a, b) {\n'
        '  return a * b;\n'
        '}\n',
        encoding="utf-8",
    )
    return path
