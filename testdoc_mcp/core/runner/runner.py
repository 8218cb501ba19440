"""Run doc examples one at a time and collect their results."""

from __future__ import annotations

import logging
import time
from pathlib import Path

from ..extractor.models import DocExample
from ..synthesizer import synthesize
from .executor import BaseExecutor, SubprocessExecutor
from .models import RunOptions, TestResult

logger = logging.getLogger(__name__)


def _elapsed_ms(start: float) -> int:
    return int((time.monotonic() - start) * 1000)


class DocTestRunner:
    """
    Synthesize and execute doc examples strictly sequentially.

    A failure of one example (including an unexpected error while
    synthesizing or executing it) is recorded as that example's result and
    never stops the remaining examples.
    """

    def __init__(
        self,
        executor: BaseExecutor | None = None,
        options: RunOptions | None = None,
        working_dir: Path | str | None = None
    ):
        """
        Args:
            executor: Executes synthesized units (SubprocessExecutor if None)
            options: Run options (timeout, verbosity)
            working_dir: Project directory examples run in (cwd if None)
        """
        self.executor = executor or SubprocessExecutor()
        self.options = options or RunOptions()
        self.working_dir = Path(working_dir) if working_dir else Path.cwd()

    async def run_example(self, example: DocExample) -> TestResult:
        """Synthesize and execute one example."""

        start = time.monotonic()

        try:
            program = synthesize(example)
            outcome = await self.executor.execute(
                program,
                self.working_dir,
                self.options.timeout
            )
        except Exception as e:
            logger.warning(f"{example.name} ({example.location}): runner error: {e}")
            return TestResult(
                example=example,
                passed=False,
                duration=_elapsed_ms(start),
                error=f"Runner error: {e}"
            )

        passed = outcome.succeeded
        error = None
        if not passed:
            error = outcome.stderr or outcome.stdout or f"Process exited with code {outcome.exit_code}"

        return TestResult(
            example=example,
            passed=passed,
            duration=_elapsed_ms(start),
            error=error,
            output=outcome.stdout,
            timed_out=outcome.timed_out
        )

    async def run(self, examples: list[DocExample]) -> list[TestResult]:
        """Run every example in order; results are returned in input order."""

        results = []

        for example in examples:
            result = await self.run_example(example)
            logger.debug(
                f"{'PASSED' if result.passed else 'FAILED'} {example.name} "
                f"({example.location}) in {result.duration}ms"
            )
            results.append(result)

        return results


async def run_examples(
    examples: list[DocExample],
    options: RunOptions | None = None,
    executor: BaseExecutor | None = None
) -> list[TestResult]:
    """Convenience wrapper that runs examples via DocTestRunner."""
    runner = DocTestRunner(executor=executor, options=options)
    return await runner.run(examples)
