"""Doc test runner - isolated execution and reporting."""

from .executor import BaseExecutor, SubprocessExecutor, scoped_workspace
from .models import ExecutionOutcome, RunOptions, RunSummary, TestResult
from .reporter import format_dry_run, format_results
from .runner import DocTestRunner, run_examples

__all__ = [
    "BaseExecutor",
    "SubprocessExecutor",
    "scoped_workspace",
    "DocTestRunner",
    "run_examples",
    "format_results",
    "format_dry_run",
    "ExecutionOutcome",
    "RunOptions",
    "RunSummary",
    "TestResult",
]
