"""Core domain logic: extract, synthesize, execute, report."""


from .extractor import DocExample, ParseResult, parse_file, parse_files, parse_source
from .runner import (
    DocTestRunner,
    RunOptions,
    RunSummary,
    SubprocessExecutor,
    TestResult,
    format_dry_run,
    format_results,
    run_examples,
)
from .synthesizer import get_export_names, synthesize

__all__ = [
    # Extractor
    "parse_source",
    "parse_file",
    "parse_files",
    "DocExample",
    "ParseResult",
    # Synthesizer
    "get_export_names",
    "synthesize",
    # Runner
    "DocTestRunner",
    "SubprocessExecutor",
    "RunOptions",
    "RunSummary",
    "TestResult",
    "run_examples",
    "format_results",
    "format_dry_run",
]
