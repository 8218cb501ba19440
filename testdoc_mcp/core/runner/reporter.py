"""Human-readable rendering of doc test runs."""

import os
from pathlib import Path

from ...constants import MAX_ERROR_LINES, SUMMARY_RULE_WIDTH
from ..extractor.models import DocExample
from .models import TestResult

PASS_MARK = "✓"
FAIL_MARK = "✗"


def _relative(path: str, root: Path | str | None) -> str:
    base = root if root is not None else os.getcwd()
    try:
        return os.path.relpath(path, base)
    except ValueError:
        # Different drive on Windows
        return path


def _excerpt(text: str, limit: int = MAX_ERROR_LINES) -> list[str]:
    return text.rstrip("\n").split("\n")[:limit]


def format_results(
    results: list[TestResult],
    root: Path | str | None = None,
    verbose: bool = False
) -> str:
    """
    Format results as a per-example listing followed by a summary line.

    Args:
        results: Results in run order
        root: Directory locations are shown relative to (cwd if None)
        verbose: Also show captured stdout of every example

    Returns:
        Multi-line report text
    """
    lines = []
    passed = 0
    failed = 0

    for result in results:
        example = result.example
        status = PASS_MARK if result.passed else FAIL_MARK

        lines.append(f"{status} {example.name} ({result.duration}ms)")
        lines.append(f"  {_relative(example.origin_file, root)}:{example.line}")

        if result.passed:
            passed += 1
        else:
            failed += 1
            if result.error:
                lines.extend(f"  {line}" for line in _excerpt(result.error))

        if verbose and result.output.strip():
            lines.append("  output:")
            lines.extend(f"    {line}" for line in _excerpt(result.output))

        lines.append("")

    lines.append("─" * SUMMARY_RULE_WIDTH)
    lines.append(f"{passed} passed, {failed} failed, {len(results)} total")

    return "\n".join(lines)


def format_dry_run(examples: list[DocExample]) -> str:
    """Show each example's name, location and code without running anything."""

    lines = []

    for example in examples:
        lines.append(f"─── {example.name} ({example.location}) ───")
        lines.append(example.code)
        lines.append("")

    return "\n".join(lines)
