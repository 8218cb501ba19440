"""Typer-based CLI: run the code examples in JSDoc comments as tests."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import List, Optional

import typer

from . import __version__
from .config import default_timeout_ms
from .core.runner import DocTestRunner, RunOptions, RunSummary, format_dry_run, format_results
from .services import DocTestService

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Run the code examples in JSDoc comments as isolated tests.",
    add_completion=False,
)

EPILOG = """\
Write doc examples in your code like this:

  /**
   * Adds two numbers together.
   *
   * @example
   * ```ts
   * const result = add(1, 2);
   * assertEqual(result, 3);
   * ```
   */
  export function add(a: number, b: number): number {
    return a + b;
  }
"""


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        typer.echo(f"testdoc v{__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _scan_and_run(paths: list[Path], options: RunOptions, dry_run: bool) -> int:
    """Discover, optionally run, print; returns the process exit code."""

    typer.echo(f"\nScanning for doc examples in: {', '.join(str(p) for p in paths)}\n")

    discovered = DocTestService().discover([str(p) for p in paths])
    if not discovered.success:
        for error in (discovered.error.details or {}).get("errors", []):
            typer.echo(f"⚠️  {error}", err=True)
        typer.echo(f"Error: {discovered.error.message}", err=True)
        return 1

    parsed = discovered.data
    for error in parsed.errors:
        typer.echo(f"⚠️  {error}", err=True)

    if not parsed.examples:
        typer.echo("No @example blocks found in JSDoc comments.")
        return 0

    typer.echo(f"Found {len(parsed.examples)} doc example(s)\n")

    if dry_run:
        typer.echo("Dry run - showing examples without executing:\n")
        typer.echo(format_dry_run(parsed.examples))
        return 0

    typer.echo("Running doc tests...\n")

    runner = DocTestRunner(options=options)
    results = asyncio.run(runner.run(parsed.examples))
    typer.echo(format_results(results, verbose=options.verbose))

    return RunSummary(results=results, errors=parsed.errors).exit_code


@app.command(epilog=EPILOG)
def main(
    paths: Optional[List[Path]] = typer.Argument(None, help="Files or directories to scan."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show verbose output."),
    timeout: Optional[int] = typer.Option(
        None, "--timeout", min=1, help="Per-example timeout in ms (default: 5000)."
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run", help="Parse and show examples without running them."
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
):
    """Run code examples from JSDoc comments as tests."""
    _configure_logging(verbose)

    if not paths:
        typer.echo("Error: No files or directories specified", err=True)
        raise typer.Exit(code=1)

    options = RunOptions(verbose=verbose, timeout=timeout or default_timeout_ms())

    try:
        exit_code = _scan_and_run(paths, options, dry_run)
    except Exception as e:
        logger.debug("Fatal error", exc_info=True)
        typer.echo(f"Fatal error: {e}", err=True)
        exit_code = 1

    raise typer.Exit(code=exit_code)


if __name__ == "__main__":
    app()
