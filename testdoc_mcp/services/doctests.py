"""
Doc Test Service - discovery, dry runs and execution of JSDoc examples.

Wraps the core pipeline with:
- Input validation
- File discovery via SourceFinder
- Structured error handling via ServiceResult
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..core.extractor import ParseResult, parse_files
from ..core.runner import BaseExecutor, DocTestRunner, RunOptions, RunSummary
from .base import ErrorCode, ServiceResult
from .discovery import SourceFinder

logger = logging.getLogger(__name__)


class DocTestService:
    """
    Service for finding and running doc examples.

    Orchestrates:
    1. Path expansion (SourceFinder)
    2. Example extraction (parser)
    3. Sequential isolated execution (DocTestRunner)
    """

    def __init__(
        self,
        finder: SourceFinder | None = None,
        executor: BaseExecutor | None = None,
        working_dir: Path | str | None = None
    ):
        """
        Args:
            finder: SourceFinder instance (creates default if None)
            executor: Executor for synthesized units (subprocess if None)
            working_dir: Project directory examples run in (cwd if None)
        """
        self._finder = finder or SourceFinder()
        self._executor = executor
        self._working_dir = working_dir

    def discover(self, paths: list[str] | None) -> ServiceResult[ParseResult]:
        """
        Find every doc example under paths without running anything.

        Unreadable files and missing paths are reported in ParseResult.errors
        and do not stop discovery of the others; it is an error only when
        none of the paths exist.
        """
        validation_error = self._validate_paths(paths)
        if validation_error:
            return validation_error

        try:
            found = self._finder.find(paths)

            if not found.resolved:
                return ServiceResult.fail(
                    ErrorCode.FILE_NOT_FOUND,
                    f"No such file or directory: {', '.join(str(p) for p in paths)}",
                    details={"errors": found.errors}
                )

            parsed = parse_files(found.files)
        except Exception as e:
            logger.exception("Discovery failed")
            return ServiceResult.fail(
                ErrorCode.INTERNAL_ERROR,
                f"Discovery failed: {e}"
            )

        return ServiceResult.ok(ParseResult(
            examples=parsed.examples,
            errors=[*found.errors, *parsed.errors]
        ))

    async def run(
        self,
        paths: list[str] | None,
        options: RunOptions | None = None
    ) -> ServiceResult[RunSummary]:
        """Discover and run every doc example under paths."""

        options = options or RunOptions()

        validation_error = self._validate_options(options)
        if validation_error:
            return validation_error

        discovered = self.discover(paths)
        if not discovered.success:
            return ServiceResult.fail(
                discovered.error.code,
                discovered.error.message,
                discovered.error.details
            )

        parsed = discovered.data
        runner = DocTestRunner(
            executor=self._executor,
            options=options,
            working_dir=self._working_dir
        )

        try:
            results = await runner.run(parsed.examples)
        except Exception as e:
            logger.exception("Doc test run failed")
            return ServiceResult.fail(
                ErrorCode.EXECUTION_ERROR,
                f"Doc test run failed: {e}"
            )

        return ServiceResult.ok(RunSummary(results=results, errors=parsed.errors))

    def _validate_options(self, options: RunOptions) -> ServiceResult[RunSummary] | None:
        """Validate run options and return error if invalid."""

        timeout = options.timeout
        # bool is an int subclass
        if isinstance(timeout, bool) or not isinstance(timeout, int) or timeout <= 0:
            return ServiceResult.fail(
                ErrorCode.VALIDATION_ERROR,
                f"'timeout' must be a positive integer number of milliseconds (got {timeout!r})"
            )

        if not isinstance(options.verbose, bool):
            return ServiceResult.fail(
                ErrorCode.VALIDATION_ERROR,
                f"'verbose' must be a boolean (got {options.verbose!r})"
            )

        return None

    def _validate_paths(self, paths: list[str] | None) -> ServiceResult[ParseResult] | None:
        """Validate input paths and return error if invalid."""

        if not paths:
            return ServiceResult.fail(
                ErrorCode.MISSING_INPUT,
                "No files or directories specified"
            )

        if not isinstance(paths, (list, tuple)) or not all(isinstance(p, (str, Path)) for p in paths):
            return ServiceResult.fail(
                ErrorCode.VALIDATION_ERROR,
                "'paths' must be a list of file or directory paths"
            )

        return None
