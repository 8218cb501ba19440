"""Data models for doc test execution."""

from dataclasses import dataclass, field

from ...config import default_timeout_ms
from ..extractor.models import DocExample


@dataclass(frozen=True)
class RunOptions:
    """Options shared by every example in a run."""
    verbose: bool = False
    timeout: int = field(default_factory=default_timeout_ms)  # milliseconds


@dataclass(frozen=True)
class ExecutionOutcome:
    """What the interpreter process reported."""
    exit_code: int
    stdout: str
    stderr: str
    timed_out: bool = False

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0 and not self.timed_out


@dataclass(frozen=True)
class TestResult:
    """Result of running a single doc example."""
    __test__ = False  # not a pytest test class

    example: DocExample
    passed: bool
    duration: int                  # milliseconds
    error: str | None = None
    output: str = ""
    timed_out: bool = False

    def to_dict(self) -> dict:
        return {
            "name": self.example.name,
            "location": self.example.location,
            "passed": self.passed,
            "duration_ms": self.duration,
            "timed_out": self.timed_out,
            "error": self.error,
            "output": self.output,
        }


@dataclass
class RunSummary:
    """Complete doc test run: per-example results plus discovery diagnostics."""
    results: list[TestResult]
    errors: list[str] = field(default_factory=list)

    @property
    def passed(self) -> int:
        return sum(1 for r in self.results if r.passed)

    @property
    def failed(self) -> int:
        return sum(1 for r in self.results if not r.passed)

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def success(self) -> bool:
        return self.failed == 0

    @property
    def exit_code(self) -> int:
        return 0 if self.success else 1

    def to_dict(self) -> dict:
        return {
            "summary": {
                "total": self.total,
                "passed": self.passed,
                "failed": self.failed,
            },
            "results": [r.to_dict() for r in self.results],
            "errors": self.errors,
        }
