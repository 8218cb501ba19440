"""Data models for doc example extraction."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class CommentBlock:
    """A JSDoc comment and the declaration it documents."""
    body: str           # Text between /** and */
    line: int           # 1-based line of the opening /**
    owner: str          # "add" or "anonymous_12"


@dataclass(frozen=True)
class ExtractedExample:
    """Cleaned example code from one @example section."""
    code: str
    expected_output: str | None = None


@dataclass(frozen=True)
class DocExample:
    """A single runnable example found in a documentation comment."""
    origin_file: str
    line: int
    name: str
    code: str
    expected_output: str | None = None

    @property
    def location(self) -> str:
        return f"{self.origin_file}:{self.line}"

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "file": self.origin_file,
            "line": self.line,
            "code": self.code,
            "expected_output": self.expected_output,
        }


@dataclass
class ParseResult:
    """Examples found across one or more files, plus per-file diagnostics."""
    examples: list[DocExample] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    def extend(self, other: "ParseResult") -> None:
        self.examples.extend(other.examples)
        self.errors.extend(other.errors)

    def to_dict(self) -> dict:
        return {
            "total": len(self.examples),
            "examples": [e.to_dict() for e in self.examples],
            "errors": self.errors,
        }
