"""
Source Discovery - expands input paths into the source files to scan.

Files are taken as given; directories are walked recursively in sorted
order, skipping hidden directories and node_modules.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ..constants import IGNORED_DIRECTORIES, SOURCE_EXTENSIONS


@dataclass(frozen=True)
class DiscoveredFiles:
    """
    Outcome of expanding input paths.

    Attributes:
        files: Source files in discovery order
        errors: Diagnostics for paths that could not be used
        resolved: How many of the input paths exist
    """
    files: list[Path] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    resolved: int = 0


class SourceFinder:
    """
    Finds JavaScript/TypeScript sources under the given paths.

    This class is stateless - all configuration is passed to __init__.
    """

    def __init__(
        self,
        extensions: frozenset[str] = SOURCE_EXTENSIONS,
        ignored_directories: frozenset[str] = IGNORED_DIRECTORIES
    ):
        self._extensions = extensions
        self._ignored = ignored_directories

    def find(self, paths: list[str | Path]) -> DiscoveredFiles:
        """Expand paths into source files, in the order the paths were given."""

        files: list[Path] = []
        errors: list[str] = []
        resolved = 0

        for raw in paths:
            path = Path(raw)

            if path.is_dir():
                files.extend(self._walk(path))
            elif path.is_file():
                files.append(path)
            else:
                errors.append(f"Failed to parse {path}: path does not exist")
                continue

            resolved += 1

        return DiscoveredFiles(files=files, errors=errors, resolved=resolved)

    def is_source_file(self, path: Path) -> bool:
        return path.suffix in self._extensions

    def _walk(self, directory: Path) -> list[Path]:
        found = []

        for entry in sorted(directory.iterdir(), key=lambda p: p.name):
            if entry.is_dir():
                if entry.name.startswith(".") or entry.name in self._ignored:
                    continue
                found.extend(self._walk(entry))
            elif entry.is_file() and self.is_source_file(entry):
                found.append(entry)

        return found
