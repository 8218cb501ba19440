"""Resolve the names a source file exports (regex based, no full parse)."""

import logging
import re
from pathlib import Path

logger = logging.getLogger(__name__)

# export [declare] [abstract] [async] function|const|... name
DECLARATION_EXPORT = re.compile(
    r"\bexport\s+(?:declare\s+)?(?:abstract\s+)?(?:async\s+)?"
    r"(?:const\s+enum\s+|function\s*\*\s*|(?:function|const|let|var|class|interface|type|enum)\s+)"
    r"([A-Za-z_$][\w$]*)"
)

# export { a, b as c } (also matches re-exports: export { a } from "./x")
NAMED_EXPORT = re.compile(r"\bexport\s*\{([^}]*)\}")

IDENTIFIER = re.compile(r"[A-Za-z_$][\w$]*")

# Names that cannot be bound by destructuring
RESERVED_NAMES = frozenset({"default"})


def _named_entries(body: str) -> list[str]:
    """Pre-alias names from the inside of an export { ... } list."""

    names = []
    for entry in body.split(","):
        entry = entry.strip()

        # Type-only entries have no runtime value
        if not entry or entry.startswith("type "):
            continue

        name = re.split(r"\s+as\s+", entry)[0].strip()
        if IDENTIFIER.fullmatch(name) and name not in RESERVED_NAMES:
            names.append(name)

    return names


def find_export_names(source: str) -> list[str]:
    """Exported identifiers in source, deduplicated, in order of first occurrence."""

    found: list[tuple[int, str]] = []

    for match in DECLARATION_EXPORT.finditer(source):
        found.append((match.start(), match.group(1)))

    for match in NAMED_EXPORT.finditer(source):
        for name in _named_entries(match.group(1)):
            found.append((match.start(), name))

    found.sort(key=lambda item: item[0])

    # dict preserves first insertion order
    return list(dict.fromkeys(name for _, name in found))


def get_export_names(file_path: str | Path) -> list[str]:
    """Exported identifiers of a file; an unreadable file yields an empty list."""

    try:
        source = Path(file_path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Could not resolve exports of {file_path}: {e}")
        return []

    return find_export_names(source)
