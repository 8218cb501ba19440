"""Locate JSDoc comments and the declarations they document."""

import re

from ...constants import DECLARATION_KEYWORDS
from .models import CommentBlock

JSDOC_PATTERN = re.compile(r"/\*\*(.*?)\*/", re.DOTALL)

# Modifiers allowed between the comment and the declaration keyword
_MODIFIERS = r"(?:(?:export|default|declare|abstract|async)\s+)*"

# "const enum" before "const"; generators may be spelled "function* g" or "function *g"
_KEYWORDS = "|".join(
    [r"const\s+enum\s+", r"function\s*\*\s*"]
    + [k + r"\s+" for k in DECLARATION_KEYWORDS]
)

OWNER_PATTERN = re.compile(r"\s*" + _MODIFIERS + r"(?:" + _KEYWORDS + r")(\w+)")


def line_of(source: str, offset: int) -> int:
    """1-based line number of the character at offset."""
    return source.count("\n", 0, offset) + 1


def find_owner(source: str, end: int) -> str | None:
    """Name of the declaration starting right after position end, if any."""
    match = OWNER_PATTERN.match(source, end)
    return match.group(1) if match else None


def extract_comments(source: str) -> list[CommentBlock]:
    """Return every JSDoc comment in source order with its line and owner name."""

    blocks = []

    for match in JSDOC_PATTERN.finditer(source):
        line = line_of(source, match.start())
        owner = find_owner(source, match.end()) or f"anonymous_{line}"

        blocks.append(CommentBlock(
            body=match.group(1),
            line=line,
            owner=owner
        ))

    return blocks
