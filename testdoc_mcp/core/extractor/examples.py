"""Extract @example sections from a JSDoc comment body."""

import re
import textwrap

from .expectations import annotate
from .models import ExtractedExample

# @example followed by a fenced block; the language tag is ignored
FENCED_EXAMPLE = re.compile(r"@example[\s*]*```[^\n`]*\n(.*?)```", re.DOTALL)

# @example followed by " *   indented" continuation lines (no fence)
INDENTED_EXAMPLE = re.compile(r"@example[ \t]*\n((?:[ \t]*\*[ \t]{2,}[^\n]+\n?)+)")

CONTINUATION_MARKER = re.compile(r"^\s*\* ?")


def clean_example_code(raw: str) -> str:
    """Strip one leading ' * ' marker per line and drop surrounding blank lines."""

    lines = [CONTINUATION_MARKER.sub("", line, count=1) for line in raw.split("\n")]

    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()

    return "\n".join(lines)


def _to_example(code: str) -> ExtractedExample:
    code, expected = annotate(code)
    return ExtractedExample(code=code, expected_output=expected)


def extract_examples(comment: str) -> list[ExtractedExample]:
    """Extract every @example from a comment body, in order of appearance."""

    examples = [
        _to_example(clean_example_code(match.group(1)))
        for match in FENCED_EXAMPLE.finditer(comment)
    ]

    if examples:
        return examples

    # Fallback: indented examples without a fence
    for match in INDENTED_EXAMPLE.finditer(comment):
        code = textwrap.dedent(clean_example_code(match.group(1)))
        if code.strip():
            examples.append(_to_example(code))

    return examples
