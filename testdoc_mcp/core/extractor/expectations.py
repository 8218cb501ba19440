"""Recognize inline expected-output annotations in example code."""

import re

# Matches: // => value, // -> value, // output: value
OUTPUT_ANNOTATION = re.compile(r"//\s*(?:=>|->|output:)\s*(.+)$")


def find_expected_output(code: str) -> str | None:
    """Return the text of the first output annotation in code (or None)."""

    for line in code.split("\n"):
        match = OUTPUT_ANNOTATION.search(line)
        if match:
            expected = match.group(1).strip()
            if expected:
                return expected

    return None


def annotate(code: str) -> tuple[str, str | None]:
    """Pair code with its expected output; the code itself is never modified."""
    return code, find_expected_output(code)
