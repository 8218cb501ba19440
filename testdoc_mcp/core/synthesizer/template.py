"""
Unit Synthesizer - turns one DocExample into a standalone program.

Layout of a synthesized unit:
    header comment
    namespace import of the origin file
    user imports (relative paths made absolute)
    destructuring of the origin file's exports
    assertion helpers
    example body wrapped in an async function
    invocation that exits non-zero on any escaping error
"""

import json
from pathlib import Path

from ..extractor.models import DocExample
from .exports import get_export_names
from .imports import imported_names, split_imports, to_posix

MODULE_ALIAS = "__testdoc_module"
RUNNER_NAME = "__runExample"
BODY_INDENT = "  "

ASSERTION_HELPERS = """\
function assert(condition, message) {
  if (!condition) {
    throw new Error(message ?? "Assertion failed");
  }
}

function assertEqual(actual, expected, message) {
  if (actual !== expected) {
    throw new Error(
      message ?? `Expected ${JSON.stringify(expected)}, got ${JSON.stringify(actual)}`
    );
  }
}"""


def _js_string(value: str) -> str:
    return json.dumps(value)


def origin_import_path(origin_file: str) -> str:
    """Absolute, '/'-separated path of the origin module."""
    return to_posix(str(Path(origin_file).resolve()))


def build_prelude(
    example: DocExample,
    user_imports: list[str],
    export_names: list[str]
) -> str:
    """Everything that precedes the wrapped body."""

    lines = [
        f"// Auto-generated test for: {example.name}",
        f"// From: {example.location}",
        "",
        f"import * as {MODULE_ALIAS} from {_js_string(origin_import_path(example.origin_file))};",
    ]
    lines.extend(user_imports)

    # Names the example imports itself would be declared twice
    already_bound: set[str] = set()
    for statement in user_imports:
        already_bound |= imported_names(statement)

    ambient = [name for name in export_names if name not in already_bound]
    if ambient:
        lines.append("")
        lines.append(f"const {{ {', '.join(ambient)} }} = {MODULE_ALIAS};")

    lines.append("")
    lines.append(ASSERTION_HELPERS)

    return "\n".join(lines)


def wrap_body(body_lines: list[str]) -> str:
    """Wrap statements in an async runner that fails the process on error."""

    indented = [f"{BODY_INDENT}{line}" if line.strip() else "" for line in body_lines]

    return "\n".join([
        f"async function {RUNNER_NAME}() {{",
        *indented,
        "}",
        "",
        f"{RUNNER_NAME}().catch((err) => {{",
        "  console.error(err);",
        "  process.exit(1);",
        "});",
    ])


def synthesize(example: DocExample, export_names: list[str] | None = None) -> str:
    """
    Build the complete program text for one example.

    Args:
        example: The example to run
        export_names: Exports of the origin file (resolved from disk if None)

    Returns:
        Program text ready to be written and executed
    """
    if export_names is None:
        export_names = get_export_names(example.origin_file)

    user_imports, body = split_imports(example.code, example.origin_file)

    prelude = build_prelude(example, user_imports, export_names)

    return f"{prelude}\n\n{wrap_body(body)}\n"
