"""Separate import statements from example code and anchor relative paths."""

import os
import re

# A line whose first token is the import keyword (not import(...) or import.meta)
IMPORT_LINE = re.compile(r"^\s*import(?=[\s{*'\"])")

# from "./x" / import "../y"
RELATIVE_SPECIFIER = re.compile(r"""(\bfrom\s*|\bimport\s*)(['"])(\.{1,2}/[^'"]*)\2""")

IMPORT_CLAUSE = re.compile(r"""^\s*import\s+(?:type\s+)?(.*?)\s*\bfrom\s*['"]""", re.DOTALL)


def to_posix(path: str) -> str:
    return path.replace("\\", "/")


def resolve_relative_imports(statement: str, source_dir: str) -> str:
    """Rewrite ./ and ../ specifiers in statement to absolute paths under source_dir."""

    def _absolute(match: re.Match) -> str:
        prefix, quote, relative = match.groups()
        absolute = to_posix(os.path.normpath(os.path.join(source_dir, relative)))
        return f"{prefix}{quote}{absolute}{quote}"

    return RELATIVE_SPECIFIER.sub(_absolute, statement)


def split_imports(code: str, origin_file: str) -> tuple[list[str], list[str]]:
    """
    Split example code into import statements and the remaining lines.

    Order is kept within both groups. An import whose brace list spans
    several lines is collected as a single statement.

    Args:
        code: Cleaned example code
        origin_file: File the example came from (anchors relative imports)

    Returns:
        (imports, rest)
    """
    source_dir = os.path.dirname(os.path.abspath(origin_file))

    imports: list[str] = []
    rest: list[str] = []
    pending: list[str] | None = None

    for line in code.split("\n"):
        if pending is not None:
            pending.append(line)
            if "}" in line:
                imports.append(resolve_relative_imports("\n".join(pending), source_dir))
                pending = None
            continue

        if IMPORT_LINE.match(line):
            if line.count("{") > line.count("}"):
                pending = [line]
            else:
                imports.append(resolve_relative_imports(line, source_dir))
        else:
            rest.append(line)

    # Unterminated brace list: keep what we have as an import
    if pending is not None:
        imports.append(resolve_relative_imports("\n".join(pending), source_dir))

    return imports, rest


def imported_names(statement: str) -> set[str]:
    """Local names bound by one import statement (empty for side-effect imports)."""

    match = IMPORT_CLAUSE.match(statement)
    if not match:
        return set()

    clause = match.group(1)
    names: set[str] = set()

    braces = re.search(r"\{(.*?)\}", clause, re.DOTALL)
    if braces:
        for entry in braces.group(1).split(","):
            entry = re.sub(r"^type\s+", "", entry.strip())
            if entry:
                names.add(re.split(r"\s+as\s+", entry)[-1].strip())
        clause = clause[:braces.start()] + clause[braces.end():]

    namespace = re.search(r"\*\s*as\s+([A-Za-z_$][\w$]*)", clause)
    if namespace:
        names.add(namespace.group(1))
        clause = clause[:namespace.start()] + clause[namespace.end():]

    default = re.match(r"\s*([A-Za-z_$][\w$]*)", clause)
    if default:
        names.add(default.group(1))

    return names
