"""Parse source files into DocExample records."""

import logging
from pathlib import Path

from .comments import extract_comments
from .examples import extract_examples
from .models import DocExample, ParseResult

logger = logging.getLogger(__name__)


def parse_source(source: str, origin_file: str) -> list[DocExample]:
    """Extract every doc example from source text attributed to origin_file."""

    examples = []

    for block in extract_comments(source):
        extracted = extract_examples(block.body)
        numbered = len(extracted) > 1

        for index, example in enumerate(extracted, start=1):
            examples.append(DocExample(
                origin_file=origin_file,
                line=block.line,
                name=f"{block.owner}_example{index}" if numbered else block.owner,
                code=example.code,
                expected_output=example.expected_output
            ))

    return examples


def parse_file(file_path: str | Path) -> ParseResult:
    """Parse a single file; read/decode failures become diagnostics, not exceptions."""

    path = str(file_path)

    try:
        source = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        message = f"Failed to parse {path}: {e}"
        logger.warning(message)
        return ParseResult(errors=[message])

    examples = parse_source(source, path)
    logger.debug(f"{path}: {len(examples)} example(s)")

    return ParseResult(examples=examples)


def parse_files(file_paths: list[str | Path]) -> ParseResult:
    """Parse files in order and merge their examples and diagnostics."""

    result = ParseResult()

    for file_path in file_paths:
        result.extend(parse_file(file_path))

    return result
