"""Extractor - JSDoc comment scanning and @example extraction."""

from .comments import extract_comments
from .examples import clean_example_code, extract_examples
from .expectations import annotate, find_expected_output
from .models import CommentBlock, DocExample, ExtractedExample, ParseResult
from .parser import parse_file, parse_files, parse_source

__all__ = [
    "extract_comments",
    "extract_examples",
    "clean_example_code",
    "annotate",
    "find_expected_output",
    "parse_source",
    "parse_file",
    "parse_files",
    "CommentBlock",
    "ExtractedExample",
    "DocExample",
    "ParseResult",
]
