"""
testdoc-mcp

Run the code examples in JSDoc comments as isolated tests.
Extract, Synthesize, Execute, Report.
"""

__version__ = "0.1.0"

# Public API
from .core import (
    DocExample,
    DocTestRunner,
    ParseResult,
    TestResult,
    format_results,
    parse_file,
    parse_files,
    run_examples,
    synthesize,
)

__all__ = [
    "__version__",
    # Extractor
    "parse_file",
    "parse_files",
    "DocExample",
    "ParseResult",
    # Synthesizer
    "synthesize",
    # Runner
    "run_examples",
    "DocTestRunner",
    "TestResult",
    "format_results",
]
