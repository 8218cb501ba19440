"""Registry for core MCP tool definitions and handlers."""

# Tool definitions and handlers
from .extract_examples import (
    TOOL_DEFINITION as EXTRACT_DOC_EXAMPLES_TOOL,
    handle as handle_extract_doc_examples,
)

from .run_doc_tests import (
    TOOL_DEFINITION as RUN_DOC_TESTS_TOOL,
    handle as handle_run_doc_tests,
)


# All Core tool definitions
TOOLS = [
    EXTRACT_DOC_EXAMPLES_TOOL,
    RUN_DOC_TESTS_TOOL,
]

# Tool name to handler mapping
HANDLERS = {
    "extract_doc_examples": handle_extract_doc_examples,
    "run_doc_tests": handle_run_doc_tests,
}


__all__ = [
    # Tool definitions
    "TOOLS",
    "EXTRACT_DOC_EXAMPLES_TOOL",
    "RUN_DOC_TESTS_TOOL",
    # Handlers
    "HANDLERS",
    "handle_extract_doc_examples",
    "handle_run_doc_tests",
]
