"""MCP handler for the extract_doc_examples tool (dry run via DocTestService)."""

from __future__ import annotations

import json

from mcp.types import TextContent, Tool

from ...services import DocTestService, ServiceResult

# =============================================================================
# Tool Definition
# =============================================================================

TOOL_DEFINITION = Tool(
    name="extract_doc_examples",
    description=(
        "Extract the @example code blocks from JSDoc comments in TypeScript "
        "and JavaScript files without running them. Returns each example's "
        "name, file, line, code and any '// =>' expected output annotation."
    ),
    inputSchema={
        "type": "object",
        "properties": {
            "paths": {
                "type": "array",
                "items": {"type": "string"},
                "description": "Files or directories to scan"
            }
        },
        "required": ["paths"]
    }
)


# =============================================================================
# Handler
# =============================================================================

async def handle(arguments: dict) -> list[TextContent]:
    """Extract examples from 'paths' and return them as JSON."""
    service = DocTestService()

    result = service.discover(arguments.get("paths"))

    if not result.success:
        return _error_response(result)

    return [TextContent(type="text", text=json.dumps(result.data.to_dict(), indent=2))]


# =============================================================================
# Helpers
# =============================================================================

def _error_response(result: ServiceResult) -> list[TextContent]:
    """Create error response from failed ServiceResult."""
    return [TextContent(type="text", text=f"Error: {result.error.message}")]
