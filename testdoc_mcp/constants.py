"""
Shared constants used across the project.
"""

from typing import Final

# Source files scanned for JSDoc examples
SOURCE_EXTENSIONS: Final[frozenset[str]] = frozenset({
    ".ts", ".tsx", ".js", ".jsx", ".mts", ".mjs"
})

# Directory names never descended into during discovery
IGNORED_DIRECTORIES: Final[frozenset[str]] = frozenset({"node_modules"})

# Declaration keywords that can own a documentation comment
DECLARATION_KEYWORDS: Final[tuple[str, ...]] = (
    "function", "const", "let", "var", "class", "interface", "type", "enum"
)

# Test execution
DEFAULT_TIMEOUT_MS: Final[int] = 5000
WORKSPACE_DIR_NAME: Final[str] = ".testdoc"
ARTIFACT_STEM: Final[str] = "test"

# Interpreter used to run synthesized units (overridable, see config.py)
DEFAULT_INTERPRETER: Final[tuple[str, ...]] = ("npx", "tsx")
DEFAULT_ARTIFACT_SUFFIX: Final[str] = ".ts"

# Reporting
MAX_ERROR_LINES: Final[int] = 10
SUMMARY_RULE_WIDTH: Final[int] = 50
