"""Synthesizer - build standalone programs from doc examples."""

from .exports import find_export_names, get_export_names
from .imports import imported_names, resolve_relative_imports, split_imports
from .template import ASSERTION_HELPERS, MODULE_ALIAS, build_prelude, synthesize, wrap_body

__all__ = [
    "find_export_names",
    "get_export_names",
    "split_imports",
    "resolve_relative_imports",
    "imported_names",
    "build_prelude",
    "wrap_body",
    "synthesize",
    "ASSERTION_HELPERS",
    "MODULE_ALIAS",
]
