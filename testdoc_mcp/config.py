"""
Runtime configuration resolved from the environment.

TESTDOC_INTERPRETER      command used to run a synthesized unit (default: "npx tsx")
TESTDOC_ARTIFACT_SUFFIX  file suffix of the written unit (default: ".ts")
TESTDOC_TIMEOUT_MS       default per-example timeout in milliseconds
"""

from __future__ import annotations

import logging
import os
import shlex
from dataclasses import dataclass

from .constants import DEFAULT_ARTIFACT_SUFFIX, DEFAULT_INTERPRETER, DEFAULT_TIMEOUT_MS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Interpreter:
    """
    External script interpreter that runs one synthesized unit.

    Attributes:
        command: Program and leading arguments; the unit path is appended
        suffix: File suffix the unit is written with (".ts", ".mjs", ...)
    """
    command: tuple[str, ...] = DEFAULT_INTERPRETER
    suffix: str = DEFAULT_ARTIFACT_SUFFIX

    def argv(self, file_path: str) -> list[str]:
        """Full argument vector for running file_path."""
        return [*self.command, file_path]


def load_interpreter() -> Interpreter:
    """Build the Interpreter from TESTDOC_INTERPRETER / TESTDOC_ARTIFACT_SUFFIX."""

    raw_command = os.getenv("TESTDOC_INTERPRETER", "").strip()
    command = tuple(shlex.split(raw_command)) if raw_command else DEFAULT_INTERPRETER

    suffix = os.getenv("TESTDOC_ARTIFACT_SUFFIX", "").strip() or DEFAULT_ARTIFACT_SUFFIX
    if not suffix.startswith("."):
        suffix = f".{suffix}"

    return Interpreter(command=command, suffix=suffix)


def default_timeout_ms() -> int:
    """Per-example timeout from TESTDOC_TIMEOUT_MS, falling back to the built-in default."""

    raw = os.getenv("TESTDOC_TIMEOUT_MS")
    if not raw:
        return DEFAULT_TIMEOUT_MS

    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"Ignoring invalid TESTDOC_TIMEOUT_MS={raw!r}")
        return DEFAULT_TIMEOUT_MS

    if value <= 0:
        logger.warning(f"Ignoring non-positive TESTDOC_TIMEOUT_MS={raw!r}")
        return DEFAULT_TIMEOUT_MS
    return value
