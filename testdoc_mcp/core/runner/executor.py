"""Execute a synthesized unit in its own process, workspace and time budget."""

from __future__ import annotations

import asyncio
import contextlib
import logging
import os
import shutil
import signal
import time
import uuid
from abc import ABC, abstractmethod
from collections.abc import Iterator
from pathlib import Path

from ...config import Interpreter, load_interpreter
from ...constants import ARTIFACT_STEM, WORKSPACE_DIR_NAME
from .models import ExecutionOutcome

logger = logging.getLogger(__name__)

# Process groups let a timeout kill interpreter wrappers and their children together
_POSIX = os.name == "posix"

READ_CHUNK_SIZE = 64 * 1024

# How long to wait for output pipes to close after the process has exited
PIPE_DRAIN_SECONDS = 1.0


class BaseExecutor(ABC):
    """Runs program text and reports exit code and captured output."""

    @abstractmethod
    async def execute(
        self,
        program: str,
        working_dir: Path,
        timeout_ms: int
    ) -> ExecutionOutcome:
        """Run program with working_dir as its working directory."""
        pass


@contextlib.contextmanager
def scoped_workspace(working_dir: Path) -> Iterator[Path]:
    """
    Create a private directory under working_dir and always remove it.

    The directory lives inside the project (not the system temp dir) so the
    project's own node_modules resolve for the executed unit.
    """
    root = working_dir / WORKSPACE_DIR_NAME
    workspace = root / f"test-{int(time.time() * 1000)}-{uuid.uuid4().hex[:8]}"
    workspace.mkdir(parents=True)

    try:
        yield workspace
    finally:
        try:
            shutil.rmtree(workspace)
        except OSError as e:
            logger.debug(f"Could not remove {workspace}: {e}")

        # Only succeeds once no other workspace is left
        with contextlib.suppress(OSError):
            root.rmdir()


async def _drain(stream: asyncio.StreamReader, chunks: list[bytes]) -> None:
    while True:
        chunk = await stream.read(READ_CHUNK_SIZE)
        if not chunk:
            break
        chunks.append(chunk)


def _kill(process: asyncio.subprocess.Process) -> None:
    try:
        if _POSIX:
            os.killpg(process.pid, signal.SIGKILL)
        else:
            process.kill()
    except ProcessLookupError:
        pass


def _decode(chunks: list[bytes]) -> str:
    return b"".join(chunks).decode("utf-8", errors="replace")


class SubprocessExecutor(BaseExecutor):
    """Write the unit to a scoped workspace and run it with the configured interpreter."""

    def __init__(self, interpreter: Interpreter | None = None):
        self.interpreter = interpreter or load_interpreter()

    async def execute(
        self,
        program: str,
        working_dir: Path,
        timeout_ms: int
    ) -> ExecutionOutcome:
        """Run program in a fresh workspace; the workspace is removed on every path."""

        working_dir = Path(working_dir).resolve()

        with scoped_workspace(working_dir) as workspace:
            artifact = workspace / f"{ARTIFACT_STEM}{self.interpreter.suffix}"
            artifact.write_text(program, encoding="utf-8")

            return await self._run(artifact, working_dir, timeout_ms)

    async def _run(
        self,
        artifact: Path,
        working_dir: Path,
        timeout_ms: int
    ) -> ExecutionOutcome:
        """Spawn the interpreter, collect output incrementally, enforce the timeout."""

        argv = self.interpreter.argv(str(artifact))

        try:
            process = await asyncio.create_subprocess_exec(
                *argv,
                cwd=str(working_dir),
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                start_new_session=_POSIX
            )
        except OSError as e:
            logger.warning(f"Could not start interpreter {argv[0]!r}: {e}")
            return ExecutionOutcome(
                exit_code=1,
                stdout="",
                stderr=f"Failed to start interpreter {argv[0]!r}: {e}"
            )

        stdout_chunks: list[bytes] = []
        stderr_chunks: list[bytes] = []
        readers = [
            asyncio.create_task(_drain(process.stdout, stdout_chunks)),
            asyncio.create_task(_drain(process.stderr, stderr_chunks)),
        ]

        timed_out = False
        try:
            await asyncio.wait_for(process.wait(), timeout=timeout_ms / 1000)
        except asyncio.TimeoutError:
            timed_out = True
            logger.warning(f"{artifact} timed out after {timeout_ms}ms, killing")
            _kill(process)
            await process.wait()
        except asyncio.CancelledError:
            logger.debug(f"{artifact} cancelled, killing")
            _kill(process)
            for task in readers:
                task.cancel()
            raise

        # A surviving grandchild may hold the pipes open; don't wait on it forever
        _, pending = await asyncio.wait(readers, timeout=PIPE_DRAIN_SECONDS)
        for task in pending:
            task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)

        stdout = _decode(stdout_chunks)
        stderr = _decode(stderr_chunks)

        exit_code = process.returncode
        if exit_code is None or exit_code < 0:
            exit_code = 1

        if timed_out:
            exit_code = exit_code or 1
            stderr = f"Timed out after {timeout_ms}ms\n{stderr}"

        return ExecutionOutcome(
            exit_code=exit_code,
            stdout=stdout,
            stderr=stderr,
            timed_out=timed_out
        )
