# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Asynchronous wrappers around external process execution."""

from __future__ import annotations

import asyncio
import contextlib
import shutil
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Final, Protocol

TIMEOUT_RETURNCODE: Final[int] = 124


class ProcessLaunchError(RuntimeError):
    """Raised when an external command cannot be started."""

    def __init__(self, command: Sequence[str], reason: str) -> None:
        """Initialise the error with the command that failed to launch.

        Args:
            command: Command sequence that could not be started.
            reason: Human-readable cause reported by the operating system.
        """

        head = command[0] if command else "<empty>"
        super().__init__(f"Command '{head}' could not be launched: {reason}")
        self.command = tuple(command)
        self.reason = reason


@dataclass(frozen=True, slots=True)
class ProcessResult:
    """Termination status and optional captured stdout of a finished process."""

    returncode: int
    stdout: bytes | None = None
    timed_out: bool = False

    def text(self) -> str:
        """Return captured stdout decoded as UTF-8.

        Returns:
            str: Decoded output, or an empty string when nothing was captured
            or the payload is not valid UTF-8.
        """

        if not self.stdout:
            return ""
        try:
            return self.stdout.decode("utf-8")
        except UnicodeDecodeError:
            return ""

    def lines(self) -> list[str]:
        """Return the non-empty lines of the decoded stdout.

        Returns:
            list[str]: Output lines with blank entries removed.
        """

        return [line for line in self.text().splitlines() if line]


class ProcessRunner(Protocol):
    """Callable protocol implemented by :func:`run_process` and test doubles."""

    async def __call__(
        self,
        args: Sequence[str],
        *,
        env: Mapping[str, str] | None = None,
        cwd: Path | None = None,
        capture_output: bool = False,
        timeout: float | None = None,
    ) -> ProcessResult:
        """Run ``args`` to completion and return its result.

        Args:
            args: Command and argument sequence to execute.
            env: Optional environment for the child process.
            cwd: Optional working directory for the child process.
            capture_output: When ``True`` collect stdout instead of inheriting it.
            timeout: Optional wall-clock limit in seconds.

        Returns:
            ProcessResult: Termination metadata for the finished process.
        """

        raise NotImplementedError


def _normalize_args(args: Sequence[str], env: Mapping[str, str] | None) -> list[str]:
    """Resolve the executable of ``args`` against the effective ``PATH``.

    Args:
        args: Raw command arguments supplied by the caller.
        env: Environment whose ``PATH`` is searched; the process ``PATH`` is
            used when ``None``.

    Returns:
        list[str]: Argument list with an absolute executable path.

    Raises:
        ValueError: If no arguments are provided.
        ProcessLaunchError: If the executable cannot be found.
    """

    if not args:
        msg = "subprocess command requires at least one argument"
        raise ValueError(msg)

    head, *rest = args
    head_path = Path(head)
    if head_path.is_absolute():
        return [str(head_path), *rest]

    search_path = env.get("PATH") if env is not None else None
    resolved = shutil.which(head, path=search_path)
    if resolved is None:
        raise ProcessLaunchError(args, f"executable '{head}' was not found on PATH")
    return [resolved, *rest]


async def run_process(
    args: Sequence[str],
    *,
    env: Mapping[str, str] | None = None,
    cwd: Path | None = None,
    capture_output: bool = False,
    timeout: float | None = None,
) -> ProcessResult:
    """Run ``args`` without blocking the event loop and wait for it to exit.

    The child inherits stdout and stderr unless ``capture_output`` is set, in
    which case stdout is drained while waiting for exit so a full pipe cannot
    stall the child.

    Args:
        args: Command and argument sequence to execute.
        env: Optional environment for the child process.
        cwd: Optional working directory for the child process.
        capture_output: When ``True`` collect stdout into the result.
        timeout: Optional wall-clock limit in seconds. Expiry kills the child
            and yields :data:`TIMEOUT_RETURNCODE`.

    Returns:
        ProcessResult: Exit status and captured stdout of the child.

    Raises:
        ProcessLaunchError: If the executable is missing or cannot be executed.
    """

    normalized = _normalize_args(args, env)
    try:
        process = await asyncio.create_subprocess_exec(
            *normalized,
            cwd=str(cwd) if cwd is not None else None,
            env=dict(env) if env is not None else None,
            stdout=asyncio.subprocess.PIPE if capture_output else None,
        )
    except OSError as exc:
        raise ProcessLaunchError(normalized, exc.strerror or str(exc)) from exc

    try:
        stdout, _ = await asyncio.wait_for(process.communicate(), timeout=timeout)
    except TimeoutError:
        with contextlib.suppress(ProcessLookupError):
            process.kill()
        await process.wait()
        return ProcessResult(
            returncode=TIMEOUT_RETURNCODE,
            stdout=b"" if capture_output else None,
            timed_out=True,
        )

    returncode = process.returncode if process.returncode is not None else 1
    return ProcessResult(returncode=returncode, stdout=stdout if capture_output else None)


__all__ = [
    "TIMEOUT_RETURNCODE",
    "ProcessLaunchError",
    "ProcessResult",
    "ProcessRunner",
    "run_process",
]
