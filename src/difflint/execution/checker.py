# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Launch the external checker and probe for its availability."""

from __future__ import annotations

import shutil
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Final, Protocol

from ..core.logging import RunLogger
from ..core.runtime.process import ProcessLaunchError, ProcessRunner, run_process

LAUNCH_FAILURE_STATUS: Final[int] = 1
WHICH_EXECUTABLE: Final[str] = "which"


class CheckerRunner(Protocol):
    """Callable that lints one file and returns the checker's exit status."""

    async def __call__(self, arguments: Sequence[str], *, timeout: float | None = None) -> int:
        """Run the checker with ``arguments`` and return its exit status."""

        raise NotImplementedError


async def run_checker(
    checker: str,
    arguments: Sequence[str],
    *,
    env: Mapping[str, str] | None = None,
    cwd: Path | None = None,
    timeout: float | None = None,
    runner: ProcessRunner | None = None,
    logger: RunLogger | None = None,
) -> int:
    """Run ``checker`` with ``arguments`` and return its exit status.

    The checker writes straight to the inherited stdout and stderr. A checker
    that cannot be launched counts as a failed lint: the error is reported and
    :data:`LAUNCH_FAILURE_STATUS` is returned instead of raising, so sibling
    invocations keep running.

    Args:
        checker: Checker executable name or path.
        arguments: Flags followed by the target file path.
        env: Environment for the checker process.
        cwd: Working directory for the checker process.
        timeout: Optional wall-clock limit in seconds.
        runner: Process runner; :func:`run_process` when ``None``.
        logger: Logger used for launch and timeout diagnostics.

    Returns:
        int: Checker exit status, or ``1`` when it could not be launched.
    """

    launch = runner or run_process
    log = logger or RunLogger()
    try:
        result = await launch([checker, *arguments], env=env, cwd=cwd, timeout=timeout)
    except ProcessLaunchError as exc:
        log.fail(f"Error running {checker}: {exc}")
        return LAUNCH_FAILURE_STATUS
    if result.timed_out:
        log.warn(f"{checker} timed out after {timeout}s: {' '.join(arguments)}")
    return result.returncode


async def is_checker_available(
    checker: str,
    *,
    env: Mapping[str, str] | None = None,
    runner: ProcessRunner | None = None,
) -> bool:
    """Return ``True`` when ``which`` locates ``checker`` on the search path.

    Hosts without a ``which`` executable fall back to :func:`shutil.which`
    over the same ``PATH``.

    Args:
        checker: Executable name to look up.
        env: Environment whose ``PATH`` is searched.
        runner: Process runner; :func:`run_process` when ``None``.

    Returns:
        bool: ``True`` if the lookup exits with status ``0``.
    """

    launch = runner or run_process
    try:
        result = await launch([WHICH_EXECUTABLE, checker], env=env, capture_output=True)
    except ProcessLaunchError:
        search_path = env.get("PATH") if env is not None else None
        return shutil.which(checker, path=search_path) is not None
    return result.returncode == 0


__all__ = [
    "LAUNCH_FAILURE_STATUS",
    "WHICH_EXECUTABLE",
    "CheckerRunner",
    "is_checker_available",
    "run_checker",
]
