# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Fan a file list out to one concurrent checker invocation per file."""

from __future__ import annotations

import asyncio
import shlex
from collections.abc import Sequence

from ..config import InvocationSpec
from ..core.logging import RunLogger
from ..discovery.ignore import should_ignore
from .aggregator import ExitAggregator
from .checker import LAUNCH_FAILURE_STATUS, CheckerRunner


class ConcurrentInvoker:
    """Run the checker against every eligible file of a change set at once."""

    def __init__(
        self,
        checker_runner: CheckerRunner,
        *,
        checker: str,
        install_hint: str | None = None,
        logger: RunLogger | None = None,
    ) -> None:
        """Create an invoker bound to a checker.

        Args:
            checker_runner: Callable launching the checker for one argument list.
            checker: Checker name used in user-facing messages.
            install_hint: Where to obtain the checker when it is missing.
            logger: Logger receiving progress and warning messages.
        """

        self._runner = checker_runner
        self._checker = checker
        self._install_hint = install_hint
        self._logger = logger or RunLogger()

    async def invoke_all(
        self,
        files: Sequence[str],
        spec: InvocationSpec,
        *,
        checker_available: bool = True,
        aggregator: ExitAggregator | None = None,
    ) -> int:
        """Lint ``files`` concurrently and return the aggregated status.

        Files containing a generated-code marker are skipped and repeated
        paths are linted once. Every remaining file gets its own task; the
        call returns only after all of them have finished, and a failing
        file never cancels the others.

        Args:
            files: Repository-relative paths to lint.
            spec: Checker arguments and path prefix shared by all files.
            checker_available: When ``False`` nothing is launched and a
                warning is emitted instead.
            aggregator: Accumulator shared across several calls; a fresh one
                is used when ``None``.

        Returns:
            int: ``0`` when every invocation was clean, otherwise a non-zero
            status reported by one of them.
        """

        aggregate = aggregator if aggregator is not None else ExitAggregator()
        if not checker_available:
            self._warn_missing()
            return aggregate.read()

        targets = [filename for filename in dict.fromkeys(files) if not self._skip(filename)]
        self._logger.debug(f"Running {self._checker} on files={len(targets)}")
        async with asyncio.TaskGroup() as group:
            for filename in targets:
                group.create_task(self._invoke_one(filename, spec, aggregate))
        self._logger.debug(f"Finished running {self._checker} status={aggregate.read()}")
        return aggregate.read()

    def _skip(self, filename: str) -> bool:
        if should_ignore(filename):
            self._logger.debug(f"Ignoring file: {filename}")
            return True
        return False

    async def _invoke_one(self, filename: str, spec: InvocationSpec, aggregator: ExitAggregator) -> None:
        arguments = spec.arguments_for(filename)
        self._logger.debug(f"Running {self._checker} with args={shlex.join(arguments)}")
        try:
            status = await self._runner(arguments, timeout=spec.timeout_s)
        except Exception as exc:  # a failing file never cancels its siblings
            self._logger.fail(f"Error running {self._checker} on {filename}: {exc}")
            status = LAUNCH_FAILURE_STATUS
        aggregator.update(status)
        self._logger.debug(f"{self._checker} finished file={filename} status={status}")

    def _warn_missing(self) -> None:
        message = f"{self._checker} not installed"
        if self._install_hint:
            message = f"{message}, download from {self._install_hint}"
        self._logger.warn(message)


__all__ = ["ConcurrentInvoker"]
