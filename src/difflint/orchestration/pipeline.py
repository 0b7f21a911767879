# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Execute a run profile from change-set discovery to the final status."""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from dataclasses import dataclass
from functools import partial
from pathlib import Path

from ..config import PREBUILD_PROFILE, PRECOMMIT_PROFILE, ChangeSource, Config, OutputConfig, RunProfile
from ..core.logging import RunLogger
from ..core.runtime.process import ProcessRunner, run_process
from ..discovery.git import GitChangeSet
from ..environment import build_process_environment
from ..execution.aggregator import ExitAggregator
from ..execution.checker import is_checker_available, run_checker
from ..execution.invoker import ConcurrentInvoker


@dataclass(frozen=True, slots=True)
class RunHooks:
    """Injection points used to substitute process launching and host details."""

    runner: ProcessRunner = run_process
    machine: str | None = None
    base_env: Mapping[str, str] | None = None


def build_run_logger(output: OutputConfig) -> RunLogger:
    """Return a logger honouring ``output`` preferences."""

    return RunLogger(use_emoji=output.emoji, use_color=output.color, debug_enabled=output.verbose)


async def run_profile(
    profile: RunProfile,
    config: Config,
    *,
    root: Path | None = None,
    hooks: RunHooks | None = None,
    logger: RunLogger | None = None,
) -> int:
    """Lint every change set named by ``profile`` and return the final status.

    All version-control queries run before the first checker is launched, so
    a git launch failure aborts the run without linting anything. The change
    sets are then linted one after another, each one concurrently, folding
    every status into a single shared aggregator.

    Args:
        profile: Change sources and checker arguments to use.
        config: Run configuration providing the checker and search path.
        root: Repository directory used as working directory for git and the
            checker; the current directory when ``None``.
        hooks: Optional process runner and host overrides.
        logger: Logger for progress output; derived from ``config.output`` when
            ``None``.

    Returns:
        int: ``0`` when all invocations were clean or the checker is missing,
        otherwise a non-zero checker status.

    Raises:
        ProcessLaunchError: If a git query cannot be started.
    """

    run_hooks = hooks or RunHooks()
    log = logger or build_run_logger(config.output)
    env = build_process_environment(config.search_path, machine=run_hooks.machine, base_env=run_hooks.base_env)
    checker_runner = partial(run_checker, config.checker, env=env, cwd=root, runner=run_hooks.runner, logger=log)
    invoker = ConcurrentInvoker(checker_runner, checker=config.checker, install_hint=config.install_hint, logger=log)
    aggregator = ExitAggregator()

    log.debug(f"Starting {profile.name} run cwd={root or Path.cwd()}")
    available = await is_checker_available(config.checker, env=env, runner=run_hooks.runner)
    if not available:
        return await invoker.invoke_all((), profile.invocation, checker_available=False, aggregator=aggregator)

    provider = GitChangeSet(profile.query, root=root, env=env, runner=run_hooks.runner)
    change_sets: list[tuple[ChangeSource, list[str]]] = []
    for source in profile.sources:
        files = await provider.files_for(source)
        log.debug(f"Collected {source.value} files={files}")
        change_sets.append((source, files))

    for source, files in change_sets:
        if files:
            log.info(f"Linting {len(files)} {source.value} file(s) with {config.checker}")
        await invoker.invoke_all(files, profile.invocation, aggregator=aggregator)

    status = aggregator.read()
    log.debug(f"Final exit status={status}")
    return status


def execute_profile(
    name: str,
    config: Config,
    *,
    root: Path | None = None,
    hooks: RunHooks | None = None,
) -> int:
    """Run the profile called ``name`` on a fresh event loop.

    Raises:
        ConfigError: If no profile named ``name`` exists.
        ProcessLaunchError: If a git query cannot be started.
    """

    profile = config.profile(name)
    return asyncio.run(run_profile(profile, config, root=root, hooks=hooks))


def run_precommit(config: Config | None = None, *, root: Path | None = None, hooks: RunHooks | None = None) -> int:
    """Lint staged files, as a pre-commit hook does."""

    return execute_profile(PRECOMMIT_PROFILE, config or Config(), root=root, hooks=hooks)


def run_prebuild(config: Config | None = None, *, root: Path | None = None, hooks: RunHooks | None = None) -> int:
    """Lint unstaged, staged and untracked files, as a pre-build step does."""

    return execute_profile(PREBUILD_PROFILE, config or Config(), root=root, hooks=hooks)


__all__ = [
    "RunHooks",
    "build_run_logger",
    "execute_profile",
    "run_prebuild",
    "run_precommit",
    "run_profile",
]
