# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Git-based change-set discovery."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Final

from ..config import ChangeSetQuery, ChangeSource
from ..core.runtime.process import ProcessRunner, run_process

GIT_EXECUTABLE: Final[str] = "git"
_CACHED_FLAG: Final[str] = "--cached"


def diff_command(pattern: str, extra_globs: Sequence[str] = (), *, cached: bool) -> list[str]:
    """Return the ``git diff`` command listing changed, non-deleted files.

    Args:
        pattern: Pathspec restricting the diff, e.g. ``"*.swift"``.
        extra_globs: Additional pathspecs appended after ``pattern``.
        cached: When ``True`` compare the index instead of the work tree.

    Returns:
        list[str]: Command argument vector.
    """

    args = ["diff", "--diff-filter=d", "--name-only", "--", pattern, *extra_globs]
    if cached:
        args.insert(1, _CACHED_FLAG)
    return [GIT_EXECUTABLE, *args]


def untracked_command(pattern: str, extra_globs: Sequence[str] = ()) -> list[str]:
    """Return the ``git ls-files`` command listing untracked, non-ignored files."""

    return [
        GIT_EXECUTABLE,
        "ls-files",
        "--others",
        "--exclude-standard",
        "--full-name",
        "--",
        pattern,
        *extra_globs,
    ]


class GitChangeSet:
    """Collect file lists reported as changed by Git."""

    def __init__(
        self,
        query: ChangeSetQuery | None = None,
        *,
        root: Path | None = None,
        env: Mapping[str, str] | None = None,
        runner: ProcessRunner | None = None,
    ) -> None:
        """Create a Git change-set provider.

        Args:
            query: Extension filter and default pathspecs for every query.
            root: Working directory for git; the current directory when ``None``.
            env: Environment handed to git.
            runner: Optional process runner; :func:`run_process` when omitted.
        """

        self._query = query or ChangeSetQuery()
        self._root = root
        self._env = env
        self._runner: ProcessRunner = runner or run_process

    async def get_staged_files(self, extra_globs: Sequence[str] = ()) -> list[str]:
        """Return files with changes staged in the index.

        Args:
            extra_globs: Pathspecs appended to the configured ones.

        Returns:
            list[str]: Repository-relative paths, possibly empty.

        Raises:
            ProcessLaunchError: If git cannot be started.
        """

        return await self._diff_names(cached=True, extra_globs=extra_globs)

    async def get_unstaged_files(self, extra_globs: Sequence[str] = ()) -> list[str]:
        """Return files with work-tree changes not yet staged.

        Raises:
            ProcessLaunchError: If git cannot be started.
        """

        return await self._diff_names(cached=False, extra_globs=extra_globs)

    async def get_untracked_files(self, extra_globs: Sequence[str] = ()) -> list[str]:
        """Return untracked files that are not excluded by ignore rules.

        Raises:
            ProcessLaunchError: If git cannot be started.
        """

        cmd = untracked_command(self._query.pattern, self._globs(extra_globs))
        return await self._run(cmd)

    async def files_for(self, source: ChangeSource) -> list[str]:
        """Dispatch to the query matching ``source``."""

        if source is ChangeSource.STAGED:
            return await self.get_staged_files()
        if source is ChangeSource.UNSTAGED:
            return await self.get_unstaged_files()
        return await self.get_untracked_files()

    async def _diff_names(self, *, cached: bool, extra_globs: Sequence[str]) -> list[str]:
        cmd = diff_command(self._query.pattern, self._globs(extra_globs), cached=cached)
        return await self._run(cmd)

    def _globs(self, extra_globs: Sequence[str]) -> tuple[str, ...]:
        return (*self._query.extra_globs, *extra_globs)

    async def _run(self, cmd: Sequence[str]) -> list[str]:
        # A non-zero exit is not an error here; whatever was printed is used.
        result = await self._runner(cmd, env=self._env, cwd=self._root, capture_output=True)
        return result.lines()


__all__ = ["GIT_EXECUTABLE", "GitChangeSet", "diff_command", "untracked_command"]
