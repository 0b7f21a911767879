# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import asyncio
import subprocess
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from difflint.core.runtime.process import ProcessLaunchError, ProcessResult

Responder = Callable[[Sequence[str]], ProcessResult | Exception]


@dataclass(frozen=True, slots=True)
class RecordedCall:
    args: tuple[str, ...]
    env: Mapping[str, str] | None
    cwd: Path | None
    capture_output: bool
    timeout: float | None


@dataclass(slots=True)
class FakeProcessRunner:
    """Launch-counting stand-in for :func:`difflint.core.runtime.process.run_process`."""

    responder: Responder
    delays: Mapping[str, float] = field(default_factory=dict)
    calls: list[RecordedCall] = field(default_factory=list)
    completed: list[tuple[str, ...]] = field(default_factory=list)
    in_flight: int = 0
    max_in_flight: int = 0

    async def __call__(
        self,
        args: Sequence[str],
        *,
        env: Mapping[str, str] | None = None,
        cwd: Path | None = None,
        capture_output: bool = False,
        timeout: float | None = None,
    ) -> ProcessResult:
        self.calls.append(RecordedCall(tuple(args), env, cwd, capture_output, timeout))
        outcome = self.responder(args)
        if isinstance(outcome, Exception):
            raise outcome
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delays.get(args[-1], 0.0))
        finally:
            self.in_flight -= 1
        self.completed.append(tuple(args))
        return outcome

    def commands(self, executable: str) -> list[tuple[str, ...]]:
        return [call.args for call in self.calls if call.args and call.args[0] == executable]


def script_responder(
    *,
    git_output: Mapping[str, str] | None = None,
    checker_status: Mapping[str, int] | None = None,
    checker_available: bool = True,
    git_missing: bool = False,
    checker_missing: bool = False,
) -> Responder:
    """Return a responder emulating ``which``, ``git`` and ``swiftlint``.

    ``git_output`` maps the git subcommand plus ``--cached`` marker
    (``"diff --cached"``, ``"diff"``, ``"ls-files"``) to stdout text.
    ``checker_status`` maps the last checker argument to its exit status.
    """

    outputs = dict(git_output or {})
    statuses = dict(checker_status or {})

    def respond(args: Sequence[str]) -> ProcessResult | Exception:
        head = args[0]
        if head == "which":
            return ProcessResult(returncode=0 if checker_available else 1, stdout=b"")
        if head == "git":
            if git_missing:
                return ProcessLaunchError(args, "No such file or directory")
            key = "diff --cached" if "--cached" in args else args[1]
            return ProcessResult(returncode=0, stdout=outputs.get(key, "").encode("utf-8"))
        if checker_missing:
            return ProcessLaunchError(args, "Permission denied")
        return ProcessResult(returncode=statuses.get(args[-1], 0))

    return respond


@pytest.fixture
def make_runner() -> Callable[..., FakeProcessRunner]:
    """Return a factory building :class:`FakeProcessRunner` instances."""

    def factory(responder: Responder | None = None, **kwargs: object) -> FakeProcessRunner:
        return FakeProcessRunner(responder=responder or script_responder(), **kwargs)

    return factory


def _git(repo: Path, *args: str) -> None:
    subprocess.run(["git", *args], cwd=repo, check=True, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """Return an initialised git repository with one committed Swift file."""

    repo = tmp_path / "repo"
    repo.mkdir()
    _git(repo, "init")
    _git(repo, "config", "user.name", "DiffLintTest")
    _git(repo, "config", "user.email", "difflint@example.com")
    _git(repo, "config", "commit.gpgsign", "false")
    (repo / "Committed.swift").write_text("let a = 1\n", encoding="utf-8")
    _git(repo, "add", ".")
    _git(repo, "commit", "-m", "initial")
    return repo


@pytest.fixture
def git() -> Callable[..., None]:
    """Return a helper running git commands inside a repository."""

    return _git


@pytest.fixture
def scripted() -> Callable[..., Responder]:
    """Return :func:`script_responder` for tests that emulate a whole run."""

    return script_responder
