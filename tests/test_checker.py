# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for checker launching and availability probing."""

from __future__ import annotations

import asyncio
import os
from collections.abc import Callable
from pathlib import Path

import pytest

from difflint.core.logging import RunLogger
from difflint.core.runtime.process import ProcessLaunchError, ProcessResult
from difflint.execution.checker import LAUNCH_FAILURE_STATUS, is_checker_available, run_checker


def test_run_checker_returns_exit_status(make_runner: Callable[..., object]) -> None:
    runner = make_runner(lambda args: ProcessResult(returncode=2))

    status = asyncio.run(run_checker("swiftlint", ["--force-exclude", "./A.swift"], runner=runner))

    assert status == 2
    call = runner.calls[0]
    assert call.args == ("swiftlint", "--force-exclude", "./A.swift")
    assert not call.capture_output


def test_run_checker_converts_launch_failure(
    make_runner: Callable[..., object],
    capsys: pytest.CaptureFixture[str],
) -> None:
    runner = make_runner(lambda args: ProcessLaunchError(args, "Permission denied"))

    status = asyncio.run(
        run_checker("swiftlint", ["./A.swift"], runner=runner, logger=RunLogger(use_emoji=False, use_color=False)),
    )

    assert status == LAUNCH_FAILURE_STATUS
    assert "Error running swiftlint" in capsys.readouterr().out


def test_run_checker_forwards_timeout(make_runner: Callable[..., object]) -> None:
    runner = make_runner(lambda args: ProcessResult(returncode=124, timed_out=True))

    status = asyncio.run(
        run_checker("swiftlint", ["./A.swift"], timeout=5.0, runner=runner, logger=RunLogger(use_emoji=False)),
    )

    assert status == 124
    assert runner.calls[0].timeout == 5.0


def test_run_checker_with_real_missing_executable() -> None:
    status = asyncio.run(
        run_checker("difflint-missing-checker", ["./A.swift"], logger=RunLogger(use_emoji=False, use_color=False)),
    )

    assert status == LAUNCH_FAILURE_STATUS


@pytest.mark.parametrize(("returncode", "expected"), [(0, True), (1, False)])
def test_is_checker_available_uses_which(
    make_runner: Callable[..., object],
    returncode: int,
    expected: bool,
) -> None:
    runner = make_runner(lambda args: ProcessResult(returncode=returncode, stdout=b""))

    assert asyncio.run(is_checker_available("swiftlint", env={"PATH": "/bin"}, runner=runner)) is expected
    call = runner.calls[0]
    assert call.args == ("which", "swiftlint")
    assert call.env == {"PATH": "/bin"}
    assert call.capture_output


def test_is_checker_available_falls_back_when_which_cannot_launch(
    make_runner: Callable[..., object],
    tmp_path: Path,
) -> None:
    runner = make_runner(lambda args: ProcessLaunchError(args, "missing"))
    tool = tmp_path / "swiftlint"
    tool.write_text("#!/bin/sh\nexit 0\n", encoding="utf-8")
    tool.chmod(0o755)

    assert asyncio.run(is_checker_available("swiftlint", env={"PATH": str(tmp_path)}, runner=runner))
    assert not asyncio.run(is_checker_available("ktlint", env={"PATH": str(tmp_path)}, runner=runner))


def test_is_checker_available_finds_tool_on_supplied_path(tmp_path: Path) -> None:
    tool = tmp_path / "difflint-probe-tool"
    tool.write_text("#!/bin/sh\nexit 0\n", encoding="utf-8")
    tool.chmod(0o755)
    env = {**os.environ, "PATH": f"{tmp_path}{os.pathsep}{os.environ.get('PATH', '')}"}

    assert asyncio.run(is_checker_available("difflint-probe-tool", env=env))
    assert not asyncio.run(is_checker_available("difflint-probe-tool-absent", env=env))
