# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the console and logging helpers."""

from __future__ import annotations

import pytest

from difflint.core import console as console_module
from difflint.core.console import get_console
from difflint.core.logging import RunLogger


def test_get_console_reuses_instances_per_preference() -> None:
    first = get_console(color=False, emoji=True)

    assert get_console(color=False, emoji=True) is first
    assert get_console(color=False, emoji=False) is not first


def test_get_console_drops_colour_without_terminal(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(console_module, "detect_tty", lambda: False)

    assert get_console(color=True, emoji=True) is get_console(color=False, emoji=True)


def test_run_logger_prefixes_emoji_only_when_enabled(capsys: pytest.CaptureFixture[str]) -> None:
    RunLogger(use_emoji=True, use_color=False).ok("clean")
    RunLogger(use_emoji=False, use_color=False).fail("dirty")

    out = capsys.readouterr().out
    assert "✅ clean" in out
    assert "dirty" in out
    assert "❌" not in out


def test_run_logger_debug_is_silent_unless_enabled(capsys: pytest.CaptureFixture[str]) -> None:
    RunLogger(use_emoji=False, use_color=False).debug("Running swiftlint with args=./A.swift")
    assert capsys.readouterr().out == ""

    RunLogger(use_emoji=False, use_color=False, debug_enabled=True).debug("Running swiftlint with args=./A.swift")
    assert "[debug] Running swiftlint with args=./A.swift" in capsys.readouterr().out
