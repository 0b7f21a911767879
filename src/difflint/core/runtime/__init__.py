# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Runtime helpers for launching external processes."""

from __future__ import annotations

from .process import ProcessLaunchError, ProcessResult, ProcessRunner, run_process

__all__ = ["ProcessLaunchError", "ProcessResult", "ProcessRunner", "run_process"]
