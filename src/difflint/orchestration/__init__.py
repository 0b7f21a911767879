# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run orchestration wiring discovery, invocation and aggregation."""

from __future__ import annotations

from .pipeline import RunHooks, build_run_logger, execute_profile, run_prebuild, run_precommit, run_profile

__all__ = [
    "RunHooks",
    "build_run_logger",
    "execute_profile",
    "run_prebuild",
    "run_precommit",
    "run_profile",
]
