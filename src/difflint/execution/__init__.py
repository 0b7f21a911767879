# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Concurrent checker execution and status aggregation."""

from __future__ import annotations

from .aggregator import ExitAggregator
from .checker import CheckerRunner, is_checker_available, run_checker
from .invoker import ConcurrentInvoker

__all__ = [
    "CheckerRunner",
    "ConcurrentInvoker",
    "ExitAggregator",
    "is_checker_available",
    "run_checker",
]
