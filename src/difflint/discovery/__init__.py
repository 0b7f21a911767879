# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Change-set discovery and filtering."""

from __future__ import annotations

from .git import GitChangeSet, diff_command, untracked_command
from .ignore import GENERATED_MARKERS, should_ignore

__all__ = [
    "GENERATED_MARKERS",
    "GitChangeSet",
    "diff_command",
    "should_ignore",
    "untracked_command",
]
