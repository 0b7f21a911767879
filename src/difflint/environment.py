# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Compute the environment handed to every external process of a run."""

from __future__ import annotations

import os
import platform
from collections.abc import Mapping

from .config import SearchPathConfig

PATH_KEY = "PATH"


def build_process_environment(
    search_path: SearchPathConfig,
    *,
    machine: str | None = None,
    base_env: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Return a copy of ``base_env`` with the configured search path applied.

    ``search_path.directory`` is prepended to ``PATH`` only when the host
    architecture equals ``search_path.machine``. ``os.environ`` is never
    modified; callers pass the returned mapping to each launch.

    Args:
        search_path: Search-path settings from the run configuration.
        machine: Host architecture; :func:`platform.machine` when ``None``.
        base_env: Environment to start from; ``os.environ`` when ``None``.

    Returns:
        dict[str, str]: Environment mapping for child processes.
    """

    env = dict(os.environ if base_env is None else base_env)
    host = platform.machine() if machine is None else machine
    if not search_path.enabled or host != search_path.machine:
        return env
    current = env.get(PATH_KEY)
    if current is None:
        # Nothing to extend.
        return env
    entries = current.split(os.pathsep) if current else []
    if search_path.directory not in entries:
        env[PATH_KEY] = os.pathsep.join([search_path.directory, *entries])
    return env


__all__ = ["PATH_KEY", "build_process_environment"]
