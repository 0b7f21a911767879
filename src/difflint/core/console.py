# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rich console shared by the logging helpers."""

from __future__ import annotations

import sys
from functools import cache

from rich.console import Console


def detect_tty() -> bool:
    """Return ``True`` when stdout appears to be backed by a terminal."""

    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


def get_console(*, color: bool, emoji: bool) -> Console:
    """Return the cached console for ``color``/``emoji`` on the current stdout.

    Colour is only emitted when stdout is a terminal, whatever ``color`` says.
    """

    return _console_for(color=color and detect_tty(), emoji=emoji)


@cache
def _console_for(*, color: bool, emoji: bool) -> Console:
    return Console(
        color_system="auto" if color else None,
        force_terminal=color,
        no_color=not color,
        emoji=emoji,
        highlight=False,
        soft_wrap=True,
    )


__all__ = ["detect_tty", "get_console"]
