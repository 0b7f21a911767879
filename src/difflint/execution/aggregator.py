# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Thread-safe accumulator for checker exit statuses."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field


@dataclass(slots=True)
class ExitAggregator:
    """Hold the last non-zero status reported by any invocation.

    The value starts at ``0`` and, once non-zero, never returns to ``0``.
    When several invocations fail, which of their statuses is kept is not
    specified.
    """

    _status: int = 0
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def update(self, status: int) -> None:
        """Record ``status`` when it signals a failure.

        Args:
            status: Exit status of a finished invocation; ``0`` is ignored.
        """

        if status == 0:
            return
        with self._lock:
            self._status = status

    def read(self) -> int:
        """Return the aggregated status."""

        with self._lock:
            return self._status


__all__ = ["ExitAggregator"]
