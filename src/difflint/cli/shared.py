# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared CLI primitives."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..config import Config, OutputConfig


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


@dataclass(frozen=True, slots=True)
class CLIOptions:
    """Options shared by every difflint command."""

    root: Path | None = None
    verbose: bool = False
    emoji: bool = True
    color: bool = True

    def output(self, base: OutputConfig | None = None) -> OutputConfig:
        """Return ``base`` narrowed by the command-line output flags."""

        current = base or OutputConfig()
        return OutputConfig(
            emoji=self.emoji and current.emoji,
            color=self.color and current.color,
            verbose=self.verbose or current.verbose,
        )

    def apply(self, config: Config) -> Config:
        """Return ``config`` with command-line output preferences applied."""

        return config.model_copy(update={"output": self.output(config.output)})


__all__ = ["CLIError", "CLIOptions"]
