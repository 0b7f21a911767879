# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models for difflint runs."""

from __future__ import annotations

from enum import Enum
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_CHECKER: Final[str] = "swiftlint"
DEFAULT_INSTALL_HINT: Final[str] = "https://github.com/realm/SwiftLint"
DEFAULT_EXTENSION: Final[str] = "swift"
PRECOMMIT_PROFILE: Final[str] = "precommit"
PREBUILD_PROFILE: Final[str] = "prebuild"


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class ChangeSource(str, Enum):
    """Version-control change sets a profile can lint."""

    STAGED = "staged"
    UNSTAGED = "unstaged"
    UNTRACKED = "untracked"


class InvocationSpec(BaseModel):
    """Arguments shared by every checker invocation within one run."""

    model_config = ConfigDict(frozen=True)

    base_args: tuple[str, ...] = ()
    path_prefix: str = ""
    timeout_s: float | None = Field(default=None, gt=0)

    def arguments_for(self, filename: str) -> list[str]:
        """Return the checker arguments used to lint ``filename``.

        Args:
            filename: Repository-relative path reported by version control.

        Returns:
            list[str]: Base arguments followed by the prefixed file path.
        """

        return [*self.base_args, f"{self.path_prefix}{filename}"]


class ChangeSetQuery(BaseModel):
    """Extension filter and extra pathspecs applied to version-control queries."""

    model_config = ConfigDict(frozen=True)

    extension: str = DEFAULT_EXTENSION
    extra_globs: tuple[str, ...] = ()

    @field_validator("extension")
    @classmethod
    def normalise_extension(cls, value: str) -> str:
        cleaned = value.strip().lstrip(".")
        if not cleaned:
            raise ValueError("extension must not be empty")
        return cleaned

    @property
    def pattern(self) -> str:
        """Return the pathspec matching files with the configured extension."""

        return f"*.{self.extension}"


class RunProfile(BaseModel):
    """Named combination of change sources and checker arguments."""

    model_config = ConfigDict(frozen=True)

    name: str
    invocation: InvocationSpec = Field(default_factory=InvocationSpec)
    query: ChangeSetQuery = Field(default_factory=ChangeSetQuery)
    sources: tuple[ChangeSource, ...] = (ChangeSource.STAGED,)


class SearchPathConfig(BaseModel):
    """Extra executable directory prepended to ``PATH`` on one host architecture."""

    model_config = ConfigDict(validate_assignment=True)

    enabled: bool = True
    machine: str = "arm64"
    directory: str = "/opt/homebrew/bin"


class OutputConfig(BaseModel):
    """Console output preferences."""

    model_config = ConfigDict(validate_assignment=True)

    emoji: bool = True
    color: bool = True
    verbose: bool = False


def default_profiles() -> dict[str, RunProfile]:
    """Return the built-in pre-commit and pre-build profiles."""

    return {
        PRECOMMIT_PROFILE: RunProfile(
            name=PRECOMMIT_PROFILE,
            invocation=InvocationSpec(base_args=("--force-exclude",), path_prefix="./"),
            sources=(ChangeSource.STAGED,),
        ),
        PREBUILD_PROFILE: RunProfile(
            name=PREBUILD_PROFILE,
            invocation=InvocationSpec(
                base_args=("--config", "../.swiftlint.yml", "--force-exclude"),
                path_prefix="../",
            ),
            query=ChangeSetQuery(extra_globs=("../*.swift",)),
            sources=(ChangeSource.UNSTAGED, ChangeSource.STAGED, ChangeSource.UNTRACKED),
        ),
    }


class Config(BaseModel):
    """Top-level configuration object."""

    model_config = ConfigDict(validate_assignment=True)

    checker: str = DEFAULT_CHECKER
    install_hint: str = DEFAULT_INSTALL_HINT
    search_path: SearchPathConfig = Field(default_factory=SearchPathConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    profiles: dict[str, RunProfile] = Field(default_factory=default_profiles)

    def profile(self, name: str) -> RunProfile:
        """Return the profile registered under ``name``.

        Args:
            name: Profile identifier such as ``"precommit"``.

        Returns:
            RunProfile: Matching profile.

        Raises:
            ConfigError: If no profile named ``name`` exists.
        """

        try:
            return self.profiles[name]
        except KeyError:
            known = ", ".join(sorted(self.profiles)) or "<none>"
            raise ConfigError(f"Unknown profile '{name}' (known: {known})") from None


__all__ = [
    "DEFAULT_CHECKER",
    "DEFAULT_EXTENSION",
    "DEFAULT_INSTALL_HINT",
    "PREBUILD_PROFILE",
    "PRECOMMIT_PROFILE",
    "ChangeSetQuery",
    "ChangeSource",
    "Config",
    "ConfigError",
    "InvocationSpec",
    "OutputConfig",
    "RunProfile",
    "SearchPathConfig",
    "default_profiles",
]
