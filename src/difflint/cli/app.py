# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring the pre-commit and pre-build commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, NoReturn

import typer

from ..config import PREBUILD_PROFILE, PRECOMMIT_PROFILE, Config, ConfigError
from ..config_loader import load_config
from ..core.runtime.process import ProcessLaunchError
from ..orchestration.pipeline import build_run_logger, execute_profile
from .shared import CLIError, CLIOptions

app = typer.Typer(
    name="difflint",
    help="Lint files changed in git with an external checker, one process per file.",
    add_completion=False,
)


def _load(options: CLIOptions) -> Config:
    """Return the project configuration with command-line flags applied.

    Raises:
        CLIError: If the configuration is invalid.
    """

    try:
        return options.apply(load_config(options.root or Path.cwd()))
    except ConfigError as exc:
        raise CLIError(str(exc)) from exc


def _execute(profile_name: str, config: Config, root: Path | None) -> int:
    """Run ``profile_name`` with ``config``.

    Raises:
        CLIError: If the profile is unknown or git cannot be launched.
    """

    try:
        return execute_profile(profile_name, config, root=root)
    except (ConfigError, ProcessLaunchError) as exc:
        raise CLIError(str(exc)) from exc


def _run_and_exit(profile_name: str, options: CLIOptions) -> NoReturn:
    logger = build_run_logger(options.output())
    try:
        config = _load(options)
        logger = build_run_logger(config.output)
        status = _execute(profile_name, config, options.root)
    except CLIError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc
    if status == 0:
        logger.ok(f"{profile_name}: all changed files passed")
    else:
        logger.fail(f"{profile_name}: checker reported problems (exit status {status})")
    raise typer.Exit(code=status)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    root: Annotated[
        Path | None,
        typer.Option("--root", help="Repository directory to run in.", file_okay=False, exists=True),
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show per-file progress.")] = False,
    no_emoji: Annotated[bool, typer.Option("--no-emoji", help="Disable emoji in output.")] = False,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable coloured output.")] = False,
) -> None:
    """Lint changed files; runs ``precommit`` when no command is given."""

    ctx.obj = CLIOptions(root=root, verbose=verbose, emoji=not no_emoji, color=not no_color)
    if ctx.invoked_subcommand is None:
        _run_and_exit(PRECOMMIT_PROFILE, ctx.obj)


@app.command("precommit")
def precommit_command(ctx: typer.Context) -> None:
    """Lint staged files (pre-commit hook)."""

    _run_and_exit(PRECOMMIT_PROFILE, ctx.obj)


@app.command("prebuild")
def prebuild_command(ctx: typer.Context) -> None:
    """Lint unstaged, staged and untracked files (pre-build script)."""

    _run_and_exit(PREBUILD_PROFILE, ctx.obj)


def main() -> None:
    """Console-script entry point."""

    app()


__all__ = ["app", "main"]
