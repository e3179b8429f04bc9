# SPDX-License-Identifier: MIT
"""Shared state and terminal output for semprec commands."""

from __future__ import annotations

from pathlib import Path
from typing import NoReturn, Optional

import click

from .config import CLIConfig, ConfigError, load_config
from .semver import InvalidFormat, Version, parse

# label, colour and stream for each kind of message
_STYLES = {
    "error": ("Error: ", "red", True),
    "warning": ("Warning: ", "yellow", True),
    "success": ("", "green", False),
}


class Context:
    """Per-invocation settings shared by every semprec command.

    The project configuration is read lazily, so commands that only work on
    their arguments never touch pyproject.toml.
    """

    def __init__(self) -> None:
        self.verbose = False
        self.project_dir: Optional[Path] = None
        self._config: Optional[CLIConfig] = None

    def config(self) -> CLIConfig:
        """Return the project configuration, exiting with status 1 if it is unusable."""
        if self._config is None:
            try:
                self._config = load_config(self.project_dir)
            except (ConfigError, FileNotFoundError) as e:
                fail(str(e))
        return self._config

    def detail(self, message: str) -> None:
        """Print message only when --verbose was given."""
        if self.verbose:
            echo_info(message)


pass_context = click.make_pass_decorator(Context, ensure=True)


def _emit(kind: str, message: str) -> None:
    label, colour, to_stderr = _STYLES[kind]
    click.secho(f"{label}{message}", fg=colour, err=to_stderr)


def echo_error(message: str) -> None:
    _emit("error", message)


def echo_warning(message: str) -> None:
    _emit("warning", message)


def echo_success(message: str) -> None:
    _emit("success", message)


def echo_info(message: str) -> None:
    click.echo(message)


def fail(message: str) -> NoReturn:
    """Report message as an error and exit with status 1."""
    echo_error(message)
    raise SystemExit(1)


def parse_or_report(raw: str) -> Optional[Version]:
    """Parse a version argument, reporting the rejected segment if it is invalid."""
    result = parse(raw)
    if isinstance(result, InvalidFormat):
        echo_error(str(result))
        return None
    return result
