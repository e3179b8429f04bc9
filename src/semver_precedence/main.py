# SPDX-License-Identifier: MIT
"""CLI entry point for the semprec command."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import click

from .commands import compare, parse, sort, validate
from .config import ConfigError
from .console import Context, echo_error, pass_context


@click.group()
@click.version_option(package_name="semver-precedence")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Project directory to read pyproject.toml from.",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path]) -> None:
    """Parse and order semantic versions.

    \b
    Examples:
        semprec parse 1.0.0-rc.1+build.5
        semprec compare 1.0.0-alpha 1.0.0
        semprec sort 1.0.0 1.0.0-beta.11 1.0.0-beta.2
        semprec validate
    """
    ctx.verbose = verbose
    ctx.project_dir = directory


cli.add_command(parse.parse_command)
cli.add_command(compare.compare_command)
cli.add_command(sort.sort_command)
cli.add_command(validate.validate_command)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except ConfigError as e:
        echo_error(str(e))
        sys.exit(1)
    except FileNotFoundError as e:
        echo_error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
