# SPDX-License-Identifier: MIT
"""Sort semantic versions by precedence."""

from __future__ import annotations

from typing import Optional

import click

from ..compare import sort_versions
from ..console import Context, echo_info, parse_or_report, pass_context
from ..semver import Version


@click.command("sort")
@click.argument("versions", nargs=-1, required=True)
@click.option(
    "--reverse/--no-reverse",
    "-r",
    default=None,
    help="Highest precedence first (default from [tool.semprec].reverse).",
)
@pass_context
def sort_command(ctx: Context, versions: tuple[str, ...], reverse: Optional[bool]) -> None:
    """Print VERSIONS one per line, lowest precedence first.

    Versions that differ only in build metadata keep their input order.
    All arguments must be valid; invalid ones are reported and nothing is
    printed.

    \b
    Examples:
        semprec sort 1.0.0 1.0.0-rc.1 0.9.0
        semprec sort --reverse 2.0.0 10.0.0
    """
    if reverse is None:
        reverse = ctx.config().reverse

    parsed: list[Version] = []
    failed = False
    for raw in versions:
        version = parse_or_report(raw)
        if version is None:
            failed = True
        else:
            parsed.append(version)

    if failed:
        raise SystemExit(1)

    for version in sort_versions(parsed, reverse=reverse):
        echo_info(str(version))
