# SPDX-License-Identifier: MIT
"""Compare two semantic versions by precedence."""

from __future__ import annotations

import click

from ..compare import Ordering, compare
from ..console import Context, echo_info, parse_or_report, pass_context

_SYMBOLS = {
    Ordering.LESS: "<",
    Ordering.EQUAL: "==",
    Ordering.GREATER: ">",
}


@click.command("compare")
@click.argument("first")
@click.argument("second")
@pass_context
def compare_command(ctx: Context, first: str, second: str) -> None:
    """Compare the precedence of FIRST and SECOND.

    Prints "FIRST < SECOND", "FIRST == SECOND" or "FIRST > SECOND". Build
    metadata does not take part in the comparison.

    \b
    Examples:
        semprec compare 1.0.0-alpha 1.0.0      # 1.0.0-alpha < 1.0.0
        semprec compare 1.0.0+a 1.0.0+b        # 1.0.0+a == 1.0.0+b
    """
    version1 = parse_or_report(first)
    version2 = parse_or_report(second)
    if version1 is None or version2 is None:
        raise SystemExit(1)

    result = compare(version1, version2)
    echo_info(f"{version1} {_SYMBOLS[result]} {version2}")
    if result is Ordering.EQUAL and version1 != version2:
        ctx.detail("  (versions differ only in build metadata)")
