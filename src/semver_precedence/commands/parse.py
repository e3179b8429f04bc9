# SPDX-License-Identifier: MIT
"""Show the structure of a semantic version."""

from __future__ import annotations

import json
from typing import Any, Optional

import click

from ..identifier import Numeric
from ..console import Context, echo_info, parse_or_report, pass_context
from ..semver import Version


def version_to_dict(version: Version) -> dict[str, Any]:
    """Convert a Version into JSON-serializable data.

    Numeric pre-release identifiers become integers, everything else stays
    a string.
    """
    return {
        "major": version.major,
        "minor": version.minor,
        "patch": version.patch,
        "prerelease": [
            ident.value if isinstance(ident, Numeric) else ident.text
            for ident in version.prerelease
        ],
        "build": list(version.build),
    }


@click.command("parse")
@click.argument("version")
@click.option(
    "--json/--no-json",
    "as_json",
    default=None,
    help="Print the parsed fields as JSON (default from [tool.semprec].json).",
)
@pass_context
def parse_command(ctx: Context, version: str, as_json: Optional[bool]) -> None:
    """Parse VERSION and print its fields.

    \b
    Examples:
        semprec parse 1.4.2
        semprec parse 1.0.0-alpha.1+001 --json
    """
    if as_json is None:
        as_json = ctx.config().json

    parsed = parse_or_report(version)
    if parsed is None:
        raise SystemExit(1)

    if as_json:
        echo_info(json.dumps(version_to_dict(parsed), indent=2))
        return

    echo_info(f"major:      {parsed.major}")
    echo_info(f"minor:      {parsed.minor}")
    echo_info(f"patch:      {parsed.patch}")
    prerelease = ".".join(
        f"{ident}" if not ctx.verbose else f"{ident} ({type(ident).__name__.lower()})"
        for ident in parsed.prerelease
    )
    echo_info(f"prerelease: {prerelease or '-'}")
    echo_info(f"build:      {'.'.join(parsed.build) or '-'}")
