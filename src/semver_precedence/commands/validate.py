# SPDX-License-Identifier: MIT
"""Validate semantic version strings."""

from __future__ import annotations

import click

from ..console import Context, echo_error, echo_success, echo_warning, fail, pass_context
from ..semver import InvalidFormat, parse


@click.command("validate")
@click.argument("versions", nargs=-1)
@pass_context
def validate_command(ctx: Context, versions: tuple[str, ...]) -> None:
    """Check that VERSIONS are valid semantic versions.

    Without arguments, validates [project].version of the project's
    pyproject.toml.

    \b
    Examples:
        semprec validate                  # Validate current project version
        semprec validate 1.0.0 1.0        # Validate explicit versions
    """
    if not versions:
        config = ctx.config()
        if not config.has_pyproject():
            fail(f"No pyproject.toml found in {config.project_dir}")
        if not config.version:
            fail("Missing required field: [project].version")

        ctx.detail(f"Validating [project].version of {config.name or config.project_dir}")
        versions = (config.version,)

    errors = 0
    for raw in versions:
        result = parse(raw)
        if isinstance(result, InvalidFormat):
            echo_error(str(result))
            errors += 1
        else:
            ctx.detail(f"  {raw}: ok")
            if ctx.verbose and result.build:
                echo_warning(f"{raw}: build metadata is ignored for precedence")

    if errors:
        fail(f"Validation failed: {errors} invalid version(s)")

    echo_success("Validation passed")
