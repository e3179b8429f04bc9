# SPDX-License-Identifier: MIT
"""CLI command implementations."""

from . import compare, parse, sort, validate

__all__ = ["compare", "parse", "sort", "validate"]
