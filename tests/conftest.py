# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from semver_precedence.config import ENV_PREFIX


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep SEMPREC_* variables from the outer environment out of tests."""
    for name in ("JSON", "REVERSE"):
        monkeypatch.delenv(ENV_PREFIX + name, raising=False)


@pytest.fixture
def make_project(tmp_path: Path):
    """Create a project directory with a pyproject.toml."""

    def _make(version: str = "1.0.0", tool: str = "") -> Path:
        project_dir = tmp_path / "test_project"
        project_dir.mkdir(exist_ok=True)
        (project_dir / "pyproject.toml").write_text(
            f"""[project]
name = "test-project"
version = "{version}"

{tool}
"""
        )
        return project_dir

    return _make
