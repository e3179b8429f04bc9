# SPDX-License-Identifier: MIT
"""CLI configuration loading from pyproject.toml."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

TOOL_SECTION = "semprec"
ENV_PREFIX = "SEMPREC_"


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


def _env_flag(name: str) -> Optional[bool]:
    value = os.getenv(ENV_PREFIX + name)
    if value is None or not value.strip():
        return None
    value = value.strip().lower()
    if value == "true":
        return True
    if value == "false":
        return False
    raise ConfigError(f"{ENV_PREFIX}{name} must be 'true' or 'false', got {value!r}")


def _table(parent: dict[str, Any], key: str, label: str) -> dict[str, Any]:
    value = parent.get(key, {})
    if not isinstance(value, dict):
        raise ConfigError(f"{label} must be a table, got {type(value).__name__}")
    return value


def _tool_flag(table: dict[str, Any], key: str) -> bool:
    value = table.get(key, False)
    if not isinstance(value, bool):
        raise ConfigError(
            f"[tool.{TOOL_SECTION}].{key} must be a boolean, got {type(value).__name__}"
        )
    return value


@dataclass
class CLIConfig:
    """CLI configuration loaded from pyproject.toml.

    Attributes:
        project_dir: Directory containing pyproject.toml
        name: Package name from [project]
        version: Package version from [project], unvalidated
        json: Print parse results as JSON by default
        reverse: Sort from highest to lowest precedence by default
    """

    project_dir: Path
    name: str = ""
    version: str = ""
    json: bool = False
    reverse: bool = False

    @classmethod
    def from_pyproject(cls, project_dir: str | Path) -> "CLIConfig":
        """Load configuration from pyproject.toml.

        Raises:
            ConfigError: If the file is invalid
            FileNotFoundError: If pyproject.toml doesn't exist
        """
        project_path = Path(project_dir)
        pyproject_path = project_path / "pyproject.toml"

        if not pyproject_path.exists():
            raise FileNotFoundError(f"pyproject.toml not found in {project_path}")

        try:
            with open(pyproject_path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax: {e}") from e

        return cls.from_pyproject_dict(pyproject, project_path)

    @classmethod
    def from_pyproject_dict(cls, pyproject: dict[str, Any], project_dir: Path) -> "CLIConfig":
        """Create CLIConfig from a parsed pyproject.toml dictionary."""
        project = _table(pyproject, "project", "[project]")
        tool = _table(_table(pyproject, "tool", "[tool]"), TOOL_SECTION, f"[tool.{TOOL_SECTION}]")

        version = project.get("version", "")
        if not isinstance(version, str):
            raise ConfigError(f"[project].version must be a string, got {type(version).__name__}")

        name = project.get("name", "")
        if not isinstance(name, str):
            raise ConfigError(f"[project].name must be a string, got {type(name).__name__}")

        return cls(
            project_dir=project_dir,
            name=name,
            version=version,
            json=_tool_flag(tool, "json"),
            reverse=_tool_flag(tool, "reverse"),
        )

    def apply_env(self) -> "CLIConfig":
        """Override settings from SEMPREC_* environment variables."""
        if (json_flag := _env_flag("JSON")) is not None:
            self.json = json_flag
        if (reverse_flag := _env_flag("REVERSE")) is not None:
            self.reverse = reverse_flag
        return self

    def has_pyproject(self) -> bool:
        """Check if pyproject.toml exists in the project directory."""
        return (self.project_dir / "pyproject.toml").exists()


def find_project_root(start_dir: Optional[str | Path] = None) -> Path:
    """Find the project root by looking for pyproject.toml.

    Raises:
        ConfigError: If no project root is found
    """
    current = Path(start_dir) if start_dir else Path.cwd()
    current = current.resolve()

    while current != current.parent:
        if (current / "pyproject.toml").exists():
            return current
        current = current.parent

    raise ConfigError("Could not find project root (no pyproject.toml found)")


def load_config(project_dir: Optional[str | Path] = None) -> CLIConfig:
    """Load CLI configuration for a project directory.

    Without an explicit directory the nearest pyproject.toml above the
    working directory is used; if there is none, defaults apply.
    Environment variables override file settings in both cases.
    """
    if project_dir is None:
        try:
            project_dir = find_project_root()
        except ConfigError:
            return CLIConfig(project_dir=Path.cwd()).apply_env()

    project_path = Path(project_dir)

    if (project_path / "pyproject.toml").exists():
        return CLIConfig.from_pyproject(project_path).apply_env()

    return CLIConfig(project_dir=project_path).apply_env()
