"""Settings loader for the CLI and project checks.

Settings come from an optional JSON file. Recognised keys:

- ``dialect``: target regex dialect name (default ``"python"``)
- ``dependencySections``: package.json sections to read constraints from
- ``excludeDirs``: directory names skipped while discovering projects

Unknown keys are ignored. Validation is hand-written; errors raise
``ConfigError`` with a message naming the offending key.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .models import PYTHON, Dialect, UnknownDialectError, get_dialect

CONFIG_PATH_ENV_VAR = "VERSION_REGEX_CONFIG"

DEFAULT_DEPENDENCY_SECTIONS = (
    "dependencies",
    "devDependencies",
    "peerDependencies",
    "optionalDependencies",
)
DEFAULT_EXCLUDE_DIRS = ("node_modules", ".git", ".venv")


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be loaded or is invalid."""


def _string_tuple(data: dict[str, Any], key: str, default: tuple[str, ...]) -> tuple[str, ...]:
    value = data.get(key)
    if value is None:
        return default
    if not isinstance(value, list) or not all(isinstance(item, str) and item for item in value):
        raise ConfigError(f"'{key}' must be an array of non-empty strings")
    return tuple(value)


@dataclass(slots=True, frozen=True)
class Settings:
    """Top-level settings container."""

    dialect: Dialect = PYTHON
    dependency_sections: tuple[str, ...] = DEFAULT_DEPENDENCY_SECTIONS
    exclude_dirs: tuple[str, ...] = DEFAULT_EXCLUDE_DIRS

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Settings:
        """Create Settings from a parsed JSON object, validating each field."""
        dialect_name = data.get("dialect", PYTHON.name)
        if not isinstance(dialect_name, str):
            raise ConfigError("'dialect' must be a string")
        try:
            dialect = get_dialect(dialect_name)
        except UnknownDialectError as exc:
            raise ConfigError(str(exc)) from exc

        sections = _string_tuple(data, "dependencySections", DEFAULT_DEPENDENCY_SECTIONS)
        if not sections:
            raise ConfigError("'dependencySections' must contain at least one entry")

        return cls(
            dialect=dialect,
            dependency_sections=sections,
            exclude_dirs=_string_tuple(data, "excludeDirs", DEFAULT_EXCLUDE_DIRS),
        )


def _resolve_config_path(path: Path | str | None = None) -> Path | None:
    """Resolve the configuration file path.

    Priority:
    1. Explicit path argument
    2. VERSION_REGEX_CONFIG environment variable
    3. None (built-in defaults)
    """
    if path is not None:
        return Path(path)

    env_path = os.environ.get(CONFIG_PATH_ENV_VAR)
    if env_path:
        return Path(env_path)

    return None


def load_settings(path: Path | str | None = None) -> Settings:
    """Load and validate settings.

    Args:
        path: Optional path to the config file. If not provided, uses the
            VERSION_REGEX_CONFIG env var or falls back to built-in defaults.

    Returns:
        A validated Settings object.

    Raises:
        ConfigError: If a configured file cannot be read or contains invalid data.
    """
    config_path = _resolve_config_path(path)
    if config_path is None:
        return Settings()

    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        content = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read configuration file: {exc}") from exc

    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in configuration file: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a JSON object")

    return Settings.from_dict(data)
