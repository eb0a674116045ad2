"""Shared fixtures for the test suite."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from version_regex.config import CONFIG_PATH_ENV_VAR


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep settings and warn-only overrides from the outer shell out of tests."""
    monkeypatch.delenv(CONFIG_PATH_ENV_VAR, raising=False)
    monkeypatch.delenv("VERSION_REGEX_WARN_ONLY", raising=False)


def write_json(path: Path, data: object) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture
def npm_project(tmp_path: Path) -> Path:
    """A project whose lockfile pins one dependency outside its constraint."""
    project = tmp_path / "app"
    write_json(
        project / "package.json",
        {
            "name": "app",
            "dependencies": {"left-pad": "^1.2.0", "lodash": "~4.17.0"},
            "devDependencies": {"jest": ">=29.0.0 <30.0.0", "local-lib": "file:../lib"},
        },
    )
    write_json(
        project / "package-lock.json",
        {
            "lockfileVersion": 3,
            "packages": {
                "": {"name": "app"},
                "node_modules/left-pad": {"version": "1.3.0"},
                "node_modules/lodash": {"version": "4.18.1"},
                "node_modules/jest": {"version": "29.7.0"},
            },
        },
    )
    return tmp_path
