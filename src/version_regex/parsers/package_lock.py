"""Resolve direct dependency versions from npm package-lock.json."""

from __future__ import annotations

import json
from pathlib import Path

_PREFIX = "node_modules/"


def parse(path: Path) -> dict[str, str]:
    """Return package -> version for packages installed at the project root.

    Supports npm v2+ ("packages" map) and falls back to the v1
    "dependencies" tree. Nested installs (``node_modules/a/node_modules/b``)
    are skipped because they never satisfy the root manifest.
    """
    data = json.loads(path.read_text(encoding="utf-8"))
    resolved: dict[str, str] = {}

    packages = data.get("packages")
    if isinstance(packages, dict):
        for key, meta in packages.items():
            if not key.startswith(_PREFIX) or not isinstance(meta, dict):
                continue
            name = key[len(_PREFIX):]
            if _PREFIX in name or meta.get("link"):
                continue
            version = meta.get("version")
            if version:
                resolved[name] = str(version)
        if resolved:
            return resolved

    deps = data.get("dependencies")
    if isinstance(deps, dict):
        for name, meta in deps.items():
            if isinstance(meta, dict) and "version" in meta:
                resolved[name] = str(meta["version"])

    return resolved
