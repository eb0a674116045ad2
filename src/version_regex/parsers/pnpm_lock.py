"""Resolve direct dependency versions from pnpm-lock.yaml."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

_SECTIONS = ("dependencies", "devDependencies", "optionalDependencies")


def _clean_version(raw: Any) -> str | None:
    """Strip peer suffixes: ``1.2.3(react@18.2.0)`` (v6+) or ``1.2.3_react@18.2.0`` (v5)."""
    if isinstance(raw, dict):
        raw = raw.get("version")
    # YAML reads "1.0" as a float
    if isinstance(raw, (int, float)):
        raw = str(raw)
    if not isinstance(raw, str) or raw.startswith("link:"):
        return None
    return raw.split("(", 1)[0].split("_", 1)[0]


def parse(path: Path) -> dict[str, str]:
    """Return package -> version for the root importer.

    Lockfile v6+ lists direct dependencies under ``importers['.']`` with
    ``{specifier, version}`` entries; v5 keeps them at the top level.
    """
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    importers = data.get("importers") or {}
    root = importers.get(".") if isinstance(importers, dict) else None
    source = root if isinstance(root, dict) else data

    resolved: dict[str, str] = {}
    for section in _SECTIONS:
        deps = source.get(section) or {}
        if not isinstance(deps, dict):
            continue
        for name, raw in deps.items():
            version = _clean_version(raw)
            if version:
                resolved[str(name)] = version

    return resolved
