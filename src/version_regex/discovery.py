"""Project and lockfile discovery utilities."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from .config import DEFAULT_EXCLUDE_DIRS

MANIFEST_NAME = "package.json"

# Checked in order; the first lockfile present wins.
LOCKFILE_NAMES = ("package-lock.json", "pnpm-lock.yaml", "yarn.lock")


def discover_projects(root: Path, exclude_dirs: Iterable[str] = DEFAULT_EXCLUDE_DIRS) -> list[Path]:
    """Find directories holding a package.json under root (excluding vendor dirs)."""
    root = root.resolve()
    excluded = set(exclude_dirs)
    found: list[Path] = []

    for path in root.rglob(MANIFEST_NAME):
        if not path.is_file():
            continue
        if excluded.intersection(path.relative_to(root).parts):
            continue
        found.append(path.parent)

    return sorted(found)


def find_lockfile(project_dir: Path) -> Path | None:
    for name in LOCKFILE_NAMES:
        candidate = project_dir / name
        if candidate.is_file():
            return candidate
    return None
