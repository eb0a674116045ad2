"""Check locked dependency versions against their declared constraints.

Every constraint in a project's package.json is compiled to patterns; the
version the lockfile resolved for that dependency must match them.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

import yaml

from .config import Settings, load_settings
from .discovery import MANIFEST_NAME, discover_projects, find_lockfile
from .errors import VersionRegexError
from .parsers.package_json import extract_constraints
from .parsers.package_lock import parse as parse_package_lock
from .parsers.pnpm_lock import parse as parse_pnpm_lock
from .parsers.yarn_lock import parse as parse_yarn_lock
from .ranges import RangeSet
from .report import aggregate
from .sources import SourceError, is_url, load_manifest

logger = logging.getLogger(__name__)

LOCKFILE_PARSERS: dict[str, Callable[[Path], dict[str, str]]] = {
    "package-lock.json": parse_package_lock,
    "pnpm-lock.yaml": parse_pnpm_lock,
    "yarn.lock": parse_yarn_lock,
}


def load_locked_versions(project_dir: Path) -> dict[str, str]:
    """Return the resolved versions from the project's lockfile, if any."""
    lockfile = find_lockfile(project_dir)
    if lockfile is None:
        return {}

    try:
        return LOCKFILE_PARSERS[lockfile.name](lockfile)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        raise SourceError(f"Failed to parse lockfile {lockfile}: {exc}") from exc


def check_project(
    path: str,
    manifest: dict[str, Any],
    locked: dict[str, str],
    settings: Settings,
) -> dict[str, Any]:
    """Compile each declared constraint and compare the locked version.

    Constraints that cannot be converted (git URLs, tags such as ``latest``,
    operators the dialect cannot express) are reported as skipped.
    """
    dependencies: list[dict[str, Any]] = []
    findings: list[dict[str, Any]] = []
    skipped: list[dict[str, Any]] = []

    for name, constraint in extract_constraints(manifest, settings.dependency_sections):
        try:
            range_set = RangeSet.compile(constraint, settings.dialect)
        except VersionRegexError as exc:
            logger.warning("Skipping %s %r in %s: %s", name, constraint, path, exc)
            skipped.append({"package": name, "constraint": constraint, "reason": str(exc)})
            continue

        installed = locked.get(f"{name}@{constraint}") or locked.get(name)
        satisfied = range_set.matches(installed) if installed is not None else None
        dependencies.append(
            {
                "package": name,
                "constraint": constraint,
                "installed": installed,
                "patterns": range_set.patterns,
                "satisfied": satisfied,
            }
        )
        if satisfied is False:
            findings.append({"package": name, "constraint": constraint, "installed": installed})

    return {
        "path": path,
        "dependencies": dependencies,
        "findings": findings,
        "skipped": skipped,
    }


def check_repository(
    root: Path,
    manifest_source: str | None = None,
    settings: Settings | None = None,
) -> dict[str, Any]:
    """Check every project under ``root``, or a single manifest.

    Params:
        root: repository root to scan
        manifest_source: optional URL or path of one package.json; a local
            manifest is paired with the lockfile beside it, a remote one is
            only compiled
        settings: optional settings; loaded with ``load_settings`` when None

    Returns: dict report matching ``schemas/report.schema.json``
    """
    settings = settings or load_settings()
    root = root.resolve()

    if manifest_source:
        locked: dict[str, str] = {}
        if not is_url(manifest_source):
            locked = load_locked_versions(Path(manifest_source).resolve().parent)
        manifest = load_manifest(manifest_source)
        return aggregate([check_project(manifest_source, manifest, locked, settings)])

    projects: list[dict[str, Any]] = []
    for project_dir in discover_projects(root, settings.exclude_dirs):
        manifest = load_manifest(project_dir / MANIFEST_NAME)
        locked = load_locked_versions(project_dir)
        label = str(project_dir.relative_to(root))
        logger.debug("Checking %s (%d locked versions)", label, len(locked))
        projects.append(check_project(label, manifest, locked, settings))

    return aggregate(projects)
