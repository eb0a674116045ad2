"""Resolve dependency versions from yarn.lock (classic and berry)."""

from __future__ import annotations

from pathlib import Path


def _split_descriptor(descriptor: str) -> tuple[str, str] | None:
    """``@scope/pkg@^1.0.0`` -> (``@scope/pkg``, ``^1.0.0``)."""
    descriptor = descriptor.strip().strip('"')
    idx = descriptor.find("@", 1)
    if idx == -1:
        return None
    name, constraint = descriptor[:idx], descriptor[idx + 1:]
    # yarn berry records the protocol: "lodash@npm:^4.17.21"
    if constraint.startswith("npm:"):
        constraint = constraint[len("npm:"):]
    return name, constraint


def parse(path: Path) -> dict[str, str]:
    """Return ``"name@constraint"`` -> version for every lock entry.

    yarn keys entries by the constraints that requested them, so a manifest
    dependency is looked up with its own constraint string.
    """
    lines = path.read_text(encoding="utf-8").splitlines()
    resolved: dict[str, str] = {}

    descriptors: list[tuple[str, str]] = []
    for raw in lines:
        line = raw.rstrip()
        if not line or line.lstrip().startswith("#"):
            continue
        if not line.startswith(" ") and line.endswith(":"):
            descriptors = []
            for descriptor in line[:-1].split(","):
                parts = _split_descriptor(descriptor)
                if parts is not None:
                    descriptors.append(parts)
            continue

        stripped = line.strip()
        if descriptors and (stripped.startswith("version ") or stripped.startswith("version:")):
            version = stripped[len("version"):].lstrip(" :").strip('"')
            for name, constraint in descriptors:
                resolved[f"{name}@{constraint}"] = version
            descriptors = []

    return resolved
