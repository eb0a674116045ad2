"""Extract dependency constraints from package.json data."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from ..config import DEFAULT_DEPENDENCY_SECTIONS


def extract_constraints(
    data: Mapping[str, Any],
    sections: Iterable[str] = DEFAULT_DEPENDENCY_SECTIONS,
) -> list[tuple[str, str]]:
    """Return (package, constraint) pairs from the given dependency sections.

    A package listed in several sections is reported once, from the first
    section that declares it. Non-mapping sections are ignored.
    """
    pairs: list[tuple[str, str]] = []
    seen: set[str] = set()
    for section in sections:
        deps = data.get(section) or {}
        if not isinstance(deps, Mapping):
            continue
        for name, constraint in deps.items():
            if name in seen:
                continue
            seen.add(name)
            pairs.append((str(name), str(constraint)))

    return pairs
