"""Report aggregation and schema-friendly output."""

from __future__ import annotations

from typing import Any


def aggregate(projects: list[dict[str, Any]]) -> dict[str, Any]:
    """Aggregate per-project results into a single schema-compatible report.

    Each project is a dict with ``path``, ``dependencies``, ``findings`` and
    ``skipped`` lists. Findings are dependencies whose locked version falls
    outside the declared constraint; skipped entries are constraints that
    could not be converted to a pattern.
    """

    def total(key: str) -> int:
        return sum(len(p.get(key, [])) for p in projects)

    report: dict[str, Any] = {
        "version": "1",
        "hasFindings": total("findings") > 0,
        "projects": projects,
        "totals": {
            "projects": len(projects),
            "dependencies": total("dependencies"),
            "findings": total("findings"),
            "skipped": total("skipped"),
        },
    }

    return report
