"""Human-readable Markdown summary of a check report."""

from __future__ import annotations

from typing import Any


def render_summary(report: dict[str, Any]) -> str:
    """Return a Markdown string with totals and a table of unsatisfied constraints."""
    totals = report.get("totals", {})
    projects = report.get("projects", [])

    lines = []
    lines.append("# version-regex Summary")
    lines.append("")
    lines.append(
        f"Total projects: {totals.get('projects', 0)} | "
        f"Dependencies: {totals.get('dependencies', 0)} | "
        f"Findings: {totals.get('findings', 0)} | "
        f"Skipped: {totals.get('skipped', 0)}"
    )
    lines.append("")
    lines.append("| Project | Package | Constraint | Installed |")
    lines.append("| --- | --- | --- | --- |")

    has_rows = False
    skipped_rows: list[str] = []

    for proj in projects:
        path = proj.get("path") or "(unknown project)"
        findings = proj.get("findings") or []
        for entry in proj.get("skipped") or []:
            skipped_rows.append(
                f"| {path} | {entry.get('package', '')} | `{entry.get('constraint', '')}` "
                f"| {entry.get('reason', '')} |"
            )

        if not findings:
            lines.append(f"| {path} | All constraints satisfied | n/a | n/a |")
            has_rows = True
            continue

        for finding in findings:
            pkg = finding.get("package", "")
            constraint = finding.get("constraint", "")
            installed = finding.get("installed", "")
            lines.append(f"| {path} | {pkg} | `{constraint}` | {installed} |")
            has_rows = True

    if not has_rows:
        lines.append("| (no projects checked) | All constraints satisfied | n/a | n/a |")

    if skipped_rows:
        lines.append("")
        lines.append("## Skipped constraints")
        lines.append("")
        lines.append("| Project | Package | Constraint | Reason |")
        lines.append("| --- | --- | --- | --- |")
        lines.extend(skipped_rows)

    return "\n".join(lines) + "\n"
