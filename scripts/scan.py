#!/usr/bin/env python3
"""Local CLI entrypoint to check locked versions against package.json constraints.

Usage:
  python scripts/scan.py --root . [--manifest path_or_url] [--summary] [--warn-only]

Prints the JSON report (or a Markdown summary) and exits 10 when a locked
version falls outside its declared constraint.
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path

from version_regex.check import check_repository
from version_regex.config import ConfigError, load_settings
from version_regex.sources import SourceError
from version_regex.summary import render_summary


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("--root", type=Path, default=Path("."))
    parser.add_argument("--manifest", dest="manifest_source", type=str, default=None)
    parser.add_argument("--config", type=str, default=None)
    parser.add_argument("--summary", action="store_true", help="Print Markdown instead of JSON")
    parser.add_argument("--warn-only", action="store_true")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = load_settings(args.config)
        report = check_repository(args.root, manifest_source=args.manifest_source, settings=settings)
    except (ConfigError, SourceError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    if args.summary:
        print(render_summary(report), end="")
    else:
        print(json.dumps(report, indent=2))

    has_findings = bool(report.get("hasFindings"))

    # Default behavior: fail on findings unless env override set or --warn-only
    if has_findings and not args.warn_only:
        warn_env = os.getenv("VERSION_REGEX_WARN_ONLY", "").strip().lower()
        if warn_env in {"1", "true", "yes", "y"}:
            return 0
        return 10

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
