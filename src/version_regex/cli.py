"""Command-line entrypoint: print the pattern for a version constraint.

Usage:
  version-regex '^1.2.3' [1.2.5 2.0.0 ...] [--dialect re2] [--config settings.json]

Sample versions after the constraint are tested against the generated pattern.
"""

from __future__ import annotations

import argparse
import logging
import sys

from .config import ConfigError, load_settings
from .core import version_to_regex
from .errors import VersionRegexError
from .models import get_dialect, get_known_dialects


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="version-regex",
        description="Convert a version constraint into an anchored regular expression.",
    )
    parser.add_argument("constraint", help="Version constraint, e.g. '>=1.2.3' or '[1.0,2.0)'")
    parser.add_argument("versions", nargs="*", help="Versions to test against the pattern")
    parser.add_argument(
        "--dialect",
        choices=get_known_dialects(),
        default=None,
        help="Target regex dialect (default: from settings, else python)",
    )
    parser.add_argument("--config", default=None, help="Path to a JSON settings file")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        settings = load_settings(args.config)
        dialect = get_dialect(args.dialect) if args.dialect else settings.dialect
        compiled = version_to_regex(args.constraint, dialect)
    except (ConfigError, VersionRegexError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    print(f"Version constraint: {args.constraint}")
    print(f"Generated regex: {compiled.pattern}")

    if args.versions:
        print("")
        print("Testing versions:")
        for version in args.versions:
            matches = compiled.fullmatch(version) is not None
            print(f"  {version}: {str(matches).lower()}")

    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
