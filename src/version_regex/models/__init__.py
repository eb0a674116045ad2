"""Data models for version constraints and pattern targets."""

from __future__ import annotations

from .constraint import OPERATORS, PREFIX_OPERATORS, VersionConstraint
from .dialect import PYTHON, RE2, Dialect, UnknownDialectError, get_dialect, get_known_dialects
from .version import VersionTriple, strip_suffix

__all__ = [
    "Dialect",
    "OPERATORS",
    "PREFIX_OPERATORS",
    "PYTHON",
    "RE2",
    "UnknownDialectError",
    "VersionConstraint",
    "VersionTriple",
    "get_dialect",
    "get_known_dialects",
    "strip_suffix",
]
