"""Ecosystem-specific literal formatters.

Each formatter maps one package ecosystem's literal syntax onto the shared
boundary and exact-match primitives.
"""

from __future__ import annotations

from .csharp import csharp_version_regex, is_csharp_version
from .golang import go_module_regex, is_go_module_version, is_pseudo_version
from .maven import MavenRange, maven_range_regex, parse_maven_range
from .wildcard import WILDCARDS, is_wildcard_version, wildcard_regex

__all__ = [
    # Maven
    "MavenRange",
    "maven_range_regex",
    "parse_maven_range",
    # Go modules
    "go_module_regex",
    "is_go_module_version",
    "is_pseudo_version",
    # NuGet
    "csharp_version_regex",
    "is_csharp_version",
    # Wildcards
    "WILDCARDS",
    "is_wildcard_version",
    "wildcard_regex",
]
