"""version-regex core package.

Converts version constraints (``^1.2.3``, ``>=1.2.3``, ``[1.0,2.0)``, ...)
into anchored regular expressions that match exactly the satisfying version
strings, so matching needs no numeric comparison.
"""

from .core import constraint_to_regex, version_matches, version_to_pattern, version_to_regex
from .errors import (
    DialectUnsupportedError,
    ParseError,
    UnsupportedOperatorError,
    VersionRegexError,
)
from .models import PYTHON, RE2, Dialect, VersionConstraint, VersionTriple
from .parsers.constraint import parse as parse_constraint
from .patterns import num_greater_or_equal, num_less_or_equal

__all__ = [
    # Compiler
    "constraint_to_regex",
    "parse_constraint",
    "version_matches",
    "version_to_pattern",
    "version_to_regex",
    # Synthesizer
    "num_greater_or_equal",
    "num_less_or_equal",
    # Models
    "Dialect",
    "PYTHON",
    "RE2",
    "VersionConstraint",
    "VersionTriple",
    # Errors
    "DialectUnsupportedError",
    "ParseError",
    "UnsupportedOperatorError",
    "VersionRegexError",
]
