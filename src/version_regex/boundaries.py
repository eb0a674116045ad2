"""Component-wise boundary patterns over (major, minor, patch).

"version >= M.m.p" is the disjoint union of

    major >= M+1
    major == M and minor >= m+1
    major == M and minor == m and patch >= p

and "<=" is its mirror. Each clause pins the leading components as literal
digits and hands the open component to the numeric range synthesizer.
"""

from __future__ import annotations

from .models import VersionTriple
from .patterns import (
    CONTRADICTION,
    VERSION_DIGITS,
    VERSION_DOT,
    join_patterns,
    num_greater_or_equal,
    num_less_or_equal,
)


def _clause(*components: str) -> str:
    return VERSION_DOT.join(components)


def _finish(clauses: list[str]) -> str:
    if not clauses:
        return CONTRADICTION
    return join_patterns(clauses)


def _lower_bound(version: VersionTriple, *, strict: bool) -> str:
    major, minor, patch = version.as_tuple()
    candidates = [
        (num_greater_or_equal(major + 1), VERSION_DIGITS, VERSION_DIGITS),
        (str(major), num_greater_or_equal(minor + 1), VERSION_DIGITS),
        (str(major), str(minor), num_greater_or_equal(patch + 1 if strict else patch)),
    ]
    # A component bound past the ten-digit ceiling cannot be met.
    clauses = [_clause(*parts) for parts in candidates if CONTRADICTION not in parts]
    return _finish(clauses)


def _upper_bound(version: VersionTriple, *, strict: bool) -> str:
    major, minor, patch = version.as_tuple()
    clauses: list[str] = []

    if major > 0:
        clauses.append(_clause(num_less_or_equal(major - 1), VERSION_DIGITS, VERSION_DIGITS))

    if minor > 0:
        clauses.append(_clause(str(major), num_less_or_equal(minor - 1), VERSION_DIGITS))

    # Nothing is strictly below a zero patch.
    last = patch - 1 if strict else patch
    if last >= 0:
        clauses.append(_clause(str(major), str(minor), num_less_or_equal(last)))

    return _finish(clauses)


def greater_or_equal(version: VersionTriple) -> str:
    """Fragment matching every ``major.minor.patch`` >= ``version``."""
    return _lower_bound(version, strict=False)


def greater_than(version: VersionTriple) -> str:
    return _lower_bound(version, strict=True)


def less_or_equal(version: VersionTriple) -> str:
    """Fragment matching every ``major.minor.patch`` <= ``version``."""
    return _upper_bound(version, strict=False)


def less_than(version: VersionTriple) -> str:
    """Fragment matching every triple strictly below ``version``.

    ``less_than(0.0.0)`` has no clauses left and returns the contradiction
    fragment.
    """
    return _upper_bound(version, strict=True)
