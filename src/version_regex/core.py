"""Constraint compiler entrypoints.

Turns a parsed ``VersionConstraint`` into an anchored pattern string, and a
raw constraint string into a compiled ``re.Pattern``:

    >>> version_to_regex("^1.2.3").fullmatch("1.9.0") is not None
    True

Numeric comparisons are expressed through ``boundaries``; exact literals are
quoted, or routed to an ecosystem formatter when their shape calls for it.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from functools import lru_cache
from typing import TypeAlias

from . import boundaries
from .errors import DialectUnsupportedError, UnsupportedOperatorError, VersionRegexError
from .formatters import (
    csharp_version_regex,
    go_module_regex,
    is_csharp_version,
    is_go_module_version,
    is_wildcard_version,
    maven_range_regex,
    wildcard_regex,
)
from .formatters.literal import quote_numeric_parts, split_suffix
from .models import PYTHON, Dialect, VersionConstraint, VersionTriple, get_dialect
from .models import constraint as ops
from .parsers.constraint import parse as parse_constraint
from .patterns import (
    BUILD_META_PATTERN,
    CONTRADICTION,
    EMPTY_MATCH_PATTERN,
    PRE_RELEASE_PATTERN,
    REGEX_END,
    REGEX_START,
    VERSION_DIGITS,
    VERSION_DOT,
    VERSION_SUFFIX_PATTERN,
    anchor,
)

logger = logging.getLogger(__name__)

# Body of the != pattern: one to three numeric components
_LOOSE_VERSION_CORE = r"\d+(?:\.\d+)?(?:\.\d+)?"

Handler: TypeAlias = Callable[[str, Dialect], str]


def exact_match_regex(version: str) -> str:
    """Pattern for an exact version literal.

    An explicit pre-release or build tail is matched literally; when absent,
    any pre-release/build tail is accepted.
    """
    if is_wildcard_version(version):
        return wildcard_regex(version)
    if is_go_module_version(version):
        return go_module_regex(version)
    if is_csharp_version(version):
        return csharp_version_regex(version)

    main, pre, build = split_suffix(version)
    pattern = VERSION_DOT.join(quote_numeric_parts(main.split("."), version))
    pattern += re.escape(pre) if pre else PRE_RELEASE_PATTERN
    pattern += re.escape(build) if build else BUILD_META_PATTERN
    return anchor(pattern)


def boundary_pattern(body: str) -> str:
    """Anchor a boundary fragment and give it the optional suffix."""
    if body == CONTRADICTION:
        return EMPTY_MATCH_PATTERN
    return anchor(body + VERSION_SUFFIX_PATTERN)


def _exact(version: str, dialect: Dialect) -> str:
    return exact_match_regex(version)


def _boundary(builder: Callable[[VersionTriple], str]) -> Handler:
    def handler(version: str, dialect: Dialect) -> str:
        return boundary_pattern(builder(VersionTriple.parse(version)))

    return handler


def _not_equal(version: str, dialect: Dialect) -> str:
    if not dialect.supports_lookahead:
        raise DialectUnsupportedError(ops.OP_NOT_EQUAL, dialect.name, "negative lookahead")
    exact_core = exact_match_regex(version).removeprefix(REGEX_START).removesuffix(REGEX_END)
    return (
        REGEX_START
        + "(?!"
        + exact_core
        + REGEX_END
        + ")"
        + _LOOSE_VERSION_CORE
        + VERSION_SUFFIX_PATTERN
        + REGEX_END
    )


def _caret(version: str, dialect: Dialect) -> str:
    """^1.2.3 keeps the major; ^0.2.3 keeps major and minor.

    A 0.x release is unstable, so only patch updates count as compatible.
    """
    parsed = VersionTriple.parse(version)
    if parsed.major == 0:
        body = VERSION_DOT.join(["0", str(parsed.minor), VERSION_DIGITS])
    else:
        body = VERSION_DOT.join([str(parsed.major), VERSION_DIGITS, VERSION_DIGITS])
    return anchor(body + VERSION_SUFFIX_PATTERN)


def _tilde(version: str, dialect: Dialect) -> str:
    parsed = VersionTriple.parse(version)
    body = VERSION_DOT.join([str(parsed.major), str(parsed.minor), VERSION_DIGITS])
    return anchor(body + VERSION_SUFFIX_PATTERN)


def _maven_range(version: str, dialect: Dialect) -> str:
    return maven_range_regex(version, dialect)


# Registry of operator handlers, keyed by operator tag.
HANDLERS: dict[str, Handler] = {
    ops.OP_EQUAL_EQUAL: _exact,
    ops.OP_EQUAL: _exact,
    ops.OP_GREATER_EQUAL: _boundary(boundaries.greater_or_equal),
    ops.OP_LESS_EQUAL: _boundary(boundaries.less_or_equal),
    ops.OP_GREATER: _boundary(boundaries.greater_than),
    ops.OP_LESS: _boundary(boundaries.less_than),
    ops.OP_NOT_EQUAL: _not_equal,
    ops.OP_CARET: _caret,
    ops.OP_TILDE: _tilde,
    ops.OP_PESSIMISTIC: _tilde,
    ops.OP_COMPATIBLE: _tilde,
    ops.OP_MAVEN_RANGE: _maven_range,
}


def _resolve_dialect(dialect: Dialect | str) -> Dialect:
    if isinstance(dialect, str):
        return get_dialect(dialect)
    return dialect


def constraint_to_regex(constraint: VersionConstraint, dialect: Dialect | str = PYTHON) -> str:
    """Return the anchored pattern string for a parsed constraint.

    Raises:
        UnsupportedOperatorError: If the operator is not registered.
        ParseError: If the version literal is malformed.
        DialectUnsupportedError: If the operator needs lookahead and the
            target dialect has none.
    """
    handler = HANDLERS.get(constraint.operator)
    if handler is None:
        raise UnsupportedOperatorError(constraint.operator)

    target = _resolve_dialect(dialect)
    pattern = handler(constraint.version, target)
    logger.debug("Compiled %s for %s: %s", constraint, target.name, pattern)
    return pattern


def version_to_pattern(constraint: str, dialect: Dialect | str = PYTHON) -> str:
    """Parse and compile ``constraint`` to a pattern string."""
    return constraint_to_regex(parse_constraint(constraint), dialect)


@lru_cache(maxsize=512)
def _compile(constraint: str, dialect: Dialect) -> re.Pattern[str]:
    pattern = version_to_pattern(constraint, dialect)
    try:
        return re.compile(pattern, re.ASCII)
    except re.error as exc:
        raise VersionRegexError(f"failed to compile pattern {pattern!r}: {exc}") from exc


def version_to_regex(constraint: str, dialect: Dialect | str = PYTHON) -> re.Pattern[str]:
    """Return a compiled pattern for ``constraint``.

    Compiled patterns are cached per (constraint, dialect).
    """
    return _compile(constraint, _resolve_dialect(dialect))


def version_matches(version: str, constraint: str, dialect: Dialect | str = PYTHON) -> bool:
    """True if ``version`` satisfies ``constraint``."""
    return version_to_regex(constraint, dialect).fullmatch(version) is not None
