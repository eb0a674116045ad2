"""Maven bracketed version ranges: ``[1.0,2.0)``, ``(,3.0]``, ``[1.5]``.

``[`` / ``]`` mark an inclusive bound, ``(`` / ``)`` an exclusive one and an
empty side leaves that direction open.
"""

from __future__ import annotations

from dataclasses import dataclass

from .. import boundaries
from ..errors import DialectUnsupportedError, ParseError
from ..models import Dialect, VersionConstraint, VersionTriple
from ..models.constraint import OP_MAVEN_RANGE
from ..patterns import (
    CONTRADICTION,
    EMPTY_MATCH_PATTERN,
    EXACT_VERSION_TEMPLATE,
    REGEX_END,
    VERSION_SUFFIX_PATTERN,
    anchor,
)

_OPENERS = "[("
_CLOSERS = "])"


@dataclass(frozen=True)
class MavenRange:
    """Bounds of a bracketed range; ``None`` means unbounded on that side."""

    lower: VersionTriple | None
    upper: VersionTriple | None
    lower_inclusive: bool
    upper_inclusive: bool

    @classmethod
    def parse(cls, text: str) -> MavenRange:
        """Parse ``text`` including its brackets.

        A single version between inclusive brackets (``[1.5]``) pins both
        bounds to it.
        """
        _check_brackets(text)
        lower_inclusive = text[0] == "["
        upper_inclusive = text[-1] == "]"
        content = text[1:-1]

        parts = [part.strip() for part in content.split(",")]
        if len(parts) == 1 and parts[0] and lower_inclusive and upper_inclusive:
            pinned = VersionTriple.parse(parts[0])
            return cls(pinned, pinned, True, True)
        if len(parts) != 2:
            raise ParseError(
                f"invalid Maven range {text!r}: expected exactly one comma", value=text
            )

        lower, upper = parts
        return cls(
            lower=VersionTriple.parse(lower) if lower else None,
            upper=VersionTriple.parse(upper) if upper else None,
            lower_inclusive=lower_inclusive,
            upper_inclusive=upper_inclusive,
        )

    def lower_fragment(self) -> str | None:
        if self.lower is None:
            return None
        if self.lower_inclusive:
            return boundaries.greater_or_equal(self.lower)
        return boundaries.greater_than(self.lower)

    def upper_fragment(self) -> str | None:
        if self.upper is None:
            return None
        if self.upper_inclusive:
            return boundaries.less_or_equal(self.upper)
        return boundaries.less_than(self.upper)


def _check_brackets(text: str) -> None:
    if len(text) < 3:
        raise ParseError(f"invalid Maven range {text!r}: too short", value=text)
    if text[0] not in _OPENERS or text[-1] not in _CLOSERS:
        raise ParseError(f"invalid Maven range brackets: {text!r}", value=text)


def parse_maven_range(text: str) -> VersionConstraint:
    """Turn ``[lo,hi)`` style text into a ``maven-range`` constraint."""
    _check_brackets(text)
    return VersionConstraint(operator=OP_MAVEN_RANGE, version=text)


def maven_range_regex(text: str, dialect: Dialect) -> str:
    """Return the pattern for a bracketed range.

    One bound becomes a plain boundary pattern. Two bounds are intersected
    with a lookahead, so the target dialect must support it.
    """
    bounds = MavenRange.parse(text)
    lower = bounds.lower_fragment()
    upper = bounds.upper_fragment()

    if lower is None and upper is None:
        return EXACT_VERSION_TEMPLATE
    if CONTRADICTION in (lower, upper):
        return EMPTY_MATCH_PATTERN
    if lower is None or upper is None:
        return anchor((lower or upper) + VERSION_SUFFIX_PATTERN)

    if not dialect.supports_lookahead:
        raise DialectUnsupportedError(OP_MAVEN_RANGE, dialect.name, "lookahead")
    return "^(?=" + lower + VERSION_SUFFIX_PATTERN + REGEX_END + ")" + upper + VERSION_SUFFIX_PATTERN + REGEX_END
