"""npm-style comparator sets built from single-constraint patterns.

Supported expressions:
- a single constraint ("^1.2.3", ">=1.0", "[1.0,2.0)")
- whitespace-separated intersections, e.g. ">=1.0.0 <2.0.0"
- "||" unions, e.g. "^1.0.0 || ^2.0.0"
- hyphen ranges "1.0.0 - 2.0.0" -> ">=1.0.0 <=2.0.0"
- an empty alternative, meaning any version

An intersection is not expressible as one lookaround-free pattern, so a set
keeps one pattern per comparator and checks them together at match time.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from .core import version_to_regex
from .models import PYTHON, Dialect

_HYPHEN_RANGE = re.compile(r"^(\S+)\s+-\s+(\S+)$")
_OPERATOR_GAP = re.compile(r"(>=|<=|!=|==|~>|~=|>|<|=|\^|~)\s+")


def split_range_set(expr: str) -> list[list[str]]:
    """Return the comparator tokens of each ``||`` alternative."""
    alternatives: list[list[str]] = []
    for raw in expr.split("||"):
        alt = raw.strip()
        hyphen = _HYPHEN_RANGE.match(alt)
        if not alt:
            alternatives.append(["*"])
        elif alt[0] in "[(":
            alternatives.append([alt.replace(" ", "")])
        elif hyphen:
            alternatives.append([f">={hyphen.group(1)}", f"<={hyphen.group(2)}"])
        else:
            alternatives.append(_OPERATOR_GAP.sub(r"\1", alt).split())
    return alternatives


@dataclass(frozen=True)
class RangeSet:
    """Compiled comparator set: any alternative whose patterns all match."""

    expression: str
    alternatives: tuple[tuple[re.Pattern[str], ...], ...]

    @classmethod
    def compile(cls, expr: str, dialect: Dialect | str = PYTHON) -> RangeSet:
        """Compile every comparator of ``expr``.

        Raises:
            VersionRegexError: If any comparator cannot be converted.
        """
        alternatives = tuple(
            tuple(version_to_regex(token, dialect) for token in tokens)
            for tokens in split_range_set(expr)
        )
        return cls(expression=expr, alternatives=alternatives)

    @property
    def patterns(self) -> list[list[str]]:
        return [[compiled.pattern for compiled in alt] for alt in self.alternatives]

    def matches(self, version: str) -> bool:
        return any(
            all(compiled.fullmatch(version) for compiled in alt) for alt in self.alternatives
        )


def satisfies(installed: str, expr: str, dialect: Dialect | str = PYTHON) -> bool:
    return RangeSet.compile(expr, dialect).matches(installed.strip())
