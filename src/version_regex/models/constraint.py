"""Parsed version constraint model."""

from __future__ import annotations

from dataclasses import dataclass

OP_GREATER_EQUAL = ">="
OP_LESS_EQUAL = "<="
OP_NOT_EQUAL = "!="
OP_EQUAL_EQUAL = "=="
# Ruby pessimistic operator
OP_PESSIMISTIC = "~>"
# Python compatible release
OP_COMPATIBLE = "~="
OP_GREATER = ">"
OP_LESS = "<"
OP_EQUAL = "="
OP_CARET = "^"
OP_TILDE = "~"
OP_MAVEN_RANGE = "maven-range"

# Multi-character operators come before their single-character prefixes.
PREFIX_OPERATORS: tuple[str, ...] = (
    OP_GREATER_EQUAL,
    OP_LESS_EQUAL,
    OP_NOT_EQUAL,
    OP_EQUAL_EQUAL,
    OP_PESSIMISTIC,
    OP_COMPATIBLE,
    OP_GREATER,
    OP_LESS,
    OP_EQUAL,
    OP_CARET,
    OP_TILDE,
)

OPERATORS = frozenset(PREFIX_OPERATORS) | {OP_MAVEN_RANGE}


@dataclass(frozen=True)
class VersionConstraint:
    """An operator tag paired with the version literal it applies to.

    For ``maven-range`` the version keeps its brackets, e.g. ``"[1.0,2.0)"``.
    """

    operator: str
    version: str

    def __str__(self) -> str:
        if self.operator == OP_MAVEN_RANGE:
            return self.version
        return f"{self.operator}{self.version}"
