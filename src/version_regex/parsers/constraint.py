"""Split a raw constraint string into operator and version literal."""

from __future__ import annotations

from ..errors import ParseError
from ..formatters.maven import parse_maven_range
from ..models import PREFIX_OPERATORS, VersionConstraint
from ..models.constraint import OP_EQUAL_EQUAL


def parse(text: str) -> VersionConstraint:
    """Return the constraint for ``text``.

    Bracketed text is a Maven range. Otherwise the first operator in
    ``PREFIX_OPERATORS`` that prefixes the text is stripped; with no operator
    the constraint is an exact match.

    Examples:
        "^1.2.3"    -> VersionConstraint("^", "1.2.3")
        ">= 1.0"    -> VersionConstraint(">=", "1.0")
        "[1.0,2.0)" -> VersionConstraint("maven-range", "[1.0,2.0)")
        "1.2.3"     -> VersionConstraint("==", "1.2.3")
    """
    text = text.strip()
    if not text:
        raise ParseError("empty version constraint", value=text)

    if text[0] in "[(":
        return parse_maven_range(text)

    for operator in PREFIX_OPERATORS:
        if text.startswith(operator):
            return VersionConstraint(operator=operator, version=text[len(operator):].strip())

    return VersionConstraint(operator=OP_EQUAL_EQUAL, version=text)
