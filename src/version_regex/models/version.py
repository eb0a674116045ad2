"""Numeric version triple model."""

from __future__ import annotations

import re
from dataclasses import dataclass

from ..errors import ParseError
from ..patterns import MAX_COMPONENT, MAX_DIGITS

_COMPONENT_NAMES = ("major", "minor", "patch")
_COMPONENT_PATTERN = re.compile(r"[0-9]+")


def strip_suffix(version: str) -> str:
    """Drop a pre-release (``-...``) and build metadata (``+...``) tail."""
    clean = version.split("-", 1)[0]
    return clean.split("+", 1)[0]


@dataclass(frozen=True)
class VersionTriple:
    """The (major, minor, patch) components of a version literal."""

    major: int
    minor: int = 0
    patch: int = 0

    def __post_init__(self) -> None:
        for name in _COMPONENT_NAMES:
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be non-negative")
            if value > MAX_COMPONENT:
                raise ValueError(f"{name} must have at most {MAX_DIGITS} digits")

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.major, self.minor, self.patch)

    @classmethod
    def parse(cls, version: str) -> VersionTriple:
        """Parse ``"1.2.3"``-style literals.

        Pre-release and build tails are ignored, missing trailing components
        default to 0 and components past the patch are ignored.

        Raises:
            ParseError: If a component is not a base-10 integer of at most ten
                digits. ``component`` names the offending part.
        """
        parts = strip_suffix(version).split(".")
        values: list[int] = []
        for name, part in zip(_COMPONENT_NAMES, parts):
            if not _COMPONENT_PATTERN.fullmatch(part):
                raise ParseError(
                    f"invalid {name} version {part!r} in {version!r}: not a base-10 integer",
                    value=version,
                    component=name,
                )
            if len(part) > MAX_DIGITS:
                raise ParseError(
                    f"invalid {name} version {part!r} in {version!r}: "
                    f"more than {MAX_DIGITS} digits",
                    value=version,
                    component=name,
                )
            values.append(int(part))
        return cls(*values)
