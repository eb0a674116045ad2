"""Target regex dialects."""

from __future__ import annotations

from dataclasses import dataclass


class UnknownDialectError(ValueError):
    """Raised when a dialect name is not registered."""


@dataclass(slots=True, frozen=True)
class Dialect:
    """A regex engine family that generated pattern strings are meant for."""

    name: str
    supports_lookahead: bool
    description: str = ""


PYTHON = Dialect(
    name="python",
    supports_lookahead=True,
    description="Python re, PCRE, JavaScript and other backtracking engines",
)
RE2 = Dialect(
    name="re2",
    supports_lookahead=False,
    description="RE2, Go regexp and Rust regex (no lookaround)",
)

DIALECTS: dict[str, Dialect] = {
    PYTHON.name: PYTHON,
    RE2.name: RE2,
}


def get_dialect(name: str) -> Dialect:
    """Return the dialect registered under ``name``, or raise UnknownDialectError."""
    dialect = DIALECTS.get(name)
    if dialect is None:
        known = ", ".join(sorted(DIALECTS.keys()))
        raise UnknownDialectError(f"Unknown dialect '{name}'. Known dialects: {known}")
    return dialect


def get_known_dialects() -> list[str]:
    """Return a sorted list of all registered dialect names."""
    return sorted(DIALECTS.keys())
