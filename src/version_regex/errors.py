"""Error taxonomy for constraint conversion."""

from __future__ import annotations


class VersionRegexError(ValueError):
    """Base error for failures while converting a constraint to a pattern."""


class ParseError(VersionRegexError):
    """Raised when a version literal or constraint string is malformed."""

    def __init__(self, message: str, *, value: str, component: str | None = None) -> None:
        super().__init__(message)
        self.value = value
        self.component = component


class UnsupportedOperatorError(VersionRegexError):
    """Raised when an operator tag is not in the closed operator set."""

    def __init__(self, operator: str) -> None:
        super().__init__(f"unsupported operator: {operator!r}")
        self.operator = operator


class DialectUnsupportedError(VersionRegexError):
    """Raised when a pattern needs a regex feature the target dialect lacks."""

    def __init__(self, operator: str, dialect: str, feature: str = "lookahead") -> None:
        super().__init__(
            f"operator {operator!r} requires {feature}, which the {dialect!r} dialect does not support"
        )
        self.operator = operator
        self.dialect = dialect
        self.feature = feature
