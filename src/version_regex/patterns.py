"""Regex fragments and the numeric range synthesizer.

Every value here is a plain ``str`` fragment. Fragments only compose by
concatenation and alternation, so each one must be a self-contained
subexpression.

The synthesizer functions build patterns for "any integer >= n" and "any
integer <= n" out of character classes and counted repetition only:

    num_greater_or_equal(15)  -> (?:\\d{3,}|[2-9]\\d|1[5-9])
    num_less_or_equal(123)    -> (?:\\d|\\d{2}|0\\d{2}|1[0-1]\\d|12[0-3])
"""

from __future__ import annotations


REGEX_START = "^"
REGEX_END = "$"
REGEX_OR = "|"

VERSION_DIGITS = r"\d+"
VERSION_DOT = r"\."

# -alpha, -beta.1, -rc.2
PRE_RELEASE_PATTERN = r"(?:-[a-zA-Z0-9\-\.]+)?"
# +build.1, +20210101.abcdef
BUILD_META_PATTERN = r"(?:\+[a-zA-Z0-9\-\.]+)?"
VERSION_SUFFIX_PATTERN = PRE_RELEASE_PATTERN + BUILD_META_PATTERN

SEMANTIC_VERSION_CORE = VERSION_DIGITS + VERSION_DOT + VERSION_DIGITS + VERSION_DOT + VERSION_DIGITS
EXACT_VERSION_TEMPLATE = REGEX_START + SEMANTIC_VERSION_CORE + VERSION_SUFFIX_PATTERN + REGEX_END

# An empty character class: matches no character, hence no string at all.
CONTRADICTION = r"[^\s\S]"
EMPTY_MATCH_PATTERN = REGEX_START + CONTRADICTION + REGEX_END

MAX_DIGITS = 10
MAX_COMPONENT = 10**MAX_DIGITS - 1


def anchor(body: str) -> str:
    """Wrap a fragment so it must span the whole candidate string."""
    return REGEX_START + body + REGEX_END


def group(body: str) -> str:
    return "(?:" + body + ")"


def join_patterns(patterns: list[str]) -> str:
    """Join alternatives; a single alternative is returned without a group."""
    if len(patterns) == 1:
        return patterns[0]
    return group(REGEX_OR.join(patterns))


def _digit_range_up(digit: int) -> str:
    if digit == 9:
        return "9"
    return f"[{digit}-9]"


def _digit_range_down(digit: int) -> str:
    if digit == 0:
        return "0"
    return f"[0-{digit}]"


def _any_digits(count: int) -> str:
    if count == 1:
        return r"\d"
    return rf"\d{{{count}}}"


def num_greater_or_equal(n: int) -> str:
    """Return a fragment matching every integer >= ``n``.

    Values are bounded to ten digits: for a ten-digit ``n`` no "longer
    number" alternative is emitted, and ``n`` above that bound yields the
    contradiction fragment.
    """
    if n <= 0:
        return VERSION_DIGITS
    if n > MAX_COMPONENT:
        return CONTRADICTION

    s = str(n)
    num_digits = len(s)
    patterns: list[str] = []

    # More digits is always larger
    if num_digits < MAX_DIGITS:
        patterns.append(rf"\d{{{num_digits + 1},}}")

    for i, char in enumerate(s):
        digit = int(char)
        prefix = s[:i]
        remaining = num_digits - i - 1

        if remaining == 0:
            patterns.append(prefix + _digit_range_up(digit))
        elif digit < 9:
            patterns.append(prefix + _digit_range_up(digit + 1) + _any_digits(remaining))

    return join_patterns(patterns)


def num_less_or_equal(n: int) -> str:
    """Return a fragment matching every integer <= ``n``.

    Negative ``n`` has no satisfying value and yields the contradiction
    fragment instead of raising; callers hit this when subtracting one from a
    zero component.
    """
    if n < 0:
        return CONTRADICTION

    s = str(n)
    num_digits = len(s)
    patterns: list[str] = []

    # Fewer digits is always smaller
    for count in range(1, num_digits):
        patterns.append(_any_digits(count))

    for i, char in enumerate(s):
        digit = int(char)
        prefix = s[:i]
        remaining = num_digits - i - 1

        if remaining == 0:
            patterns.append(prefix + _digit_range_down(digit))
        elif digit > 0:
            patterns.append(prefix + _digit_range_down(digit - 1) + _any_digits(remaining))

    return join_patterns(patterns)
