"""Wildcard literals such as ``1.*`` or ``1.2.x``."""

from __future__ import annotations

import re

from ..patterns import (
    BUILD_META_PATTERN,
    PRE_RELEASE_PATTERN,
    REGEX_END,
    REGEX_START,
    VERSION_DIGITS,
    VERSION_DOT,
)
from .literal import quote_numeric_part, split_suffix

WILDCARDS = frozenset({"*", "x", "X"})


def is_wildcard_version(version: str) -> bool:
    main, _, _ = split_suffix(version)
    return any(part in WILDCARDS for part in main.split("."))


def wildcard_regex(version: str) -> str:
    """Return a pattern where each wildcard part matches any number.

    A trailing wildcard also covers the parts that follow it, so ``1.*``
    accepts ``1.2.3``. An optional ``v`` prefix is kept literally, and an
    explicit pre-release or build tail is pinned as in an exact match.
    """
    prefix = ""
    body = version
    if body.startswith("v"):
        prefix, body = "v", body[1:]

    main, pre, build = split_suffix(body)
    parts = main.split(".")
    pattern_parts = [
        VERSION_DIGITS if part in WILDCARDS else quote_numeric_part(part, index, version)
        for index, part in enumerate(parts)
    ]

    if parts[-1] in WILDCARDS:
        while len(pattern_parts) < 3:
            pattern_parts.append(VERSION_DIGITS)

    return (
        REGEX_START
        + prefix
        + VERSION_DOT.join(pattern_parts)
        + (re.escape(pre) if pre else PRE_RELEASE_PATTERN)
        + (re.escape(build) if build else BUILD_META_PATTERN)
        + REGEX_END
    )
