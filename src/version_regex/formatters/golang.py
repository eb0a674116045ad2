"""Go module versions: mandatory ``v`` prefix, optional pseudo-versions."""

from __future__ import annotations

import re

from ..patterns import BUILD_META_PATTERN, VERSION_DOT, VERSION_SUFFIX_PATTERN, anchor
from .literal import quote_numeric_parts, split_suffix

# v0.0.0-20210101000000-abcdef123456
_PSEUDO_TIMESTAMP_LEN = 14
_PSEUDO_REVISION_LEN = 12

# Further dot-separated identifiers after a pinned pre-release tag
_PRE_RELEASE_CONTINUATION = r"(?:\.[a-zA-Z0-9\-\.]+)?"


def is_go_module_version(version: str) -> bool:
    return version.startswith("v") and len(version) > 1


def is_pseudo_version(version: str) -> bool:
    parts = version.removeprefix("v").split("-")
    return (
        len(parts) >= 3
        and parts[0] == "0.0.0"
        and len(parts[1]) == _PSEUDO_TIMESTAMP_LEN
        and len(parts[2]) == _PSEUDO_REVISION_LEN
    )


def go_module_regex(version: str) -> str:
    """Return a pattern for a ``v``-prefixed module version.

    Pseudo-versions pin one commit and are matched literally. A pinned
    pre-release also accepts later identifiers of the same tag
    (``v2.0.0-beta`` accepts ``v2.0.0-beta.1``); a plain tag accepts an
    optional pre-release and build suffix.
    """
    if is_pseudo_version(version):
        return anchor(re.escape(version))

    main, pre, build = split_suffix(version[1:])
    pattern = "v" + VERSION_DOT.join(quote_numeric_parts(main.split("."), version))

    if pre:
        pattern += re.escape(pre) + _PRE_RELEASE_CONTINUATION
        pattern += re.escape(build) if build else BUILD_META_PATTERN
    elif build:
        pattern += re.escape(build)
    else:
        pattern += VERSION_SUFFIX_PATTERN

    return anchor(pattern)
