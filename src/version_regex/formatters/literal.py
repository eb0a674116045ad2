"""Quoting helpers shared by the literal formatters."""

from __future__ import annotations

import re

from ..errors import ParseError

_PART_NAMES = ("major", "minor", "patch", "revision")
_NUMERIC_PART = re.compile(r"[0-9]+")


def _part_name(index: int) -> str:
    if index < len(_PART_NAMES):
        return _PART_NAMES[index]
    return f"part {index + 1}"


def quote_numeric_part(part: str, index: int, version: str) -> str:
    """Regex-quote one numeric part of ``version``; ``index`` names it in errors."""
    if not _NUMERIC_PART.fullmatch(part):
        name = _part_name(index)
        raise ParseError(
            f"invalid {name} version {part!r} in {version!r}: not a base-10 integer",
            value=version,
            component=name,
        )
    return re.escape(part)


def quote_numeric_parts(parts: list[str], version: str) -> list[str]:
    return [quote_numeric_part(part, index, version) for index, part in enumerate(parts)]


def split_suffix(version: str) -> tuple[str, str, str]:
    """Split ``version`` into (main, pre-release, build metadata).

    The pre-release and build parts keep their leading ``-`` / ``+``.
    """
    main, plus, build = version.partition("+")
    main, dash, pre = main.partition("-")
    return main, dash + pre, plus + build
