"""NuGet versions: four-part build numbers and NuGet pre-release tags."""

from __future__ import annotations

import re

from ..patterns import BUILD_META_PATTERN, VERSION_DOT, anchor
from .literal import quote_numeric_parts, split_suffix

NUGET_PRE_RELEASE_TAGS = ("-alpha", "-beta", "-rc", "-preview")

# -alpha, -beta001, -rc.1, -preview2.3
NUGET_PRE_RELEASE_PATTERN = r"(?:-(?:alpha|beta|rc|preview)(?:\d+)?(?:\.\d+)?)?"


def is_csharp_version(version: str) -> bool:
    """True for ``1.2.3.4567`` style literals or NuGet pre-release tags."""
    main, pre, _ = split_suffix(version)
    return len(main.split(".")) == 4 or any(pre.startswith(tag) for tag in NUGET_PRE_RELEASE_TAGS)


def csharp_version_regex(version: str) -> str:
    """Pin the numeric parts; an absent pre-release admits a NuGet tag."""
    main, pre, build = split_suffix(version)
    pattern = VERSION_DOT.join(quote_numeric_parts(main.split("."), version))
    pattern += re.escape(pre) if pre else NUGET_PRE_RELEASE_PATTERN
    pattern += re.escape(build) if build else BUILD_META_PATTERN
    return anchor(pattern)
