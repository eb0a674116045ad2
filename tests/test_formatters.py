"""Tests for the ecosystem literal formatters."""

from __future__ import annotations

import re

import pytest

from version_regex import DialectUnsupportedError, ParseError
from version_regex.formatters import (
    MavenRange,
    csharp_version_regex,
    go_module_regex,
    is_csharp_version,
    is_go_module_version,
    is_pseudo_version,
    is_wildcard_version,
    maven_range_regex,
    parse_maven_range,
    wildcard_regex,
)
from version_regex.formatters.literal import split_suffix
from version_regex.models import PYTHON, RE2, VersionTriple
from version_regex.patterns import EMPTY_MATCH_PATTERN, EXACT_VERSION_TEMPLATE


# -----------------------------------------------------------------------------
# Maven
# -----------------------------------------------------------------------------


class TestMavenRange:
    def test_parse_both_bounds(self) -> None:
        bounds = MavenRange.parse("[1.0,2.0)")
        assert bounds == MavenRange(VersionTriple(1), VersionTriple(2), True, False)

    def test_parse_open_bounds(self) -> None:
        bounds = MavenRange.parse("(,3.1]")
        assert bounds.lower is None
        assert bounds.upper == VersionTriple(3, 1)
        assert bounds.upper_inclusive
        assert bounds.lower_fragment() is None

    def test_parse_pin(self) -> None:
        bounds = MavenRange.parse("[1.5]")
        assert bounds.lower == bounds.upper == VersionTriple(1, 5)

    @pytest.mark.parametrize("text", ["[1.0,2.0,3.0]", "(1.5)", "[1.5)", "{1.0,2.0}", "[1.0,x]"])
    def test_parse_rejects(self, text: str) -> None:
        with pytest.raises(ParseError):
            MavenRange.parse(text)

    def test_parse_maven_range_keeps_brackets(self) -> None:
        assert parse_maven_range("[1.0,2.0)").version == "[1.0,2.0)"

    def test_single_bound_works_without_lookahead(self) -> None:
        pattern = maven_range_regex("[1.2.3,)", RE2)
        assert pattern.startswith("^") and "(?=" not in pattern
        assert re.fullmatch(pattern, "1.2.3")
        assert not re.fullmatch(pattern, "1.2.2")

    def test_two_bounds_use_lookahead(self) -> None:
        pattern = maven_range_regex("[1.0,2.0)", PYTHON)
        assert pattern.startswith("^(?=")
        with pytest.raises(DialectUnsupportedError) as excinfo:
            maven_range_regex("[1.0,2.0)", RE2)
        assert excinfo.value.feature == "lookahead"

    def test_unbounded_and_empty(self) -> None:
        assert maven_range_regex("(,)", PYTHON) == EXACT_VERSION_TEMPLATE
        assert maven_range_regex("[0.0.0,0.0.0)", PYTHON) == EMPTY_MATCH_PATTERN


# -----------------------------------------------------------------------------
# Go modules
# -----------------------------------------------------------------------------


def test_go_detection() -> None:
    assert is_go_module_version("v1.2.3")
    assert not is_go_module_version("v")
    assert not is_go_module_version("1.2.3")
    assert is_pseudo_version("v0.0.0-20210101000000-abcdef123456")
    assert not is_pseudo_version("v0.0.0-2021-abcdef123456")


def test_go_build_metadata_is_literal() -> None:
    pattern = go_module_regex("v1.2.3+meta")
    assert re.fullmatch(pattern, "v1.2.3+meta")
    assert not re.fullmatch(pattern, "v1.2.3-rc.1+meta")
    assert not re.fullmatch(pattern, "v1.2.3")


def test_go_rejects_non_numeric_parts() -> None:
    with pytest.raises(ParseError) as excinfo:
        go_module_regex("v1.y.3")
    assert excinfo.value.component == "minor"


# -----------------------------------------------------------------------------
# C# / NuGet
# -----------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("version", "expected"),
    [
        ("1.2.3.4", True),
        ("1.0.0-beta", True),
        ("1.0.0-rc.2", True),
        ("1.2.3", False),
        ("1.2.3-dev", False),
        ("1.2.3+build.1", False),
    ],
)
def test_csharp_detection(version: str, expected: bool) -> None:
    assert is_csharp_version(version) is expected


def test_csharp_revision_error_names_revision() -> None:
    with pytest.raises(ParseError) as excinfo:
        csharp_version_regex("1.2.3.r4")
    assert excinfo.value.component == "revision"


# -----------------------------------------------------------------------------
# Wildcards and helpers
# -----------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("version", "matching", "rejected"),
    [
        ("1.X", ["1.0.0", "1.22.3-beta"], ["2.0.0"]),
        ("v1.x", ["v1.4.0"], ["v2.0.0", "1.4.0"]),
        ("1.*.3", ["1.0.3", "1.99.3"], ["1.0.4", "1.0.3.0"]),
        ("x.x.x", ["0.0.0", "5.6.7"], ["5.6"]),
    ],
)
def test_wildcard_regex(version: str, matching: list[str], rejected: list[str]) -> None:
    assert is_wildcard_version(version)
    pattern = wildcard_regex(version)
    for candidate in matching:
        assert re.fullmatch(pattern, candidate), candidate
    for candidate in rejected:
        assert not re.fullmatch(pattern, candidate), candidate


def test_wildcard_detection_ignores_suffix() -> None:
    assert not is_wildcard_version("1.2.3-rc.x")


def test_split_suffix() -> None:
    assert split_suffix("1.2.3") == ("1.2.3", "", "")
    assert split_suffix("1.2.3-rc.1+exp-sha") == ("1.2.3", "-rc.1", "+exp-sha")
    assert split_suffix("1.2.3+exp") == ("1.2.3", "", "+exp")
