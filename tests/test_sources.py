"""Tests for manifest loading from paths and URLs."""

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from version_regex import sources
from version_regex.sources import SourceError, is_url, load_manifest


def test_is_url() -> None:
    assert is_url("https://example.com/package.json")
    assert is_url("http://localhost/package.json")
    assert not is_url("package.json")


def test_load_local_manifest(tmp_path: Path) -> None:
    path = tmp_path / "package.json"
    path.write_text('{"dependencies": {"a": "^1.0.0"}}', encoding="utf-8")
    assert load_manifest(path) == {"dependencies": {"a": "^1.0.0"}}
    assert load_manifest(str(path))["dependencies"]["a"] == "^1.0.0"


def test_missing_local_manifest(tmp_path: Path) -> None:
    with pytest.raises(SourceError, match="Failed to read manifest"):
        load_manifest(tmp_path / "package.json")


def test_manifest_must_be_object(tmp_path: Path) -> None:
    path = tmp_path / "package.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(SourceError, match="must be a JSON object"):
        load_manifest(path)


def test_load_remote_manifest(monkeypatch: pytest.MonkeyPatch) -> None:
    calls = []

    def fake_get(url: str) -> SimpleNamespace:
        calls.append(url)
        return SimpleNamespace(status_code=200, content=b'{"name": "remote"}')

    monkeypatch.setattr(sources, "_http_get", fake_get)
    assert load_manifest("https://example.com/package.json") == {"name": "remote"}
    assert calls == ["https://example.com/package.json"]


def test_remote_status_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        sources, "_http_get", lambda url: SimpleNamespace(status_code=404, content=b"")
    )
    with pytest.raises(SourceError, match="404"):
        load_manifest("https://example.com/package.json")


def test_remote_invalid_json(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        sources, "_http_get", lambda url: SimpleNamespace(status_code=200, content=b"<html>")
    )
    with pytest.raises(SourceError, match="Invalid JSON"):
        load_manifest("https://example.com/package.json")
