"""Load package manifests from a filesystem path or an HTTP(S) URL."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import requests
from requests import Response
from tenacity import retry, stop_after_attempt, wait_fixed

USER_AGENT = "version-regex"


class SourceError(RuntimeError):
    """Raised when a manifest cannot be fetched, read or decoded."""


def is_url(source: str) -> bool:
    return source.startswith("http://") or source.startswith("https://")


@retry(reraise=True, stop=stop_after_attempt(3), wait=wait_fixed(2))
def _http_get(url: str) -> Response:
    return requests.get(url, headers={"User-Agent": USER_AGENT}, timeout=30)


def fetch_manifest(url: str) -> bytes:
    """Return the raw manifest payload served at ``url``."""

    try:
        response = _http_get(url)
    except requests.RequestException as exc:  # pragma: no cover - network failure path
        raise SourceError(f"Failed to fetch manifest {url}: {exc}") from exc

    if response.status_code != 200:
        raise SourceError(f"Unexpected status code {response.status_code} fetching {url}")

    return response.content


def _decode(payload: bytes | str, source: str) -> dict[str, Any]:
    try:
        data = json.loads(payload)
    except json.JSONDecodeError as exc:
        raise SourceError(f"Invalid JSON in manifest {source}: {exc}") from exc

    if not isinstance(data, dict):
        raise SourceError(f"Manifest {source} must be a JSON object")
    return data


def load_manifest(source: str | Path) -> dict[str, Any]:
    """Load a package.json-shaped mapping from a URL or a local path."""
    if isinstance(source, str) and is_url(source):
        return _decode(fetch_manifest(source), source)

    path = Path(source)
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SourceError(f"Failed to read manifest {path}: {exc}") from exc
    return _decode(content, str(path))
