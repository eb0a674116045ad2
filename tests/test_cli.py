"""Tests for the command-line entrypoints."""

from __future__ import annotations

import importlib.util
import json
from pathlib import Path

import pytest

from version_regex.cli import main

SCAN_SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "scan.py"


def _load_scan():
    spec = importlib.util.spec_from_file_location("scan_script", SCAN_SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


# -----------------------------------------------------------------------------
# version-regex
# -----------------------------------------------------------------------------


def test_cli_prints_pattern_and_results(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["^1.2.3", "1.9.0", "2.0.0"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Version constraint: ^1.2.3"
    assert out[1].startswith("Generated regex: ^1\\.")
    assert "  1.9.0: true" in out
    assert "  2.0.0: false" in out


def test_cli_reports_errors(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["!=1.0.0", "--dialect", "re2"]) == 1
    assert capsys.readouterr().err.startswith("ERROR: operator '!='")

    assert main([">=1.x.0"]) == 1
    assert "minor" in capsys.readouterr().err


def test_cli_uses_dialect_from_settings(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config = tmp_path / "settings.json"
    config.write_text('{"dialect": "re2"}', encoding="utf-8")
    assert main(["[1.0,2.0)", "--config", str(config)]) == 1
    assert "'re2' dialect" in capsys.readouterr().err

    assert main(["[1.0,2.0)", "--config", str(config), "--dialect", "python"]) == 0


def test_cli_bad_config(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["^1.0.0", "--config", str(tmp_path / "nope.json")]) == 1
    assert "Configuration file not found" in capsys.readouterr().err


# -----------------------------------------------------------------------------
# scripts/scan.py
# -----------------------------------------------------------------------------


def test_scan_exit_codes(
    npm_project: Path, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    scan = _load_scan()

    assert scan.main(["--root", str(npm_project)]) == 10
    report = json.loads(capsys.readouterr().out)
    assert report["totals"]["findings"] == 1

    assert scan.main(["--root", str(npm_project), "--warn-only"]) == 0
    capsys.readouterr()

    monkeypatch.setenv("VERSION_REGEX_WARN_ONLY", "true")
    assert scan.main(["--root", str(npm_project)]) == 0


def test_scan_summary(npm_project: Path, capsys: pytest.CaptureFixture[str]) -> None:
    scan = _load_scan()
    assert scan.main(["--root", str(npm_project), "--summary", "--warn-only"]) == 0
    assert capsys.readouterr().out.startswith("# version-regex Summary")


def test_scan_clean_project(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    scan = _load_scan()
    assert scan.main(["--root", str(tmp_path)]) == 0
    assert json.loads(capsys.readouterr().out)["hasFindings"] is False


def test_scan_source_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    scan = _load_scan()
    assert scan.main(["--root", str(tmp_path), "--manifest", str(tmp_path / "package.json")]) == 1
    assert capsys.readouterr().err.startswith("ERROR: Failed to read manifest")
