# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the archver command line interface."""

from __future__ import annotations

from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console
from typer.testing import CliRunner

from archver.cli.app import app
from archver.cli.rendering import build_report_table
from archver.cli.show import run_show
from archver.cli.versions import run_list
from archver.config import ArchverSettings
from archver.service import ResolutionService
from tests.helpers.catalog_data import CATALOG_URL, LOOM_POM, FakeHttp


def _console() -> tuple[Console, StringIO]:
    buffer = StringIO()
    return Console(file=buffer, force_terminal=False, color_system=None, emoji=False, width=120), buffer


def test_run_show_renders_table(settings: ArchverSettings, fake_http: FakeHttp) -> None:
    console, buffer = _console()

    exit_code = run_show(None, settings, console=console, service=ResolutionService(settings=settings, get=fake_http))

    assert exit_code == 0
    output = buffer.getvalue()
    assert "Architectury Loom" in output
    assert "Injectables" in output
    assert "1.2.10" in output
    assert "9.2.14-beta" in output


def test_run_show_reports_failures(settings: ArchverSettings, fake_http: FakeHttp) -> None:
    del fake_http.bodies[LOOM_POM]
    console, buffer = _console()

    exit_code = run_show(None, settings, console=console, service=ResolutionService(settings=settings, get=fake_http))

    assert exit_code == 1
    assert buffer.getvalue() == ""


def test_run_list_marks_stable(settings: ArchverSettings, fake_http: FakeHttp) -> None:
    console, buffer = _console()

    exit_code = run_list(settings, console=console, service=ResolutionService(settings=settings, get=fake_http))

    assert exit_code == 0
    output = buffer.getvalue()
    assert "1.19.2" in output
    assert "1.20.1" in output
    assert "@loom" in output
    assert "inline" in output


def test_show_command(monkeypatch: pytest.MonkeyPatch, tmp_path: Path, fake_http: FakeHttp) -> None:
    monkeypatch.setattr("archver.remote.http.requests.get", fake_http)
    runner = CliRunner()

    result = runner.invoke(
        app,
        ["show", "1.19.2", "--catalog-url", CATALOG_URL, "--no-color", "--no-emoji", "--root", str(tmp_path)],
    )

    assert result.exit_code == 0
    assert "6.5.85" in result.stdout
    assert "3.4.151" in result.stdout


def test_show_command_lenient_flag(monkeypatch: pytest.MonkeyPatch, tmp_path: Path, fake_http: FakeHttp) -> None:
    captured: list[ArchverSettings] = []

    def fake_run_show(game_version: str | None, settings: ArchverSettings) -> int:
        captured.append(settings)
        return 0

    monkeypatch.setattr("archver.cli.show.run_show", fake_run_show)
    runner = CliRunner()

    result = runner.invoke(app, ["show", "--lenient", "--timeout", "2.5", "--root", str(tmp_path)])

    assert result.exit_code == 0
    assert captured[0].strict_selection is False
    assert captured[0].timeout_seconds == 2.5


def test_show_command_failure_exit_code(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr("archver.remote.http.requests.get", FakeHttp(bodies={}))
    runner = CliRunner()

    result = runner.invoke(app, ["show", "--catalog-url", CATALOG_URL, "--no-emoji", "--root", str(tmp_path)])

    assert result.exit_code == 1


def test_invalid_configuration_exit_code(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text("[tool.archver]\nretries = 3\n", encoding="utf-8")
    runner = CliRunner()

    result = runner.invoke(app, ["list", "--root", str(tmp_path)])

    assert result.exit_code == 1


def test_list_command_accepts_the_shared_output_options(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    captured: list[ArchverSettings] = []

    def fake_run_list(settings: ArchverSettings) -> int:
        captured.append(settings)
        return 0

    monkeypatch.setattr("archver.cli.versions.run_list", fake_run_list)
    runner = CliRunner()

    result = runner.invoke(
        app,
        ["list", "--timeout", "3", "--no-color", "--no-emoji", "--root", str(tmp_path)],
    )

    assert result.exit_code == 0
    assert captured[0].timeout_seconds == 3.0
    assert captured[0].use_color is False
    assert captured[0].use_emoji is False


def test_report_table_highlights_snapshot_versions(settings: ArchverSettings, fake_http: FakeHttp) -> None:
    report = ResolutionService(settings=settings, get=fake_http).resolve("1.20.1")
    buffer = StringIO()
    console = Console(file=buffer, force_terminal=True, color_system="standard", width=120)

    console.print(build_report_table(report, use_color=True))

    assert report.slot("api").version is not None and report.slot("api").version.is_snapshot
    assert "\x1b[33m9.2.14-beta" in buffer.getvalue()
    assert "\x1b[33m1.2.10" not in buffer.getvalue()
