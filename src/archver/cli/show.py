# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Show the latest Architectury versions for a game version."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console

from ..config import ArchverSettings
from ..console import get_console_manager
from ..errors import ArchverError
from ..logging import configure_logging
from ..service import ResolutionService
from .rendering import build_report_table
from .shared import CLIError, build_cli_logger, resolve_settings


def run_show(
    game_version: str | None,
    settings: ArchverSettings,
    *,
    console: Console | None = None,
    service: ResolutionService | None = None,
) -> int:
    """Render the latest versions for ``game_version`` and return an exit status.

    Args:
        game_version: Catalog key to resolve; ``None`` selects the stable entry.
        settings: Effective settings.
        console: Optional console receiving the table.
        service: Optional pre-built service, mainly for tests.

    Returns:
        int: ``0`` on success, ``1`` when resolution fails.
    """

    logger = build_cli_logger(settings)
    output = console or get_console_manager().for_settings(settings)
    resolver = service or ResolutionService(settings=settings)

    target = game_version or "the stable version"
    logger.info(f"Fetching data for {target}...")
    try:
        report = resolver.resolve(game_version)
    except ArchverError as exc:
        logger.fail(str(exc))
        return 1
    if report.fell_back:
        logger.warn(f"Unknown game version '{report.requested}', showing {report.game_version} instead")

    output.print(build_report_table(report, use_color=settings.use_color))
    return 0


def show_command(
    game_version: Annotated[
        Optional[str],
        typer.Argument(help="Game version key, e.g. 1.20.1. Defaults to the stable entry."),
    ] = None,
    catalog_url: Annotated[
        Optional[str],
        typer.Option("--catalog-url", help="Catalog JSON URL."),
    ] = None,
    timeout: Annotated[
        Optional[float],
        typer.Option("--timeout", help="HTTP timeout in seconds."),
    ] = None,
    lenient: Annotated[
        bool,
        typer.Option("--lenient", help="Skip matching versions that cannot be parsed."),
    ] = False,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable colour output.")] = False,
    no_emoji: Annotated[bool, typer.Option("--no-emoji", help="Disable emoji output.")] = False,
    debug: Annotated[bool, typer.Option("--debug", help="Emit debug log records.")] = False,
    root: Annotated[
        Path,
        typer.Option("--root", "-r", help="Project root holding pyproject.toml."),
    ] = Path("."),
) -> None:
    """Typer entry point mirroring :func:`run_show`."""

    configure_logging(debug=debug)
    try:
        settings = resolve_settings(
            root,
            catalog_url=catalog_url,
            timeout_seconds=timeout,
            strict_selection=False if lenient else None,
            use_color=False if no_color else None,
            use_emoji=False if no_emoji else None,
        )
    except CLIError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=exc.exit_code) from exc
    raise typer.Exit(code=run_show(game_version, settings))


__all__ = ["run_show", "show_command"]
