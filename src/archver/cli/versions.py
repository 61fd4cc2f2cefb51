# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""List the game versions published in the catalog."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console

from ..catalog import CatalogLookupError
from ..config import ArchverSettings
from ..console import get_console_manager
from ..errors import ArchverError
from ..logging import configure_logging
from ..service import ResolutionService
from .rendering import build_catalog_table
from .shared import CLIError, build_cli_logger, resolve_settings


def run_list(
    settings: ArchverSettings,
    *,
    console: Console | None = None,
    service: ResolutionService | None = None,
) -> int:
    """Render every catalog entry and return an exit status."""

    logger = build_cli_logger(settings)
    output = console or get_console_manager().for_settings(settings)
    resolver = service or ResolutionService(settings=settings)
    try:
        catalog = resolver.catalog()
    except ArchverError as exc:
        logger.fail(str(exc))
        return 1
    try:
        stable_key: str | None = catalog.stable_key()
    except CatalogLookupError:
        logger.warn("No game version is marked stable")
        stable_key = None
    output.print(build_catalog_table(catalog, stable_key=stable_key, use_color=settings.use_color))
    return 0


def list_command(
    catalog_url: Annotated[
        Optional[str],
        typer.Option("--catalog-url", help="Catalog JSON URL."),
    ] = None,
    timeout: Annotated[
        Optional[float],
        typer.Option("--timeout", help="HTTP timeout in seconds."),
    ] = None,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable colour output.")] = False,
    no_emoji: Annotated[bool, typer.Option("--no-emoji", help="Disable emoji output.")] = False,
    debug: Annotated[bool, typer.Option("--debug", help="Emit debug log records.")] = False,
    root: Annotated[
        Path,
        typer.Option("--root", "-r", help="Project root holding pyproject.toml."),
    ] = Path("."),
) -> None:
    """Typer entry point mirroring :func:`run_list`."""

    configure_logging(debug=debug)
    try:
        settings = resolve_settings(
            root,
            catalog_url=catalog_url,
            timeout_seconds=timeout,
            use_color=False if no_color else None,
            use_emoji=False if no_emoji else None,
        )
    except CLIError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=exc.exit_code) from exc
    raise typer.Exit(code=run_list(settings))


__all__ = ["list_command", "run_list"]
