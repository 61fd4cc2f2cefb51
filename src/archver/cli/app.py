# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands."""

from __future__ import annotations

import typer

from .show import show_command
from .versions import list_command

app = typer.Typer(
    help="Look up the latest Architectury toolchain versions for a Minecraft version.",
    no_args_is_help=True,
    add_completion=False,
)
app.command("show")(show_command)
app.command("list")(list_command)

__all__ = ["app"]
