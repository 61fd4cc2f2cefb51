# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing logging helpers with optional colour and emoji support."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

from .console import detect_tty, get_console_manager


def emoji(symbol: str, enable: bool) -> str:
    """Return ``symbol`` when emoji output is enabled, otherwise blank."""

    return symbol if enable else ""


def _print_line(
    msg: str,
    *,
    style: str | None,
    use_emoji: bool,
    use_color: bool | None = None,
    console: Console | None = None,
) -> None:
    """Render ``msg`` using shared styling helpers.

    Args:
        msg: Message text to print.
        style: Rich style applied when colour output is active.
        use_emoji: Whether emoji output is desired.
        use_color: Optional explicit colour flag overriding TTY detection.
        console: Optional console; defaults to the managed stdout console.
    """

    color_enabled = detect_tty() if use_color is None else use_color
    target = console or get_console_manager().get(color=color_enabled, emoji=use_emoji)
    text = Text(msg)
    if style and color_enabled:
        text.stylize(style)
    target.print(text)


def info(msg: str, *, use_emoji: bool, use_color: bool | None = None, console: Console | None = None) -> None:
    """Emit an informational message."""

    prefix = emoji("ℹ️ ", use_emoji)
    _print_line(f"{prefix}{msg}", style="cyan", use_emoji=use_emoji, use_color=use_color, console=console)


def warn(msg: str, *, use_emoji: bool, use_color: bool | None = None, console: Console | None = None) -> None:
    """Emit a warning message."""

    prefix = emoji("⚠️ ", use_emoji)
    _print_line(f"{prefix}{msg}", style="yellow", use_emoji=use_emoji, use_color=use_color, console=console)


def fail(msg: str, *, use_emoji: bool, use_color: bool | None = None, console: Console | None = None) -> None:
    """Emit an error message."""

    prefix = emoji("❌ ", use_emoji)
    _print_line(f"{prefix}{msg}", style="bold red", use_emoji=use_emoji, use_color=use_color, console=console)


def configure_logging(*, debug: bool, console: Console | None = None) -> None:
    """Route ``archver`` library log records through a Rich handler.

    Args:
        debug: Emit debug records when ``True``; warnings and above otherwise.
        console: Console receiving the records; stderr when omitted.
    """

    logger = logging.getLogger("archver")
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)
    rich_handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=debug,
        markup=False,
    )
    logger.addHandler(rich_handler)
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)


__all__ = ["configure_logging", "emoji", "fail", "info", "warn"]
