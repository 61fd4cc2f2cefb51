# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Stdout consoles shared by the command line output."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from functools import cache

from rich.console import Console

from .config import ArchverSettings


def detect_tty() -> bool:
    """Return ``True`` when stdout appears to be backed by a terminal."""

    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


@dataclass(frozen=True, slots=True)
class ConsoleKey:
    """Effective output flags; colour is only kept when stdout is a terminal."""

    color: bool
    emoji: bool


class ConsoleManager:
    """Hand out one stdout console per effective colour/emoji combination."""

    def __init__(self) -> None:
        self._consoles: dict[ConsoleKey, Console] = {}

    def get(self, *, color: bool, emoji: bool) -> Console:
        """Return the console for ``color`` and ``emoji``, creating it on first use."""

        key = ConsoleKey(color=color and detect_tty(), emoji=emoji)
        console = self._consoles.get(key)
        if console is None:
            console = Console(no_color=not key.color, emoji=key.emoji, highlight=key.color, soft_wrap=True)
            self._consoles[key] = console
        return console

    def for_settings(self, settings: ArchverSettings) -> Console:
        """Return the console matching ``use_color`` and ``use_emoji`` of ``settings``."""

        return self.get(color=settings.use_color, emoji=settings.use_emoji)


@cache
def get_console_manager() -> ConsoleManager:
    """Return the process-wide :class:`ConsoleManager`."""

    return ConsoleManager()


__all__ = ["ConsoleKey", "ConsoleManager", "detect_tty", "get_console_manager"]
