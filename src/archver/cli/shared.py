# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared CLI helpers: error type, logger adapter and settings assembly."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from rich.console import Console

from ..config import ArchverSettings, ConfigError, load_settings
from ..logging import fail as core_fail
from ..logging import info as core_info
from ..logging import warn as core_warn


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


@dataclass(slots=True)
class CLILogger:
    """Adapter around the console logging helpers honouring CLI preferences."""

    console: Console
    use_emoji: bool
    use_color: bool

    def fail(self, message: str) -> None:
        """Log a failure message."""

        core_fail(message, use_emoji=self.use_emoji, use_color=self.use_color, console=self.console)

    def warn(self, message: str) -> None:
        """Log a warning message."""

        core_warn(message, use_emoji=self.use_emoji, use_color=self.use_color, console=self.console)

    def info(self, message: str) -> None:
        """Log an informational message."""

        core_info(message, use_emoji=self.use_emoji, use_color=self.use_color, console=self.console)


def build_cli_logger(settings: ArchverSettings) -> CLILogger:
    """Return a stderr ``CLILogger`` configured from ``settings``."""

    console = Console(stderr=True, no_color=not settings.use_color, highlight=False)
    return CLILogger(console=console, use_emoji=settings.use_emoji, use_color=settings.use_color)


def resolve_settings(root: Path, **overrides: Any) -> ArchverSettings:
    """Load settings for ``root`` with CLI ``overrides`` applied last.

    Raises:
        CLIError: If the configuration is invalid.
    """

    try:
        return load_settings(root, overrides=overrides)
    except ConfigError as exc:
        raise CLIError(str(exc)) from exc


__all__ = ["CLIError", "CLILogger", "build_cli_logger", "resolve_settings"]
