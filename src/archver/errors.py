# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Root of the archver exception hierarchy."""

from __future__ import annotations


class ArchverError(RuntimeError):
    """Base class for every error raised by archver."""


__all__ = ["ArchverError"]
