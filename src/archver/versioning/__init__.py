# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Version parsing, ordering and selection."""

from __future__ import annotations

from .selector import VersionSelectionError, matching_candidates, select_latest
from .version import Version, VersionParseError, compare_versions

__all__ = [
    "Version",
    "VersionParseError",
    "VersionSelectionError",
    "compare_versions",
    "matching_candidates",
    "select_latest",
]
