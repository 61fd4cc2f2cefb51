# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Resolve the latest Architectury toolchain versions from the version catalog."""

from __future__ import annotations

from .catalog import (
    Catalog,
    CatalogDecodeError,
    CatalogLookupError,
    CatalogValidationError,
    GameVersionEntry,
    InlineDefinition,
    NamedReference,
    VersionDefinition,
    VersionReference,
)
from .errors import ArchverError
from .versioning import Version, VersionParseError, VersionSelectionError, compare_versions, select_latest

__all__ = [
    "ArchverError",
    "Catalog",
    "CatalogDecodeError",
    "CatalogLookupError",
    "CatalogValidationError",
    "GameVersionEntry",
    "InlineDefinition",
    "NamedReference",
    "Version",
    "VersionDefinition",
    "VersionParseError",
    "VersionReference",
    "VersionSelectionError",
    "compare_versions",
    "select_latest",
]
