# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Custom exceptions raised while decoding and querying the version catalog."""

from __future__ import annotations

from ..errors import ArchverError


class CatalogDecodeError(ArchverError):
    """Raised when a catalog document is missing a field or has the wrong shape."""


class CatalogValidationError(CatalogDecodeError):
    """Raised when a catalog document fails structural schema validation."""


class CatalogLookupError(ArchverError, LookupError):
    """Raised when a named definition, entry or the stable entry cannot be found."""


__all__ = ("CatalogDecodeError", "CatalogLookupError", "CatalogValidationError")
