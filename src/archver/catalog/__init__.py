# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Public export surface for the version catalog model."""

from __future__ import annotations

from typing import Final

from .errors import CatalogDecodeError, CatalogLookupError, CatalogValidationError
from .io import load_document, parse_document
from .model_catalog import Catalog
from .model_definition import VersionDefinition
from .model_entry import GameVersionEntry
from .model_references import InlineDefinition, NamedReference, VersionReference, decode_reference
from .schema import CatalogSchema, catalog_schema
from .types import SLOT_NAMES, SlotName

__all__: Final[tuple[str, ...]] = (
    "SLOT_NAMES",
    "Catalog",
    "CatalogDecodeError",
    "CatalogLookupError",
    "CatalogSchema",
    "CatalogValidationError",
    "GameVersionEntry",
    "InlineDefinition",
    "NamedReference",
    "SlotName",
    "VersionDefinition",
    "VersionReference",
    "catalog_schema",
    "decode_reference",
    "load_document",
    "parse_document",
)
