# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Catalog aggregate: shared definitions plus per-game-version entries."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from .errors import CatalogLookupError
from .model_definition import VersionDefinition
from .model_entry import GameVersionEntry
from .model_references import InlineDefinition, NamedReference, VersionReference
from .types import DEFINITIONS_KEY, VERSIONS_KEY, JSONValue
from .utils import decode_mapping, expect_mapping

LOGGER = logging.getLogger(__name__)

ROOT_CONTEXT = "catalog"


@dataclass(frozen=True, slots=True)
class Catalog:
    """Immutable, fully decoded version catalog.

    Both mappings keep the order of the source document, which makes
    :meth:`stable_entry` deterministic when several entries are stable.
    """

    definitions: Mapping[str, VersionDefinition]
    versions: Mapping[str, GameVersionEntry]

    @staticmethod
    def decode(document: JSONValue) -> Catalog:
        """Decode a parsed catalog document.

        Args:
            document: JSON value with ``definitions`` and ``versions`` objects.

        Returns:
            Catalog: Decoded catalog holding no reference to ``document``.

        Raises:
            CatalogDecodeError: On the first missing or malformed field at any depth.
        """

        root = expect_mapping(document, key="<root>", context=ROOT_CONTEXT)
        definitions = decode_mapping(
            root.get(DEFINITIONS_KEY),
            VersionDefinition.from_json,
            key=DEFINITIONS_KEY,
            context=ROOT_CONTEXT,
        )
        versions = decode_mapping(
            root.get(VERSIONS_KEY),
            GameVersionEntry.from_json,
            key=VERSIONS_KEY,
            context=ROOT_CONTEXT,
        )
        LOGGER.debug("decoded catalog with %d definitions and %d versions", len(definitions), len(versions))
        return Catalog(definitions=definitions, versions=versions)

    def stable_key(self) -> str:
        """Return the key of the first entry marked stable.

        Returns:
            str: Game version key of the stable entry.

        Raises:
            CatalogLookupError: If no entry is marked stable.
        """

        stable_keys = [key for key, entry in self.versions.items() if entry.stable]
        if not stable_keys:
            raise CatalogLookupError("catalog has no entry marked stable")
        if len(stable_keys) > 1:
            LOGGER.debug("several stable entries %s; using '%s'", stable_keys, stable_keys[0])
        return stable_keys[0]

    def stable_entry(self) -> GameVersionEntry:
        """Return the first entry marked stable.

        Raises:
            CatalogLookupError: If no entry is marked stable.
        """

        return self.versions[self.stable_key()]

    def entry(self, key: str) -> GameVersionEntry:
        """Return the entry for game version ``key``.

        Raises:
            CatalogLookupError: If ``key`` is not in the catalog.
        """

        try:
            return self.versions[key]
        except KeyError as exc:
            raise CatalogLookupError(f"catalog has no entry for game version '{key}'") from exc

    def resolve(self, reference: VersionReference) -> VersionDefinition | None:
        """Return the definition ``reference`` points at.

        Inline definitions always resolve. Named references yield ``None`` when
        the name is not in :attr:`definitions`.
        """

        if isinstance(reference, InlineDefinition):
            return reference.definition
        return self.definitions.get(reference.name)

    def require(self, reference: VersionReference) -> VersionDefinition:
        """Return the definition ``reference`` points at or raise.

        Raises:
            CatalogLookupError: If ``reference`` names a missing definition.
        """

        definition = self.resolve(reference)
        if definition is None:
            name = reference.name if isinstance(reference, NamedReference) else "<inline>"
            raise CatalogLookupError(f"catalog has no definition named '{name}'")
        return definition


__all__ = ["Catalog"]
