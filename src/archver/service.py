# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolve the latest artifact versions for one game version entry."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from .catalog import Catalog, GameVersionEntry, SlotName, VersionDefinition, VersionReference
from .config import ArchverSettings
from .remote import HttpGet, fetch_candidates, fetch_catalog
from .versioning import Version, select_latest

LOGGER = logging.getLogger(__name__)

NO_MATCH_LABEL = "no matching version"

CatalogLoader = Callable[[ArchverSettings], Catalog]
CandidateLoader = Callable[[str], Sequence[str]]


@dataclass(frozen=True, slots=True)
class SlotResolution:
    """Outcome of resolving one slot of a game version entry."""

    slot: SlotName
    reference: VersionReference
    definition: VersionDefinition
    version: Version | None

    @property
    def label(self) -> str:
        """Return the rendered version, or a placeholder when nothing matched."""

        return NO_MATCH_LABEL if self.version is None else self.version.render()


@dataclass(frozen=True, slots=True)
class ResolutionReport:
    """Latest versions for every slot of the selected game version."""

    game_version: str
    requested: str | None
    slots: tuple[SlotResolution, ...]

    @property
    def fell_back(self) -> bool:
        """Return ``True`` when the requested key was unknown and the stable entry was used."""

        return self.requested is not None and self.requested != self.game_version

    def slot(self, name: SlotName) -> SlotResolution:
        """Return the resolution for slot ``name``.

        Raises:
            KeyError: If the report has no such slot.
        """

        for resolution in self.slots:
            if resolution.slot == name:
                return resolution
        raise KeyError(name)


@dataclass(slots=True)
class ResolutionService:
    """Tie catalog download, reference resolution and version selection together.

    ``catalog_loader`` and ``candidate_loader`` default to the HTTP fetchers in
    :mod:`archver.remote`; tests replace them with in-memory callables.
    """

    settings: ArchverSettings
    get: HttpGet | None = None
    catalog_loader: CatalogLoader | None = None
    candidate_loader: CandidateLoader | None = None
    _catalog: Catalog | None = field(default=None, init=False, repr=False)

    def catalog(self) -> Catalog:
        """Return the catalog, downloading it on first use.

        Raises:
            RemoteError: If the catalog cannot be fetched.
            CatalogDecodeError: If the document does not describe a catalog.
        """

        if self._catalog is None:
            if self.catalog_loader is not None:
                self._catalog = self.catalog_loader(self.settings)
            else:
                self._catalog = fetch_catalog(
                    self.settings.catalog_url,
                    timeout=self.settings.timeout_seconds,
                    validate=self.settings.validate_schema,
                    get=self.get,
                )
        return self._catalog

    def select_entry(self, game_version: str | None) -> tuple[str, GameVersionEntry]:
        """Return the key and entry to resolve for ``game_version``.

        ``None`` selects the stable entry. An unknown key also selects the
        stable entry, with a warning.

        Raises:
            CatalogLookupError: If the stable entry is needed but none exists.
        """

        catalog = self.catalog()
        if game_version is not None and game_version in catalog.versions:
            return game_version, catalog.versions[game_version]
        if game_version is not None:
            LOGGER.warning("unknown game version '%s'; falling back to the stable entry", game_version)
        key = catalog.stable_key()
        return key, catalog.versions[key]

    def resolve(self, game_version: str | None = None) -> ResolutionReport:
        """Resolve the latest version of every slot for ``game_version``.

        Each distinct metadata locator is fetched at most once per call.

        Args:
            game_version: Catalog key to resolve; ``None`` selects the stable entry.

        Returns:
            ResolutionReport: Latest versions keyed by slot.

        Raises:
            CatalogLookupError: If a slot names a missing definition or no
                stable entry exists when one is needed.
            VersionSelectionError: If strict selection hits an unparsable candidate.
            RemoteError: If a metadata document cannot be fetched.
        """

        catalog = self.catalog()
        key, entry = self.select_entry(game_version)
        candidates_by_locator: dict[str, Sequence[str]] = {}
        resolutions: list[SlotResolution] = []
        for name, reference in entry.slots():
            definition = catalog.require(reference)
            if definition.locator not in candidates_by_locator:
                candidates_by_locator[definition.locator] = self._load_candidates(definition.locator)
            version = select_latest(
                definition,
                candidates_by_locator[definition.locator],
                strict=self.settings.strict_selection,
            )
            LOGGER.debug("%s/%s resolved to %s using %s", key, name, version, definition.to_dict())
            resolutions.append(
                SlotResolution(slot=name, reference=reference, definition=definition, version=version),
            )
        return ResolutionReport(game_version=key, requested=game_version, slots=tuple(resolutions))

    def _load_candidates(self, locator: str) -> Sequence[str]:
        if self.candidate_loader is not None:
            return self.candidate_loader(locator)
        return fetch_candidates(locator, timeout=self.settings.timeout_seconds, get=self.get)


__all__ = ["NO_MATCH_LABEL", "ResolutionReport", "ResolutionService", "SlotResolution"]
