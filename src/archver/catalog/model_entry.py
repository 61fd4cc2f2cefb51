# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Game version entry model."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from .errors import CatalogDecodeError
from .model_references import VersionReference, decode_reference
from .types import SLOT_NAMES, STABLE_KEY, JSONValue, SlotName
from .utils import expect_mapping, optional_bool


@dataclass(frozen=True, slots=True)
class GameVersionEntry:
    """Version slots published for a single game version."""

    stable: bool
    api: VersionReference
    plugin: VersionReference
    loom: VersionReference
    injectables: VersionReference

    @staticmethod
    def from_json(value: JSONValue, context: str) -> GameVersionEntry:
        """Decode a game version entry.

        Args:
            value: Raw JSON value that should be an object.
            context: Dotted path used in error messages.

        Returns:
            GameVersionEntry: Decoded entry.

        Raises:
            CatalogDecodeError: If ``stable`` is not a boolean or any slot is
                missing or invalid.
        """

        data: Mapping[str, JSONValue] = expect_mapping(value, key="<entry>", context=context)
        stable = optional_bool(data.get(STABLE_KEY), key=STABLE_KEY, context=context, default=False)
        slots: dict[str, VersionReference] = {}
        for name in SLOT_NAMES:
            if name not in data:
                raise CatalogDecodeError(f"{context}: missing required slot '{name}'")
            slots[name] = decode_reference(data[name], f"{context}.{name}")
        return GameVersionEntry(
            stable=stable,
            api=slots["api"],
            plugin=slots["plugin"],
            loom=slots["loom"],
            injectables=slots["injectables"],
        )

    def slot(self, name: SlotName) -> VersionReference:
        """Return the reference stored in slot ``name``."""

        if name not in SLOT_NAMES:
            raise KeyError(name)
        reference: VersionReference = getattr(self, name)
        return reference

    def slots(self) -> tuple[tuple[SlotName, VersionReference], ...]:
        """Return ``(name, reference)`` pairs for every slot in canonical order."""

        return tuple((name, self.slot(name)) for name in SLOT_NAMES)


__all__ = ["GameVersionEntry"]
