# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Slot values: an inline definition or a ``@name`` reference to a shared one."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TypeAlias

from .errors import CatalogDecodeError
from .model_definition import VersionDefinition
from .types import REFERENCE_SIGIL, JSONValue


@dataclass(frozen=True, slots=True)
class InlineDefinition:
    """Slot value carrying its own definition."""

    definition: VersionDefinition


@dataclass(frozen=True, slots=True)
class NamedReference:
    """Slot value naming an entry of the catalog's ``definitions`` table."""

    name: str

    def __str__(self) -> str:
        return f"{REFERENCE_SIGIL}{self.name}"


VersionReference: TypeAlias = InlineDefinition | NamedReference


def decode_reference(value: JSONValue, context: str) -> VersionReference:
    """Decode a slot value.

    Objects decode as :class:`InlineDefinition`; strings starting with ``@``
    decode as :class:`NamedReference` with the sigil stripped.

    Args:
        value: Raw JSON slot value.
        context: Dotted path used in error messages.

    Returns:
        VersionReference: Decoded reference.

    Raises:
        CatalogDecodeError: If ``value`` is neither an object nor a
            sigil-prefixed string, or the inline definition is invalid.
    """

    if isinstance(value, Mapping):
        return InlineDefinition(VersionDefinition.from_json(value, context))
    if isinstance(value, str) and value.startswith(REFERENCE_SIGIL):
        return NamedReference(value[len(REFERENCE_SIGIL) :])
    raise CatalogDecodeError(
        f"{context}: expected an inline definition object or a '{REFERENCE_SIGIL}name' reference",
    )


__all__ = ["InlineDefinition", "NamedReference", "VersionReference", "decode_reference"]
