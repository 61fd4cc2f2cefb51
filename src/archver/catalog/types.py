# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared type aliases and constants for the version catalog."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Final, Literal, TypeAlias

JSONPrimitive: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONPrimitive | Sequence["JSONValue"] | Mapping[str, "JSONValue"]

SlotName: TypeAlias = Literal["api", "plugin", "loom", "injectables"]
SLOT_NAMES: Final[tuple[SlotName, ...]] = ("api", "plugin", "loom", "injectables")

REFERENCE_SIGIL: Final[str] = "@"

DEFINITIONS_KEY: Final[str] = "definitions"
VERSIONS_KEY: Final[str] = "versions"
FILTER_KEY: Final[str] = "filter"
LOCATOR_KEY: Final[str] = "pom"
STABLE_KEY: Final[str] = "stable"

__all__ = [
    "DEFINITIONS_KEY",
    "FILTER_KEY",
    "LOCATOR_KEY",
    "REFERENCE_SIGIL",
    "SLOT_NAMES",
    "STABLE_KEY",
    "VERSIONS_KEY",
    "JSONPrimitive",
    "JSONValue",
    "SlotName",
]
