# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for reference resolution and stable entry lookup."""

from __future__ import annotations

import re
from typing import Any

import pytest

from archver.catalog import (
    Catalog,
    CatalogLookupError,
    InlineDefinition,
    NamedReference,
    VersionDefinition,
)


def test_resolve_named_reference(catalog: Catalog) -> None:
    assert catalog.resolve(NamedReference("plugin")) is catalog.definitions["plugin"]


def test_resolve_missing_reference_yields_none(catalog: Catalog) -> None:
    assert catalog.resolve(NamedReference("fabric-loom")) is None


def test_resolve_inline_definition_never_fails() -> None:
    inline = VersionDefinition(filter=re.compile(".*"), locator="https://example.test/m.xml")
    empty = Catalog(definitions={}, versions={})

    assert empty.resolve(InlineDefinition(inline)) is inline


def test_require_raises_for_missing_reference(catalog: Catalog) -> None:
    with pytest.raises(CatalogLookupError, match="fabric-loom"):
        catalog.require(NamedReference("fabric-loom"))


def test_lookup_error_is_a_lookup_error(catalog: Catalog) -> None:
    with pytest.raises(LookupError):
        catalog.entry("1.7.10")


def test_stable_entry(catalog: Catalog) -> None:
    assert catalog.stable_key() == "1.20.1"
    assert catalog.stable_entry() is catalog.versions["1.20.1"]


def test_stable_entry_missing(catalog_document: dict[str, Any]) -> None:
    catalog_document["versions"]["1.20.1"]["stable"] = False
    catalog = Catalog.decode(catalog_document)

    with pytest.raises(CatalogLookupError, match="stable"):
        catalog.stable_entry()


def test_first_stable_entry_in_document_order_wins(catalog_document: dict[str, Any]) -> None:
    catalog_document["versions"]["1.19.2"]["stable"] = True
    catalog = Catalog.decode(catalog_document)

    assert catalog.stable_key() == "1.19.2"
