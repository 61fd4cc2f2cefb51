# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""I/O helpers for reading catalog JSON documents and the bundled schema."""

from __future__ import annotations

import json
from collections.abc import Mapping
from importlib import resources
from pathlib import Path
from typing import Final, cast

from .errors import CatalogDecodeError
from .types import JSONValue

SCHEMA_PACKAGE: Final[str] = "archver.catalog.schemas"
SCHEMA_RESOURCE: Final[str] = "catalog.schema.json"


def parse_document(text: str, *, source: str) -> JSONValue:
    """Parse catalog JSON text.

    Args:
        text: Raw JSON text.
        source: Origin of ``text`` (URL or path) used in error messages.

    Returns:
        JSONValue: Parsed JSON value.

    Raises:
        CatalogDecodeError: If ``text`` is not valid JSON.
    """
    try:
        return cast(JSONValue, json.loads(text))
    except json.JSONDecodeError as exc:
        raise CatalogDecodeError(f"{source}: failed to parse catalog JSON: {exc}") from exc


def load_document(path: Path) -> JSONValue:
    """Load a catalog JSON document from disk.

    Args:
        path: Filesystem path to the JSON document.

    Returns:
        JSONValue: Parsed JSON value.

    Raises:
        FileNotFoundError: If the document does not exist.
        CatalogDecodeError: If the document is not valid JSON.
    """
    if not path.exists():
        raise FileNotFoundError(path)
    return parse_document(path.read_text(encoding="utf-8"), source=str(path))


def load_schema() -> Mapping[str, JSONValue]:
    """Load the JSON schema bundled with the package.

    Returns:
        Mapping[str, JSONValue]: Parsed schema object.

    Raises:
        CatalogDecodeError: If the bundled schema is not a JSON object.
    """
    text = resources.files(SCHEMA_PACKAGE).joinpath(SCHEMA_RESOURCE).read_text(encoding="utf-8")
    schema = parse_document(text, source=SCHEMA_RESOURCE)
    if not isinstance(schema, Mapping):
        raise CatalogDecodeError(f"{SCHEMA_RESOURCE}: expected a JSON object")
    return schema


__all__ = ["load_document", "load_schema", "parse_document"]
