# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Utility helpers for validating and decoding catalog JSON structures."""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import TypeVar

from .errors import CatalogDecodeError
from .types import JSONValue

ValueT = TypeVar("ValueT")

ElementDecoder = Callable[[JSONValue, str], ValueT]


def expect_string(value: JSONValue | None, *, key: str, context: str) -> str:
    """Return ``value`` as ``str`` or raise a catalog error.

    Args:
        value: Raw JSON value extracted from the catalog payload.
        key: Attribute name used in error messages.
        context: Dotted path describing where ``value`` came from.

    Returns:
        str: ``value`` unchanged.

    Raises:
        CatalogDecodeError: If ``value`` is missing or not a string.
    """
    if not isinstance(value, str):
        raise CatalogDecodeError(f"{context}: expected '{key}' to be a string")
    return value


def optional_bool(
    value: JSONValue | None,
    *,
    key: str,
    context: str,
    default: bool | None = None,
) -> bool:
    """Return ``value`` as ``bool`` with an optional default.

    Args:
        value: Raw JSON value extracted from the catalog payload.
        key: Attribute name used in error messages.
        context: Dotted path describing where ``value`` came from.
        default: Value returned when ``value`` is ``None``.

    Returns:
        bool: Boolean value derived from ``value`` or ``default``.

    Raises:
        CatalogDecodeError: If ``value`` is present but not a bool, or absent
            with no ``default``.
    """
    if value is None:
        if default is None:
            raise CatalogDecodeError(f"{context}: expected '{key}' to be a boolean")
        return default
    if isinstance(value, bool):
        return value
    raise CatalogDecodeError(f"{context}: expected '{key}' to be a boolean")


def expect_mapping(value: JSONValue | None, *, key: str, context: str) -> Mapping[str, JSONValue]:
    """Return ``value`` as a mapping of JSON values or raise an error.

    Args:
        value: Raw JSON value extracted from the catalog payload.
        key: Attribute name used in error messages.
        context: Dotted path describing where ``value`` came from.

    Returns:
        Mapping[str, JSONValue]: ``value`` unchanged.

    Raises:
        CatalogDecodeError: If ``value`` is missing or not a mapping.
    """
    if not isinstance(value, Mapping):
        raise CatalogDecodeError(f"{context}: expected '{key}' to be an object")
    return value


def compile_pattern(value: JSONValue | None, *, key: str, context: str) -> re.Pattern[str]:
    """Return ``value`` compiled as a regular expression.

    Args:
        value: Raw JSON value holding the pattern source.
        key: Attribute name used in error messages.
        context: Dotted path describing where ``value`` came from.

    Returns:
        re.Pattern[str]: Compiled pattern.

    Raises:
        CatalogDecodeError: If ``value`` is not a string or not a valid pattern.
    """
    source = expect_string(value, key=key, context=context)
    try:
        return re.compile(source)
    except re.error as exc:
        raise CatalogDecodeError(f"{context}: '{key}' is not a valid regular expression: {exc}") from exc


def decode_mapping(
    value: JSONValue | None,
    decoder: ElementDecoder[ValueT],
    *,
    key: str,
    context: str,
) -> Mapping[str, ValueT]:
    """Decode every value of a JSON object with ``decoder``.

    Document order is preserved. The first element that fails to decode aborts
    the whole mapping.

    Args:
        value: Raw JSON value that should be an object.
        decoder: Callable receiving ``(element, element_context)``.
        key: Attribute name used in error messages.
        context: Dotted path describing where ``value`` came from.

    Returns:
        Mapping[str, ValueT]: Read-only mapping of decoded elements.

    Raises:
        CatalogDecodeError: If ``value`` is not an object or any element fails.
    """
    mapping = expect_mapping(value, key=key, context=context)
    decoded: dict[str, ValueT] = {}
    for name, element in mapping.items():
        if not isinstance(name, str):
            raise CatalogDecodeError(f"{context}.{key}: expected keys to be strings")
        decoded[name] = decoder(element, f"{context}.{key}.{name}")
    return MappingProxyType(decoded)


__all__ = [
    "compile_pattern",
    "decode_mapping",
    "expect_mapping",
    "expect_string",
    "optional_bool",
]
