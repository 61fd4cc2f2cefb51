# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Fetch and decode the remote version catalog."""

from __future__ import annotations

import logging

from ..catalog import Catalog, CatalogDecodeError, catalog_schema, parse_document
from .http import HttpGet, RemoteError, fetch_text

LOGGER = logging.getLogger(__name__)


def fetch_catalog(
    url: str,
    *,
    timeout: float,
    validate: bool = True,
    get: HttpGet | None = None,
) -> Catalog:
    """Download, optionally schema-validate, and decode the catalog at ``url``.

    Args:
        url: Catalog JSON URL.
        timeout: Timeout in seconds applied to the request.
        validate: Run jsonschema validation before decoding.
        get: Optional GET callable; defaults to :func:`requests.get`.

    Returns:
        Catalog: Decoded catalog.

    Raises:
        RemoteError: If the request fails or the body is not JSON.
        CatalogDecodeError: If the document does not describe a catalog.
    """

    text = fetch_text(url, timeout=timeout, get=get)
    try:
        document = parse_document(text, source=url)
    except CatalogDecodeError as exc:
        raise RemoteError(str(exc), url=url) from exc
    if validate:
        catalog_schema().validate(document, source=url)
    catalog = Catalog.decode(document)
    LOGGER.debug("loaded catalog from %s", url)
    return catalog


__all__ = ["fetch_catalog"]
