# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Thin HTTP layer shared by the catalog and Maven metadata fetchers."""

from __future__ import annotations

import logging
from typing import Protocol

import requests

from ..errors import ArchverError

LOGGER = logging.getLogger(__name__)


class RemoteError(ArchverError):
    """Raised when a remote document cannot be fetched or parsed."""

    def __init__(self, message: str, *, url: str) -> None:
        """Create the error for the failing ``url``.

        Args:
            message: Human-readable description of the failure.
            url: URL that could not be fetched or parsed.
        """

        super().__init__(message)
        self.url = url


class HttpResponse(Protocol):
    """Minimal subset of ``requests.Response`` used by the fetchers."""

    status_code: int
    text: str

    def raise_for_status(self) -> None:
        """Raise an exception when the HTTP response indicates failure."""


class HttpGet(Protocol):
    """Callable compatible with ``requests.get`` for the parameters we use."""

    def __call__(self, url: str, *, timeout: float) -> HttpResponse:
        """Return the HTTP response for ``url``."""


def fetch_text(url: str, *, timeout: float, get: HttpGet | None = None) -> str:
    """Return the body of ``url`` as text.

    Args:
        url: Document URL.
        timeout: Timeout in seconds applied to the request.
        get: Optional GET callable; defaults to :func:`requests.get`.

    Returns:
        str: Decoded response body.

    Raises:
        RemoteError: On connection failures and non-success status codes.
    """

    getter: HttpGet = get if get is not None else requests.get
    LOGGER.debug("GET %s (timeout=%ss)", url, timeout)
    try:
        response = getter(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as exc:
        raise RemoteError(f"failed to fetch {url}: {exc}", url=url) from exc
    return response.text


__all__ = ["HttpGet", "HttpResponse", "RemoteError", "fetch_text"]
