# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Read candidate versions out of Maven ``maven-metadata.xml`` documents."""

from __future__ import annotations

from xml.etree.ElementTree import ParseError

from defusedxml import DefusedXmlException, ElementTree

from .http import HttpGet, RemoteError, fetch_text

VERSIONING_TAG = "versioning"
VERSIONS_TAG = "versions"


def extract_versions(xml_text: str, *, source: str = "<metadata>") -> tuple[str, ...]:
    """Return the text of every ``<versioning><versions>`` child, in document order.

    Children without text are skipped.

    Args:
        xml_text: Raw ``maven-metadata.xml`` content.
        source: Origin of ``xml_text`` used in error messages.

    Returns:
        tuple[str, ...]: Candidate version strings.

    Raises:
        RemoteError: If ``xml_text`` is not well-formed XML.
    """

    try:
        root = ElementTree.fromstring(xml_text)
    except (ParseError, DefusedXmlException) as exc:
        raise RemoteError(f"{source}: failed to parse Maven metadata: {exc}", url=source) from exc
    versions: list[str] = []
    for versioning in root.findall(VERSIONING_TAG):
        for container in versioning.findall(VERSIONS_TAG):
            for child in container:
                if child.text:
                    versions.append(child.text.strip())
    return tuple(version for version in versions if version)


def fetch_candidates(url: str, *, timeout: float, get: HttpGet | None = None) -> tuple[str, ...]:
    """Fetch ``url`` and return the candidate versions it lists.

    Args:
        url: ``maven-metadata.xml`` URL taken from a version definition.
        timeout: Timeout in seconds applied to the request.
        get: Optional GET callable; defaults to :func:`requests.get`.

    Returns:
        tuple[str, ...]: Candidate version strings in document order.

    Raises:
        RemoteError: If the request fails or the document is not XML.
    """

    return extract_versions(fetch_text(url, timeout=timeout, get=get), source=url)


__all__ = ["extract_versions", "fetch_candidates"]
