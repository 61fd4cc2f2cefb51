# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the catalog and Maven metadata fetchers."""

from __future__ import annotations

import json
from typing import Any

import pytest
import requests

from archver.catalog import CatalogDecodeError, CatalogValidationError
from archver.remote import RemoteError, extract_versions, fetch_candidates, fetch_catalog, fetch_text
from tests.helpers.catalog_data import CATALOG_URL, LOOM_POM, FakeHttp, maven_metadata


def test_extract_versions_reads_versioning_versions_in_order() -> None:
    xml = maven_metadata("1.0", "1.1-SNAPSHOT", "0.9")

    assert extract_versions(xml) == ("1.0", "1.1-SNAPSHOT", "0.9")


def test_extract_versions_ignores_other_elements_and_empty_children() -> None:
    xml = (
        "<metadata>"
        "<version>9.9</version>"
        "<versioning><latest>2.0</latest><versions><version>1.0</version><version/>"
        "<version>  2.0 </version></versions></versioning>"
        "</metadata>"
    )

    assert extract_versions(xml) == ("1.0", "2.0")


def test_extract_versions_without_versioning_is_empty() -> None:
    assert extract_versions("<metadata><groupId>x</groupId></metadata>") == ()


def test_extract_versions_rejects_malformed_xml() -> None:
    with pytest.raises(RemoteError):
        extract_versions("<metadata><versioning>", source=LOOM_POM)


def test_fetch_candidates_uses_the_getter(fake_http: FakeHttp) -> None:
    versions = fetch_candidates(LOOM_POM, timeout=1.0, get=fake_http)

    assert "1.2.10" in versions
    assert fake_http.calls == [LOOM_POM]


def test_fetch_text_wraps_http_errors(fake_http: FakeHttp) -> None:
    with pytest.raises(RemoteError) as excinfo:
        fetch_text("https://maven.example.test/missing.xml", timeout=1.0, get=fake_http)

    assert excinfo.value.url == "https://maven.example.test/missing.xml"
    assert isinstance(excinfo.value.__cause__, requests.HTTPError)


def test_fetch_text_wraps_connection_errors() -> None:
    def refuse(url: str, *, timeout: float) -> requests.Response:
        raise requests.ConnectionError("connection refused")

    with pytest.raises(RemoteError, match="connection refused"):
        fetch_text("https://maven.example.test/m.xml", timeout=1.0, get=refuse)


def test_fetch_catalog_decodes_document(fake_http: FakeHttp) -> None:
    catalog = fetch_catalog(CATALOG_URL, timeout=1.0, get=fake_http)

    assert catalog.stable_key() == "1.20.1"


def test_fetch_catalog_rejects_invalid_json() -> None:
    http = FakeHttp(bodies={CATALOG_URL: "<html>rate limited</html>"})

    with pytest.raises(RemoteError, match="JSON"):
        fetch_catalog(CATALOG_URL, timeout=1.0, get=http)


def test_fetch_catalog_schema_validation_reports_location() -> None:
    http = FakeHttp(bodies={CATALOG_URL: json.dumps({"definitions": {}, "versions": {"1.20.1": {"api": 1}}})})

    with pytest.raises(CatalogValidationError, match="versions/1.20.1"):
        fetch_catalog(CATALOG_URL, timeout=1.0, get=http)


def test_fetch_catalog_without_validation_still_decodes_strictly() -> None:
    http = FakeHttp(bodies={CATALOG_URL: json.dumps({"versions": {}})})

    with pytest.raises(CatalogDecodeError) as excinfo:
        fetch_catalog(CATALOG_URL, timeout=1.0, validate=False, get=http)

    assert not isinstance(excinfo.value, CatalogValidationError)


def test_null_stable_is_accepted_with_and_without_validation(catalog_document: dict[str, Any]) -> None:
    catalog_document["versions"]["1.19.2"]["stable"] = None
    http = FakeHttp(bodies={CATALOG_URL: json.dumps(catalog_document)})

    validated = fetch_catalog(CATALOG_URL, timeout=1.0, get=http)
    unvalidated = fetch_catalog(CATALOG_URL, timeout=1.0, validate=False, get=http)

    assert validated.versions["1.19.2"].stable is False
    assert unvalidated.versions["1.19.2"].stable is False
    assert validated.stable_key() == "1.20.1"
