# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Sample catalog, Maven metadata and an in-memory HTTP double for tests."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

import requests

LOOM_POM = "https://maven.example.test/dev/architectury/loom/maven-metadata.xml"
PLUGIN_POM = "https://maven.example.test/architectury-plugin/maven-metadata.xml"
API_POM = "https://maven.example.test/dev/architectury/architectury/maven-metadata.xml"
INJECTABLES_POM = "https://maven.example.test/dev/architectury/injectables/maven-metadata.xml"
CATALOG_URL = "https://catalog.example.test/architectury.json"

CATALOG_DOCUMENT: dict[str, Any] = {
    "definitions": {
        "loom": {"filter": r"^1\.\d+", "pom": LOOM_POM},
        "plugin": {"filter": r"^3\.4\.\d+$", "pom": PLUGIN_POM},
        "injectables": {"filter": r"^1\.0\.\d+$", "pom": INJECTABLES_POM},
    },
    "versions": {
        "1.19.2": {
            "api": {"filter": r"^6\.", "pom": API_POM},
            "plugin": "@plugin",
            "loom": "@loom",
            "injectables": "@injectables",
        },
        "1.20.1": {
            "stable": True,
            "api": {"filter": r"^9\.", "pom": API_POM},
            "plugin": "@plugin",
            "loom": "@loom",
            "injectables": "@injectables",
        },
    },
}

METADATA: dict[str, tuple[str, ...]] = {
    LOOM_POM: ("1.1.300", "1.2.10", "1.2.9", "1.2-SNAPSHOT", "0.12.0"),
    PLUGIN_POM: ("3.4.140", "3.4.151", "3.3.1"),
    API_POM: ("6.5.85", "9.1.10", "9.1.12", "9.2.14-beta", "10.0.7"),
    INJECTABLES_POM: ("1.0.10", "1.0.9"),
}


def maven_metadata(*versions: str) -> str:
    """Return a ``maven-metadata.xml`` document listing ``versions``."""

    items = "\n".join(f"      <version>{version}</version>" for version in versions)
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        "<metadata>\n"
        "  <groupId>dev.architectury</groupId>\n"
        "  <versioning>\n"
        "    <latest>ignored</latest>\n"
        "    <versions>\n"
        f"{items}\n"
        "    </versions>\n"
        "  </versioning>\n"
        "</metadata>\n"
    )


@dataclass
class FakeResponse:
    """In-memory stand-in for ``requests.Response``."""

    text: str
    status_code: int = 200
    url: str = ""

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error for {self.url}")


@dataclass
class FakeHttp:
    """GET callable serving canned bodies and recording requested URLs."""

    bodies: dict[str, str]
    calls: list[str] = field(default_factory=list)

    def __call__(self, url: str, *, timeout: float) -> FakeResponse:
        self.calls.append(url)
        if url not in self.bodies:
            return FakeResponse(text="not found", status_code=404, url=url)
        return FakeResponse(text=self.bodies[url], url=url)


def sample_bodies() -> dict[str, str]:
    """Return response bodies for the sample catalog and every metadata URL."""

    bodies = {url: maven_metadata(*versions) for url, versions in METADATA.items()}
    bodies[CATALOG_URL] = json.dumps(CATALOG_DOCUMENT)
    return bodies
