# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import copy
from typing import Any

import pytest

from archver.catalog import Catalog
from archver.config import ArchverSettings
from tests.helpers.catalog_data import CATALOG_DOCUMENT, CATALOG_URL, FakeHttp, sample_bodies


@pytest.fixture
def catalog_document() -> dict[str, Any]:
    """Return a fresh, mutable copy of the sample catalog document."""

    return copy.deepcopy(CATALOG_DOCUMENT)


@pytest.fixture
def catalog(catalog_document: dict[str, Any]) -> Catalog:
    """Return the sample catalog decoded."""

    return Catalog.decode(catalog_document)


@pytest.fixture
def fake_http() -> FakeHttp:
    """Return a GET callable serving the sample catalog and Maven metadata."""

    return FakeHttp(bodies=sample_bodies())


@pytest.fixture
def settings() -> ArchverSettings:
    """Return settings pointing at the sample catalog URL without colour or emoji."""

    return ArchverSettings(catalog_url=CATALOG_URL, use_color=False, use_emoji=False)
