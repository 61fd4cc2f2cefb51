# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Remote collaborators: catalog download and Maven metadata parsing."""

from __future__ import annotations

from .catalog import fetch_catalog
from .http import HttpGet, HttpResponse, RemoteError, fetch_text
from .maven import extract_versions, fetch_candidates

__all__ = [
    "HttpGet",
    "HttpResponse",
    "RemoteError",
    "extract_versions",
    "fetch_candidates",
    "fetch_catalog",
    "fetch_text",
]
