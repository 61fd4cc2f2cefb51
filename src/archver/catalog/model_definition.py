# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Version definition model: where to look for versions and which ones count."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass

from .types import FILTER_KEY, LOCATOR_KEY, JSONValue
from .utils import compile_pattern, expect_mapping, expect_string


@dataclass(frozen=True, slots=True)
class VersionDefinition:
    """Concrete version source: a filter pattern plus a metadata locator.

    Attributes:
        filter: Pattern a candidate version must contain a match for.
        locator: URL of the ``maven-metadata.xml`` listing candidate versions.
    """

    filter: re.Pattern[str]
    locator: str

    @staticmethod
    def from_json(value: JSONValue, context: str) -> VersionDefinition:
        """Decode a definition object.

        Args:
            value: Raw JSON value that should be an object with ``filter`` and ``pom``.
            context: Dotted path used in error messages.

        Returns:
            VersionDefinition: Decoded definition.

        Raises:
            CatalogDecodeError: If either field is missing, not a string, or the
                filter is not a valid pattern.
        """

        data: Mapping[str, JSONValue] = expect_mapping(value, key="<definition>", context=context)
        pattern = compile_pattern(data.get(FILTER_KEY), key=FILTER_KEY, context=context)
        locator = expect_string(data.get(LOCATOR_KEY), key=LOCATOR_KEY, context=context)
        return VersionDefinition(filter=pattern, locator=locator)

    def to_dict(self) -> dict[str, str]:
        """Return the JSON object this definition decodes from."""

        return {FILTER_KEY: self.filter.pattern, LOCATOR_KEY: self.locator}


__all__ = ["VersionDefinition"]
