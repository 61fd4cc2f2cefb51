# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Structural validation of catalog documents against the bundled JSON schema."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cache

from jsonschema import Draft202012Validator
from jsonschema.exceptions import best_match

from .errors import CatalogValidationError
from .io import load_schema
from .types import JSONValue


@dataclass(slots=True)
class CatalogSchema:
    """Wrap the Draft 2020-12 validator built from the bundled schema."""

    validator: Draft202012Validator

    @classmethod
    def load(cls) -> CatalogSchema:
        """Build the validator from the packaged ``catalog.schema.json``.

        Returns:
            CatalogSchema: Schema wrapper ready to validate documents.
        """

        return cls(validator=Draft202012Validator(load_schema()))

    def validate(self, document: JSONValue, *, source: str) -> None:
        """Validate ``document``, reporting the most relevant failure.

        Args:
            document: Parsed catalog document.
            source: Origin of ``document`` used in error messages.

        Raises:
            CatalogValidationError: When the document violates the schema.
        """

        error = best_match(self.validator.iter_errors(document))
        if error is None:
            return
        location = "/".join(str(part) for part in error.absolute_path) or "<root>"
        raise CatalogValidationError(f"{source}: {location}: {error.message}")


@cache
def catalog_schema() -> CatalogSchema:
    """Return the process-wide :class:`CatalogSchema`."""

    return CatalogSchema.load()


__all__ = ["CatalogSchema", "catalog_schema"]
