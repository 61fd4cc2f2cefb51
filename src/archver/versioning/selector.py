# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Pick the newest candidate version admitted by a version definition."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from functools import reduce

from ..catalog.model_definition import VersionDefinition
from ..errors import ArchverError
from .version import Version, VersionParseError

LOGGER = logging.getLogger(__name__)


class VersionSelectionError(ArchverError):
    """Raised when a candidate passes the filter but is not a valid version."""

    def __init__(self, message: str, *, candidate: str) -> None:
        """Create the error for the offending ``candidate``.

        Args:
            message: Human-readable description of the failure.
            candidate: Candidate string that failed to parse.
        """

        super().__init__(message)
        self.candidate = candidate


def matching_candidates(definition: VersionDefinition, candidates: Iterable[str]) -> tuple[str, ...]:
    """Return the candidates admitted by ``definition.filter``, in input order.

    The filter is searched for anywhere in the candidate; patterns that need to
    match the whole string must anchor themselves.

    Args:
        definition: Definition supplying the filter pattern.
        candidates: Raw candidate version strings.

    Returns:
        tuple[str, ...]: Candidates containing a match for the filter.
    """

    return tuple(candidate for candidate in candidates if definition.filter.search(candidate) is not None)


def select_latest(
    definition: VersionDefinition,
    candidates: Iterable[str],
    *,
    strict: bool = True,
) -> Version | None:
    """Return the greatest candidate version admitted by ``definition``.

    Args:
        definition: Definition whose filter admits candidates.
        candidates: Raw candidate version strings, typically read from Maven metadata.
        strict: When ``True`` an admitted candidate that fails to parse aborts
            the selection; when ``False`` it is skipped with a warning.

    Returns:
        Version | None: Greatest admitted version, or ``None`` when no
        candidate was admitted.

    Raises:
        VersionSelectionError: If ``strict`` is set and an admitted candidate
            is not a valid version.
    """

    parsed: list[Version] = []
    for candidate in matching_candidates(definition, candidates):
        try:
            parsed.append(Version.parse(candidate))
        except VersionParseError as exc:
            if strict:
                raise VersionSelectionError(
                    f"candidate '{candidate}' matches filter '{definition.filter.pattern}' "
                    "but is not a valid version",
                    candidate=candidate,
                ) from exc
            LOGGER.warning("skipping unparsable candidate %r from %s: %s", candidate, definition.locator, exc)
    if not parsed:
        LOGGER.debug("no candidate from %s matched filter %r", definition.locator, definition.filter.pattern)
        return None
    # Later equal versions win, so "1.2.0" listed after "1.2" is reported.
    return reduce(lambda best, item: item if item >= best else best, parsed)


__all__ = ["VersionSelectionError", "matching_candidates", "select_latest"]
