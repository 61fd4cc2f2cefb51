# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Dotted numeric versions with an optional snapshot qualifier.

The ordering implemented here is deliberately not SemVer:

* numeric components are compared pairwise, with missing trailing components
  treated as ``0`` (``1.2`` equals ``1.2.0``);
* a release outranks any qualified version with the same numbers
  (``1.0`` > ``1.0-beta``);
* two qualifiers are compared as plain strings (``1.0-alpha`` < ``1.0-beta``,
  but also ``1.0-build.10`` < ``1.0-build.9``).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import total_ordering
from typing import Final

from ..errors import ArchverError

COMPONENT_SEPARATOR: Final[str] = "."
SNAPSHOT_SEPARATOR: Final[str] = "-"
_SEGMENT_PATTERN: Final[re.Pattern[str]] = re.compile(r"[0-9]+")


class VersionParseError(ArchverError, ValueError):
    """Raised when text does not follow the ``<ints>[-qualifier]`` grammar."""

    def __init__(self, message: str, *, text: str) -> None:
        """Create the error for the rejected ``text``.

        Args:
            message: Human-readable description of the failure.
            text: Original input that failed to parse.
        """

        super().__init__(message)
        self.text = text


@total_ordering
@dataclass(frozen=True, slots=True, eq=False)
class Version:
    """Parsed version made of numeric components and an optional snapshot."""

    components: tuple[int, ...]
    snapshot: str | None = None

    def __post_init__(self) -> None:
        """Reject versions that could not have come out of :meth:`parse`."""

        if not self.components:
            raise VersionParseError("a version needs at least one component", text="")
        if any(component < 0 for component in self.components):
            raise VersionParseError(
                f"version components must be non-negative, got {self.components!r}",
                text=COMPONENT_SEPARATOR.join(str(component) for component in self.components),
            )

    @classmethod
    def parse(cls, text: str) -> Version:
        """Parse ``text`` into a :class:`Version`.

        Everything after the first ``-`` is kept verbatim as the snapshot;
        everything before it must be dot-separated base-10 integers.

        Args:
            text: Raw version string, e.g. ``"1.2.3-SNAPSHOT"``.

        Returns:
            Version: Parsed version.

        Raises:
            VersionParseError: If the numeric prefix is empty or contains a
                segment that is not a non-negative integer.
        """

        base, separator, snapshot = text.partition(SNAPSHOT_SEPARATOR)
        if not base:
            raise VersionParseError(f"'{text}' has no numeric components", text=text)
        components: list[int] = []
        for index, segment in enumerate(base.split(COMPONENT_SEPARATOR)):
            if _SEGMENT_PATTERN.fullmatch(segment) is None:
                raise VersionParseError(
                    f"'{text}': component {index} ('{segment}') is not a non-negative integer",
                    text=text,
                )
            components.append(int(segment))
        return cls(components=tuple(components), snapshot=snapshot if separator else None)

    @property
    def is_snapshot(self) -> bool:
        """Return ``True`` when the version carries a qualifier."""

        return self.snapshot is not None

    def render(self) -> str:
        """Return the canonical text form accepted by :meth:`parse`."""

        text = COMPONENT_SEPARATOR.join(str(component) for component in self.components)
        if self.snapshot is not None:
            text = f"{text}{SNAPSHOT_SEPARATOR}{self.snapshot}"
        return text

    def __str__(self) -> str:
        return self.render()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_versions(self, other) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_versions(self, other) < 0

    def __hash__(self) -> int:
        components = list(self.components)
        while components and components[-1] == 0:
            components.pop()
        return hash((tuple(components), self.snapshot))


def compare_versions(left: Version, right: Version) -> int:
    """Return ``-1``, ``0`` or ``1`` as ``left`` sorts before, with or after ``right``.

    Args:
        left: First version to compare.
        right: Second version to compare.

    Returns:
        int: Sign of the comparison.
    """

    width = max(len(left.components), len(right.components))
    for index in range(width):
        left_value = left.components[index] if index < len(left.components) else 0
        right_value = right.components[index] if index < len(right.components) else 0
        if left_value != right_value:
            return -1 if left_value < right_value else 1

    if left.snapshot == right.snapshot:
        return 0
    # A release outranks every snapshot of the same numbers.
    if left.snapshot is None:
        return 1
    if right.snapshot is None:
        return -1
    return -1 if left.snapshot < right.snapshot else 1


__all__ = ["Version", "VersionParseError", "compare_versions"]
