# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rich renderables for resolution reports and catalog listings."""

from __future__ import annotations

from typing import Final

from rich import box
from rich.table import Table
from rich.text import Text

from ..catalog import Catalog, InlineDefinition, SlotName
from ..service import ResolutionReport, SlotResolution

SLOT_TITLES: Final[dict[SlotName, str]] = {
    "loom": "Architectury Loom",
    "plugin": "Architectury Plugin",
    "api": "Architectury API",
    "injectables": "Injectables",
}
# Two slots per row pair: title row, then value row.
TABLE_LAYOUT: Final[tuple[tuple[SlotName, SlotName], ...]] = (("loom", "plugin"), ("api", "injectables"))


def build_report_table(report: ResolutionReport, *, use_color: bool) -> Table:
    """Return the two-column table of latest versions for ``report``."""

    title_style = "green" if use_color else ""
    table = Table(
        title=f"Minecraft {report.game_version}",
        box=box.ROUNDED,
        show_header=False,
        show_lines=True,
    )
    table.add_column()
    table.add_column()
    for left, right in TABLE_LAYOUT:
        table.add_row(
            Text(SLOT_TITLES[left], style=title_style),
            Text(SLOT_TITLES[right], style=title_style),
        )
        table.add_row(
            _version_cell(report.slot(left), use_color=use_color),
            _version_cell(report.slot(right), use_color=use_color),
        )
    return table


def _version_cell(resolution: SlotResolution, *, use_color: bool) -> Text:
    """Return the version label, dimmed when nothing matched and yellow for snapshots."""

    if resolution.version is None:
        return Text(resolution.label, style="dim" if use_color else "")
    snapshot = resolution.version.is_snapshot and use_color
    return Text(resolution.label, style="yellow" if snapshot else "")


def build_catalog_table(catalog: Catalog, *, stable_key: str | None, use_color: bool) -> Table:
    """Return a table listing every game version in ``catalog``.

    Args:
        catalog: Decoded catalog.
        stable_key: Key of the stable entry, highlighted when present.
        use_color: Whether styles may be applied.

    Returns:
        Table: One row per game version with the source of each slot.
    """

    table = Table(box=box.ROUNDED, header_style="bold cyan" if use_color else "")
    table.add_column("Game version")
    table.add_column("Stable", justify="center")
    for title in SLOT_TITLES.values():
        table.add_column(title)
    for key, entry in catalog.versions.items():
        sources = {
            name: "inline" if isinstance(reference, InlineDefinition) else str(reference)
            for name, reference in entry.slots()
        }
        marker = "✔" if key == stable_key else ""
        style = "bold green" if key == stable_key and use_color else ""
        table.add_row(Text(key, style=style), marker, *(sources[name] for name in SLOT_TITLES))
    return table


__all__ = ["SLOT_TITLES", "build_catalog_table", "build_report_table"]
