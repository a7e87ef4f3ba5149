"""Multi-column packing of display items."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from vibes_core.models import DisplayItem, LayoutConfig
from vibes_core.styling import pad_to, paint

NAME_STYLE = "cyan"
DESCRIPTION_STYLE = "bright_black"
CELL_SEPARATOR = "  "


def chunk_rows(items: Sequence[Any], size: int) -> list[list[Any]]:
    size = max(1, int(size))
    return [list(items[i : i + size]) for i in range(0, len(items), size)]


def plain_label(item: DisplayItem, highlight_char: str) -> str:
    prefix = f"{highlight_char} {item.name}" if item.is_current else f"  {item.name}"
    if item.description:
        return f"{prefix} {item.description}"
    return prefix


def _format_cell(item: DisplayItem, config: LayoutConfig) -> str:
    prefix = f"{config.highlight_char} {item.name}" if item.is_current else f"  {item.name}"

    if item.description:
        styled = paint(prefix, NAME_STYLE) + paint(f" {item.description}", DESCRIPTION_STYLE)
    elif item.is_current:
        styled = paint(prefix, NAME_STYLE)
    else:
        styled = prefix

    # Measure the unstyled label; the styled one carries escape sequences.
    measured = len(plain_label(item, config.highlight_char))
    return pad_to(styled, config.column_width, measured=measured)


def layout_columns(items: Iterable[Any], config: LayoutConfig | None = None) -> str:
    config = config or LayoutConfig()
    normalised = [DisplayItem.coerce(item) for item in items]

    rows = []
    for row_items in chunk_rows(normalised, config.columns):
        cells = [_format_cell(item, config) for item in row_items]
        rows.append(config.indent + CELL_SEPARATOR.join(cells))
    return "\n".join(rows)
