"""Generic item list panel renderer."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from rich.panel import Panel

from vibes_core.columns import layout_columns
from vibes_core.models import DisplayItem, LayoutConfig, PanelConfig
from vibes_core.panels import framed, from_ansi, guidance_panel
from vibes_core.styling import paint

DEFAULT_TITLE = "Items"
DEFAULT_ICON = "📋"
DEFAULT_BORDER = "blue"
DEFAULT_HINT_COMMAND = "/agent-vibes:list"


def render(
    items: Iterable[Any],
    *,
    title: str = DEFAULT_TITLE,
    icon: str = DEFAULT_ICON,
    border_color: str = DEFAULT_BORDER,
    layout: LayoutConfig | None = None,
    show_count: bool = True,
    hint_command: str = DEFAULT_HINT_COMMAND,
) -> Panel:
    entries = [DisplayItem.coerce(item) for item in items]
    config = PanelConfig(
        title=f"{icon} {title}" if icon else title,
        title_note=f"({len(entries)})" if show_count else "",
        border_style=border_color,
    )
    if not entries:
        return guidance_panel(config, "No items found", "Populate the list with:", hint_command)

    body = ""
    if show_count:
        body = paint(f"Total: {len(entries)} items", "bold") + "\n\n"
    body += layout_columns(entries, layout or LayoutConfig())
    return framed(from_ansi(body), config)
