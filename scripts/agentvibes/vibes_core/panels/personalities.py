"""Personalities panel renderer."""

from __future__ import annotations

from collections.abc import Sequence

from rich.panel import Panel

from vibes_core.columns import layout_columns
from vibes_core.formatting import sort_personalities, usage_footer
from vibes_core.models import DisplayItem, LayoutConfig, PanelConfig, Personality
from vibes_core.panels import framed, from_ansi, guidance_panel

TITLE = "🎭 Available Personalities"
BORDER = "magenta"
COLUMN_WIDTH = 40

USAGE = [
    ("Set personality", "/agent-vibes:personality <name>"),
    ("Add personality", "/agent-vibes:personality add <name>"),
    ("Edit personality", "/agent-vibes:personality edit <name>"),
]


def render(
    personalities: Sequence[Personality],
    *,
    current: str = "",
    title: str = TITLE,
    layout: LayoutConfig | None = None,
    show_usage: bool = True,
) -> Panel:
    config = PanelConfig(title=title, border_style=BORDER)
    if not personalities:
        return guidance_panel(
            config,
            "No personalities found",
            "Add a personality with:",
            "/agent-vibes:personality add <name>",
        )

    items = [
        DisplayItem(name=p.name, description=p.description, is_current=p.name == current)
        for p in sort_personalities(personalities)
    ]
    body = layout_columns(items, layout or LayoutConfig(column_width=COLUMN_WIDTH))
    if show_usage:
        body += usage_footer(USAGE)
    return framed(from_ansi(body), config)
