"""String-producing entry points for the listing panels."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from vibes_core.models import LayoutConfig, Personality, Voice
from vibes_core.panels import panel_to_text
from vibes_core.panels import generic, personalities, voices


def render_voices(
    items: Sequence[Voice],
    *,
    current: str = "",
    provider: str = voices.DEFAULT_PROVIDER,
    layout: LayoutConfig | None = None,
    show_usage: bool = True,
    color: bool = True,
) -> str:
    panel = voices.render(items, current=current, provider=provider, layout=layout, show_usage=show_usage)
    return panel_to_text(panel, color=color)


def render_personalities(
    items: Sequence[Personality],
    *,
    current: str = "",
    layout: LayoutConfig | None = None,
    show_usage: bool = True,
    color: bool = True,
) -> str:
    panel = personalities.render(items, current=current, layout=layout, show_usage=show_usage)
    return panel_to_text(panel, color=color)


def render_list(
    items: Iterable[Any],
    *,
    title: str = generic.DEFAULT_TITLE,
    icon: str = generic.DEFAULT_ICON,
    border_color: str = generic.DEFAULT_BORDER,
    layout: LayoutConfig | None = None,
    show_count: bool = True,
    color: bool = True,
) -> str:
    panel = generic.render(
        items,
        title=title,
        icon=icon,
        border_color=border_color,
        layout=layout,
        show_count=show_count,
    )
    return panel_to_text(panel, color=color)
