"""Voices panel renderer."""

from __future__ import annotations

from collections.abc import Sequence

from rich.panel import Panel

from vibes_core.columns import layout_columns
from vibes_core.formatting import sort_voices, usage_footer
from vibes_core.models import DisplayItem, LayoutConfig, PanelConfig, Voice
from vibes_core.panels import framed, from_ansi, guidance_panel
from vibes_core.styling import paint

TITLE = "🎤 Available Voices"
BORDER = "cyan"
DEFAULT_PROVIDER = "Piper TTS"

USAGE = [
    ("Switch voice", "/agent-vibes:switch <voice-name>"),
    ("Preview voice", "/agent-vibes:preview <voice-name>"),
]


def render(
    voices: Sequence[Voice],
    *,
    current: str = "",
    provider: str = DEFAULT_PROVIDER,
    title: str = TITLE,
    layout: LayoutConfig | None = None,
    show_usage: bool = True,
) -> Panel:
    config = PanelConfig(title=title, border_style=BORDER)
    if not voices:
        return guidance_panel(
            config,
            "No voices found",
            "Download voices with:",
            "/agent-vibes:provider download <voice-name>",
        )

    items = [
        DisplayItem(name=voice.name, description=voice.lang, is_current=voice.name == current)
        for voice in sort_voices(voices)
    ]
    body = paint(provider, "bold") + "\n\n" + layout_columns(items, layout or LayoutConfig())
    if show_usage:
        body += usage_footer(USAGE)
    return framed(from_ansi(body), config)
