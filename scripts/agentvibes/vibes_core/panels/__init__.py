"""Panel rendering helpers."""

from __future__ import annotations

import io

from rich import box
from rich.cells import cell_len
from rich.console import Console
from rich.markup import escape
from rich.padding import Padding
from rich.panel import Panel
from rich.text import Text

from vibes_core.models import PanelConfig

CAUTION_BORDER = "yellow"
PANEL_MARGIN = 1


def _title_markup(config: PanelConfig) -> str:
    title = f"[bold]{escape(config.title)}[/bold]"
    if config.title_note:
        title += f"[bright_black] {escape(config.title_note)}[/bright_black]"
    return title


def framed(body: Text, config: PanelConfig) -> Panel:
    return Panel(
        body,
        title=_title_markup(config),
        title_align=config.title_align,
        border_style=config.border_style,
        box=box.ROUNDED,
        padding=config.padding,
        expand=False,
    )


def from_ansi(text: str) -> Text:
    return Text.from_ansi(text)


def guidance_panel(config: PanelConfig, message: str, hint: str, command: str) -> Panel:
    body = Text.assemble(
        (message, "yellow"),
        "\n\n",
        (f"{hint}\n", "bright_black"),
        (f"  {command}", "cyan"),
    )
    caution = PanelConfig(
        title=config.title,
        title_note=config.title_note,
        border_style=CAUTION_BORDER,
        padding=config.padding,
        title_align=config.title_align,
    )
    return framed(body, caution)


def panel_width(panel: Panel, margin: int = PANEL_MARGIN) -> int:
    """Console width that fits ``panel`` without wrapping its content."""
    renderable = panel.renderable
    plain = renderable.plain if isinstance(renderable, Text) else str(renderable)
    content = max((cell_len(line) for line in plain.split("\n")), default=0)
    _, right, _, left = Padding.unpack(panel.padding)
    title = cell_len(Text.from_markup(str(panel.title or "")).plain) + 4
    return max(content + left + right + 2, title) + 2 * margin


def panel_to_text(panel: Panel, *, margin: int = PANEL_MARGIN, color: bool = True) -> str:
    console = Console(
        file=io.StringIO(),
        width=panel_width(panel, margin),
        force_terminal=True,
        force_jupyter=False,
        force_interactive=False,
        color_system="standard" if color else None,
        no_color=not color,
        highlight=False,
        emoji=False,
        legacy_windows=False,
    )
    console.print(Padding(panel, (margin, margin), expand=False))
    return console.file.getvalue().rstrip("\n")
