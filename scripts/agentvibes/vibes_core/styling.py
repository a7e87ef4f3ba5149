"""Styled text helpers: ANSI painting and visible-width measurement.

Widths count characters, not terminal cells, so wide and combining
characters are an approximation.
"""

from __future__ import annotations

import re

from rich.color import ColorSystem
from rich.style import Style

STYLE_SEQUENCE_RE = re.compile(r"\x1b\[[0-?]*[ -/]*[@-~]")


def strip_styles(text: str) -> str:
    return STYLE_SEQUENCE_RE.sub("", text)


def visible_length(text: str) -> int:
    return len(strip_styles(text))


def paint(text: str, style: str) -> str:
    if not text or not style:
        return text
    return Style.parse(style).render(text, color_system=ColorSystem.STANDARD)


def pad_to(text: str, width: int, measured: int | None = None) -> str:
    """Right-pad ``text`` to ``width`` visible columns, never truncating.

    ``measured`` overrides the measurement so callers can pad an already
    styled string using the length of its unstyled source.
    """
    length = visible_length(text) if measured is None else measured
    return text + " " * max(0, width - length)
