"""Shared model contracts for listing data flow."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

HIGHLIGHT_CHAR = "▶"


@dataclass(frozen=True)
class DisplayItem:
    name: str
    description: str = ""
    is_current: bool = False

    @classmethod
    def coerce(cls, raw: Any) -> DisplayItem:
        """Normalise a string, mapping or DisplayItem into a DisplayItem."""
        if isinstance(raw, DisplayItem):
            return raw
        if isinstance(raw, Mapping):
            description = raw.get("description")
            if description is None:
                description = raw.get("lang")
            current = raw.get("current", raw.get("is_current", False))
            return cls(
                name=str(raw.get("name", "")),
                description=str(description or ""),
                is_current=bool(current),
            )
        return cls(name=str(raw))


@dataclass(frozen=True)
class LayoutConfig:
    columns: int = 2
    column_width: int = 35
    highlight_char: str = HIGHLIGHT_CHAR
    indent: str = "  "


@dataclass(frozen=True)
class PanelConfig:
    title: str
    title_note: str = ""
    border_style: str = "cyan"
    padding: tuple[int, int] = (1, 3)
    title_align: str = "center"


@dataclass(frozen=True)
class Voice:
    name: str
    lang: str = ""


@dataclass(frozen=True)
class Personality:
    name: str
    description: str = ""
