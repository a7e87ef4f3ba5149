"""Shared ordering and text helpers for listing panels."""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import TypeVar

from vibes_core.styling import paint

RANDOM_PERSONALITY = "random"
RULE_WIDTH = 60
RULE_CHAR = "─"

LANGUAGE_RE = re.compile(r"^([a-z]{2}_[A-Z]{2})")

T = TypeVar("T")


def name_sort_key(name: str) -> tuple[str, str]:
    return (name.casefold(), name)


def sort_voices(voices: Iterable[T]) -> list[T]:
    return sorted(voices, key=lambda v: name_sort_key(v.name))


def sort_personalities(personalities: Iterable[T]) -> list[T]:
    # The "random" sentinel always goes last.
    return sorted(
        personalities,
        key=lambda p: (p.name == RANDOM_PERSONALITY, name_sort_key(p.name)),
    )


def extract_language(voice_name: str) -> str:
    match = LANGUAGE_RE.match(voice_name)
    return match.group(1) if match else ""


def usage_footer(commands: list[tuple[str, str]]) -> str:
    lines = [paint(RULE_CHAR * RULE_WIDTH, "bright_black")]
    for label, command in commands:
        lines.append(paint(f"{label}: ", "dim") + paint(command, "cyan"))
    return "\n\n" + "\n".join(lines)
