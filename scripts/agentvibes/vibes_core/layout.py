"""Responsive column count selection by terminal width."""

from __future__ import annotations

MAX_COLUMNS = 4
# Indent, separator and panel chrome around the packed cells.
CHROME_WIDTH = 12


def columns_for_width(width: int, column_width: int, maximum: int = MAX_COLUMNS) -> int:
    usable = int(width) - CHROME_WIDTH
    per_cell = max(1, int(column_width)) + 2
    return max(1, min(maximum, (usable + 2) // per_cell))
