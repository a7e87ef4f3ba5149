"""Collector helpers and package exports."""

from __future__ import annotations

import os
from pathlib import Path


def list_files(dir_path: Path, suffix: str) -> list[Path]:
    try:
        return sorted(p for p in dir_path.iterdir() if p.is_file() and p.name.endswith(suffix))
    except OSError:
        return []


def strip_suffix(path: Path, suffix: str) -> str:
    return path.name[: -len(suffix)] if suffix else path.name


def default_personalities_dir() -> Path:
    return Path(os.path.expanduser("~")) / ".claude" / "personalities"
