"""Listing settings resolution and user config merging."""

from __future__ import annotations

import json
from pathlib import Path

LISTING_KINDS = ["voices", "personalities", "list"]
SHARED_KEYS = ("columns", "column_width", "color", "width")

BUILTIN_LISTINGS: dict[str, dict] = {
    "voices": {
        "columns": 2,
        "column_width": 35,
        "show_usage": True,
    },
    "personalities": {
        "columns": 2,
        "column_width": 40,
        "show_usage": True,
    },
    "list": {
        "columns": 2,
        "column_width": 35,
        "show_count": True,
        "border_color": "blue",
    },
}

RENDER_DEFAULTS = {
    "color": True,
    "width": None,
}


def load_user_config(path: str | None) -> dict:
    if not path:
        return {}

    config_path = Path(path)
    if not config_path.exists():
        raise ValueError(f"config path not found: {config_path}")

    try:
        config = json.loads(config_path.read_text())
    except json.JSONDecodeError as exc:
        raise ValueError(f"invalid JSON config: {exc}") from exc
    if not isinstance(config, dict):
        raise ValueError("config must be a JSON object")
    return config


def _coerce_columns(value) -> int | str:
    if value == "auto":
        return "auto"
    try:
        return max(1, int(value))
    except (TypeError, ValueError) as exc:
        raise ValueError(f"invalid columns value: {value!r}") from exc


def resolve_listing(kind: str, config_path: str | None = None) -> dict:
    if kind not in BUILTIN_LISTINGS:
        raise ValueError(f"unknown listing: {kind}")

    resolved = dict(RENDER_DEFAULTS)
    resolved.update(BUILTIN_LISTINGS[kind])
    user_config = load_user_config(config_path)

    for key in SHARED_KEYS:
        if key in user_config:
            resolved[key] = user_config[key]

    # per-listing overrides: {"voices": {"columns": 3}}
    overrides = user_config.get(kind)
    if isinstance(overrides, dict):
        for key, value in overrides.items():
            if key in resolved:
                resolved[key] = value

    resolved["columns"] = _coerce_columns(resolved["columns"])
    resolved["column_width"] = max(1, int(resolved["column_width"]))
    resolved["color"] = bool(resolved["color"])
    resolved["name"] = kind
    return resolved
