"""Command line entrypoint for AgentVibes voice and personality listings."""

from __future__ import annotations

import argparse
import logging
import os
import sys

from rich.console import Console

from vibes_core.collectors import default_personalities_dir
from vibes_core.collectors.personalities import collect as collect_personalities
from vibes_core.collectors.voices import collect as collect_voices
from vibes_core.layout import columns_for_width
from vibes_core.listing import render_list, render_personalities, render_voices
from vibes_core.logging_utils import configure_logging
from vibes_core.models import LayoutConfig
from vibes_core.process import (
    CancellationToken,
    CommandCancelled,
    exit_status,
    install_signal_handlers,
    restore_signal_handlers,
)
from vibes_core.settings import resolve_listing

logger = logging.getLogger("agentvibes.cli")

DEFAULT_PERSONALITY = "normal"


def _common_options() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--config",
        default=os.environ.get("AGENTVIBES_LIST_CONFIG"),
        help="Optional JSON config file for listing overrides",
    )
    common.add_argument("--columns", help="Items per row, or 'auto' to fit the terminal")
    common.add_argument("--width", type=int, help="Terminal width used for --columns auto")
    common.add_argument("--no-color", action="store_true", help="Render without ANSI styling")
    common.add_argument("--no-usage", action="store_true", help="Omit the usage footer")
    common.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return common


def build_parser() -> argparse.ArgumentParser:
    common = _common_options()
    parser = argparse.ArgumentParser(description="AgentVibes voice and personality listings")
    sub = parser.add_subparsers(dest="command", required=True)

    voices = sub.add_parser("voices", parents=[common], help="List TTS voices")
    voices.add_argument("provider", nargs="?", default="piper", help="Voice provider: piper|macos")
    voices.add_argument("current", nargs="?", default="", help="Currently selected voice")
    voices.add_argument("voice_dir", nargs="?", default="", help="Piper voice model directory")

    personalities = sub.add_parser("personalities", parents=[common], help="List personalities")
    personalities.add_argument(
        "personalities_dir",
        nargs="?",
        default=str(default_personalities_dir()),
        help="Directory of personality markdown files",
    )
    personalities.add_argument(
        "current",
        nargs="?",
        default=DEFAULT_PERSONALITY,
        help="Currently selected personality",
    )

    listing = sub.add_parser("list", parents=[common], help="List arbitrary items")
    listing.add_argument("items", nargs="*", help="Items to list")
    listing.add_argument("--title", default="Items", help="Panel title")
    listing.add_argument("--icon", default="📋", help="Icon shown before the title")
    listing.add_argument("--border-color", help="Panel border color")
    listing.add_argument("--no-count", action="store_true", help="Hide the item count")
    return parser


def _apply_cli_overrides(settings: dict, args: argparse.Namespace) -> dict:
    resolved = dict(settings)
    if args.columns:
        resolved["columns"] = "auto" if args.columns == "auto" else max(1, int(args.columns))
    if args.width:
        resolved["width"] = args.width
    if args.no_color:
        resolved["color"] = False
    if args.no_usage:
        resolved["show_usage"] = False
    return resolved


def layout_from_settings(settings: dict) -> LayoutConfig:
    columns = settings["columns"]
    if columns == "auto":
        width = settings.get("width") or Console().size.width
        columns = columns_for_width(width, settings["column_width"])
    return LayoutConfig(columns=columns, column_width=settings["column_width"])


def _render(args: argparse.Namespace, settings: dict, token: CancellationToken) -> str:
    layout = layout_from_settings(settings)

    if args.command == "voices":
        provider_name, voices = collect_voices(args.provider, args.voice_dir, token=token)
        logger.debug("collected %d voices for %s", len(voices), provider_name)
        return render_voices(
            voices,
            current=args.current,
            provider=provider_name,
            layout=layout,
            show_usage=settings["show_usage"],
            color=settings["color"],
        )

    if args.command == "personalities":
        personalities = collect_personalities(args.personalities_dir)
        logger.debug("collected %d personalities", len(personalities))
        return render_personalities(
            personalities,
            current=args.current,
            layout=layout,
            show_usage=settings["show_usage"],
            color=settings["color"],
        )

    return render_list(
        args.items,
        title=args.title,
        icon=args.icon,
        border_color=args.border_color or settings["border_color"],
        layout=layout,
        show_count=settings["show_count"] and not args.no_count,
        color=settings["color"],
    )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging("debug" if args.verbose else "warning")

    try:
        settings = _apply_cli_overrides(resolve_listing(args.command, args.config), args)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    token = CancellationToken()
    previous = install_signal_handlers(token)
    try:
        output = _render(args, settings, token)
    except CommandCancelled as exc:
        logger.debug("%s", exc)
        return exit_status(exc.signum)
    finally:
        restore_signal_handlers(previous)

    if token.cancelled:
        return exit_status(token.signum)

    print(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
