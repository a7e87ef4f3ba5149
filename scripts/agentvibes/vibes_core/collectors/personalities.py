"""Personality collector for a directory of markdown definitions."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from vibes_core.collectors import list_files, strip_suffix
from vibes_core.formatting import RANDOM_PERSONALITY, sort_personalities
from vibes_core.models import Personality

logger = logging.getLogger("agentvibes.collectors.personalities")

PERSONALITY_SUFFIX = ".md"
RANDOM_DESCRIPTION = "Picks randomly each time"
DESCRIPTION_RE = re.compile(r"description:\s*(.+)", re.IGNORECASE)
HEADING_RE = re.compile(r"^#+\s*")
FRONTMATTER_DELIMITER = "---"
MAX_DESCRIPTION = 50


class DescriptionError(Exception):
    pass


def parse_description(content: str) -> str:
    match = DESCRIPTION_RE.search(content)
    if match:
        return match.group(1).strip()

    delimiters = 0
    in_frontmatter = False
    for line in content.split("\n"):
        stripped = line.strip()
        if stripped == FRONTMATTER_DELIMITER:
            delimiters += 1
            in_frontmatter = delimiters == 1
            continue
        if not in_frontmatter and delimiters >= 2 and stripped:
            return HEADING_RE.sub("", stripped)[:MAX_DESCRIPTION]
    return ""


def read_description(path: Path) -> str:
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DescriptionError(f"cannot read {path}: {exc}") from exc
    return parse_description(content)


def collect(personalities_dir: str | Path) -> list[Personality]:
    path = Path(personalities_dir)
    if not path.is_dir():
        logger.debug("personalities directory %s not found", path)
        return []

    personalities: list[Personality] = []
    for definition in list_files(path, PERSONALITY_SUFFIX):
        try:
            description = read_description(definition)
        except DescriptionError as exc:
            # Unreadable definitions still list, just without a description.
            logger.debug("%s", exc)
            description = ""
        personalities.append(
            Personality(name=strip_suffix(definition, PERSONALITY_SUFFIX), description=description)
        )

    personalities.append(Personality(name=RANDOM_PERSONALITY, description=RANDOM_DESCRIPTION))
    return sort_personalities(personalities)
