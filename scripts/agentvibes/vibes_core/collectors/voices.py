"""Voice collectors for Piper voice directories and the macOS ``say`` command."""

from __future__ import annotations

import logging
import subprocess
import sys
from pathlib import Path

from vibes_core.collectors import list_files, strip_suffix
from vibes_core.formatting import extract_language, sort_voices
from vibes_core.models import Voice
from vibes_core.process import CancellationToken, run_command

logger = logging.getLogger("agentvibes.collectors.voices")

PIPER_SUFFIX = ".onnx"
SAY_COMMAND = ["say", "-v", "?"]
SAY_TIMEOUT_SECONDS = 10

PROVIDER_NAMES = {
    "piper": "Piper TTS",
    "macos": "macOS TTS",
}
DEFAULT_PROVIDER_NAME = PROVIDER_NAMES["piper"]


def collect_piper(voice_dir: str | Path | None) -> list[Voice]:
    if not voice_dir:
        return []
    path = Path(voice_dir)
    if not path.is_dir():
        logger.debug("voice directory %s not found", path)
        return []

    voices = []
    for model in list_files(path, PIPER_SUFFIX):
        name = strip_suffix(model, PIPER_SUFFIX)
        voices.append(Voice(name=name, lang=extract_language(name)))
    return sort_voices(voices)


def parse_say_output(output: str) -> list[Voice]:
    voices = []
    for line in output.splitlines():
        parts = line.split()
        if len(parts) >= 2:
            voices.append(Voice(name=parts[0], lang=parts[1]))
    return voices


def collect_macos(token: CancellationToken | None = None) -> list[Voice]:
    if sys.platform != "darwin":
        return []
    try:
        output = run_command(SAY_COMMAND, token=token, timeout=SAY_TIMEOUT_SECONDS)
    except FileNotFoundError:
        logger.warning("say command not available")
        return []
    except subprocess.TimeoutExpired:
        logger.warning("say -v ? timed out")
        return []
    except subprocess.CalledProcessError as exc:
        logger.warning("say -v ? failed with exit status %s", exc.returncode)
        return []
    return parse_say_output(output)


def collect(
    provider: str,
    voice_dir: str | Path | None = None,
    token: CancellationToken | None = None,
) -> tuple[str, list[Voice]]:
    """Return ``(provider display name, voices)`` for a provider key."""
    if provider == "piper":
        return PROVIDER_NAMES["piper"], collect_piper(voice_dir)
    if provider == "macos":
        return PROVIDER_NAMES["macos"], collect_macos(token)
    logger.warning("unknown voice provider: %s", provider)
    return DEFAULT_PROVIDER_NAME, []
