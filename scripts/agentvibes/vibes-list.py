#!/usr/bin/env python3
"""Thin compatibility entrypoint for the AgentVibes listing CLI."""

from __future__ import annotations

from vibes_core.app import main


if __name__ == "__main__":
    raise SystemExit(main())
