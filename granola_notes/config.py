"""
Configuration constants for granola_notes.
Defaults live here; the cache path is resolved once and handed to the loader.
"""

from __future__ import annotations

import os
from pathlib import Path

CACHE_ENV_VAR = "GRANOLA_CACHE_PATH"
DEFAULT_CACHE_PATH = Path("~/Library/Application Support/Granola/cache-v3.json")

DEFAULT_LIST_LIMIT = 10
SHORT_ID_LENGTH = 8
SNIPPET_RADIUS = 50                  # chars of context either side of a search hit

RULE_WIDTH_LIST = 75
RULE_WIDTH_DETAIL = 60


def resolve_cache_path(cli_value: str | None = None) -> Path:
    """--cache beats $GRANOLA_CACHE_PATH beats the macOS default."""
    raw = cli_value or os.environ.get(CACHE_ENV_VAR, "").strip()
    path = Path(raw) if raw else DEFAULT_CACHE_PATH
    return path.expanduser()
