"""
Selection and search over a loaded meeting list.

All functions take the list as returned by MeetingRepository.load() (newest
first) and never modify it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .config import SNIPPET_RADIUS
from .models import Meeting


@dataclass(frozen=True)
class SearchHit:
    meeting: Meeting
    context: str


def matches(query: str, text: str) -> bool:
    """Case-insensitive substring match."""
    return query.lower() in text.lower()


def select_recent(meetings: Sequence[Meeting], limit: Optional[int] = None) -> List[Meeting]:
    if limit is None:
        return list(meetings)
    return list(meetings[:limit])


def find_by_title(meetings: Sequence[Meeting], query: str) -> Optional[Meeting]:
    """First meeting (newest first) whose title contains `query`."""
    for m in meetings:
        if matches(query, m.title):
            return m
    return None


def context_snippet(text: str, query: str, radius: int = SNIPPET_RADIUS) -> str:
    """
    Text around the first occurrence of `query`, `radius` chars either side,
    newlines flattened and wrapped in ellipses. Empty if there is no match.
    """
    idx = text.lower().find(query.lower())
    if idx == -1:
        return ""
    start = max(0, idx - radius)
    end = min(len(text), idx + len(query) + radius)
    return "..." + text[start:end].replace("\n", " ") + "..."


def search(meetings: Sequence[Meeting], query: str) -> List[SearchHit]:
    """Every meeting whose title, summary or transcript contains `query`."""
    hits: List[SearchHit] = []
    for m in meetings:
        text = m.search_text
        if matches(query, text):
            hits.append(SearchHit(meeting=m, context=context_snippet(text, query)))
    return hits


def find_by_id_prefixes(
    meetings: Sequence[Meeting], ids: Sequence[str]
) -> Tuple[List[Meeting], List[str]]:
    """
    Resolve each id (full or short) to the first meeting whose id starts with it.
    Returns (selected, missing) where missing lists the ids that matched nothing.
    """
    selected: List[Meeting] = []
    missing: List[str] = []
    for wanted in ids:
        match = next((m for m in meetings if m.id.startswith(wanted)), None)
        if match is None:
            missing.append(wanted)
        else:
            selected.append(match)
    return selected, missing
