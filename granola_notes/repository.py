"""
Loading meetings from Granola's cache file.

The cache is a JSON envelope whose `cache` field is itself a JSON string.
Inside that sits `state` with three mappings keyed by meeting id:
documents (title, dates, notes), transcripts (utterances) and
documentPanels (rich-document panels used when there are no notes).
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from pydantic import ValidationError

from .errors import CacheMalformed, CacheUnavailable
from .models import CacheEnvelope, CacheState, InnerCache, Meeting, RawDocument, RawPanel, RawTranscript
from .prosemirror import extract_text, has_content
from .timing import status, step


def parse_cache(raw: str) -> CacheState:
    """Decode both JSON layers and validate the parts we read."""
    try:
        envelope = CacheEnvelope.model_validate(json.loads(raw))
        inner = InnerCache.model_validate(json.loads(envelope.cache))
    except json.JSONDecodeError as e:
        raise CacheMalformed(f"invalid JSON: {e}") from e
    except ValidationError as e:
        raise CacheMalformed(f"unexpected cache structure: {e}") from e
    return inner.state


def transcript_for(entry: Any) -> Optional[RawTranscript]:
    """
    Only object-shaped entries carry a `transcript` list we understand.
    Anything else (null, bare lists written by other app versions) has none.
    """
    if not isinstance(entry, dict):
        return None
    try:
        return RawTranscript.model_validate(entry)
    except ValidationError as e:
        raise CacheMalformed(f"unexpected transcript structure: {e}") from e


def summary_text(doc: RawDocument, panels: Optional[Dict[str, Optional[RawPanel]]]) -> str:
    if doc.notes_markdown:
        return doc.notes_markdown.strip()
    parts: List[str] = []
    for panel in (panels or {}).values():
        if panel is not None and has_content(panel.content):
            parts.append(extract_text(panel.content) + "\n")
    return "".join(parts).strip()


def transcript_text(transcript: Optional[RawTranscript]) -> str:
    if transcript is None or not transcript.transcript:
        return ""
    return "\n".join(
        f"[{u.speaker or 'Unknown'}]: {u.text or ''}" for u in transcript.transcript
    )


def build_meeting(
    meeting_id: str,
    doc: RawDocument,
    transcript: Optional[RawTranscript] = None,
    panels: Optional[Dict[str, Optional[RawPanel]]] = None,
) -> Meeting:
    return Meeting(
        id=meeting_id,
        title=doc.title or "Untitled",
        created_at=doc.created_at or "",
        summary=summary_text(doc, panels),
        transcript=transcript_text(transcript),
    )


def build_meetings(state: CacheState) -> List[Meeting]:
    """One meeting per document, in cache order (unsorted)."""
    return [
        build_meeting(
            meeting_id,
            doc,
            transcript_for(state.transcripts.get(meeting_id)),
            state.document_panels.get(meeting_id),
        )
        for meeting_id, doc in state.documents.items()
    ]


def sort_meetings(meetings: Iterable[Meeting]) -> List[Meeting]:
    """
    Newest first. Meetings with an empty or unparseable created_at go last,
    in their original order (sorted() is stable).
    """
    def key(m: Meeting) -> tuple[int, float]:
        ts = m.timestamp
        if ts is None:
            return (1, 0.0)
        return (0, -ts)

    return sorted(meetings, key=key)


class MeetingRepository:
    """Reads a cache file on demand. Nothing is kept between loads."""

    def __init__(self, cache_path: Path | str):
        self.cache_path = Path(cache_path)

    def read(self) -> str:
        try:
            return self.cache_path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise CacheUnavailable(f"cache file not found: {self.cache_path}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise CacheUnavailable(f"cannot read {self.cache_path}: {e}") from e

    def load(self) -> List[Meeting]:
        with step(f"Reading {self.cache_path}") as result:
            raw = self.read()
            result.detail = f"{len(raw):,} chars"
        with step("Parsing cache") as result:
            state = parse_cache(raw)
            result.detail = (
                f"{len(state.documents)} documents, {len(state.transcripts)} transcripts, "
                f"{len(state.document_panels)} panel sets"
            )
        with step("Building meetings") as result:
            meetings = sort_meetings(build_meetings(state))
            result.detail = f"{sum(m.has_transcript for m in meetings)} with transcripts"
        status(f"Loaded {len(meetings)} meetings")
        return meetings
