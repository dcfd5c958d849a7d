"""
Data models for the Granola cache and the meetings built from it.

The cache is a loosely-typed JSON blob written by another application. The
pydantic models below describe the parts of it we read; everything else is
ignored. Once a cache validates, the rest of the package only sees `Meeting`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .utils import parse_timestamp, short_id


class _CacheModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class RawDocument(_CacheModel):
    """One entry of state.documents."""
    title: Optional[str] = None
    created_at: Optional[str] = None
    notes_markdown: Optional[str] = None


class RawUtterance(_CacheModel):
    speaker: Optional[str] = None
    text: Optional[str] = None


class RawTranscript(_CacheModel):
    """One entry of state.transcripts, when it is an object."""
    transcript: Optional[List[RawUtterance]] = None


class RawPanel(_CacheModel):
    """One panel of state.documentPanels[meeting_id]; content is a rich-document tree."""
    content: Any = None


class CacheState(_CacheModel):
    documents: Dict[str, RawDocument] = Field(default_factory=dict)
    # Entries come in more than one shape; see repository.transcript_for().
    transcripts: Dict[str, Any] = Field(default_factory=dict)
    document_panels: Dict[str, Optional[Dict[str, Optional[RawPanel]]]] = Field(
        default_factory=dict, alias="documentPanels"
    )

    @field_validator("documents", "transcripts", "document_panels", mode="before")
    @classmethod
    def _null_is_empty(cls, value: Any) -> Any:
        return {} if value is None else value


class InnerCache(_CacheModel):
    """The JSON document stored as a string in the envelope's `cache` field."""
    state: CacheState


class CacheEnvelope(_CacheModel):
    cache: str


@dataclass(frozen=True)
class Meeting:
    id: str
    title: str
    created_at: str
    summary: str = ""
    transcript: str = ""

    @property
    def short_id(self) -> str:
        return short_id(self.id)

    @property
    def has_summary(self) -> bool:
        return bool(self.summary)

    @property
    def has_transcript(self) -> bool:
        return bool(self.transcript)

    @property
    def timestamp(self) -> float | None:
        return parse_timestamp(self.created_at)

    @property
    def search_text(self) -> str:
        return f"{self.title} {self.summary} {self.transcript}"
