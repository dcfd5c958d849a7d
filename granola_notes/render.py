"""
Text output for each command.

Every function returns the full text to print. The Markdown exports (dump and
context) are meant to be pasted into other tools, so they avoid the emoji
used by the interactive views.
"""

from __future__ import annotations

from typing import List, Sequence

from .config import RULE_WIDTH_DETAIL, RULE_WIDTH_LIST
from .models import Meeting
from .query import SearchHit
from .utils import format_date

TRANSCRIPT_MARK = "📝"
SUMMARY_MARK = "📋"


def _rule(width: int) -> str:
    return "─" * width


def render_list(shown: Sequence[Meeting], total: int) -> str:
    lines = ["", f"📅 Recent Meetings ({len(shown)} of {total})", "", _rule(RULE_WIDTH_LIST)]
    for m in shown:
        t = TRANSCRIPT_MARK if m.has_transcript else "  "
        s = SUMMARY_MARK if m.has_summary else "  "
        lines.append(f"{t}{s} [{m.short_id}] {format_date(m.created_at):<20} {m.title}")
    lines += [
        _rule(RULE_WIDTH_LIST),
        "",
        f"{TRANSCRIPT_MARK} = has transcript, {SUMMARY_MARK} = has summary",
        "",
    ]
    return "\n".join(lines)


def _detail(heading: str, m: Meeting, body: str, placeholder: str) -> str:
    lines = [
        "",
        heading,
        f"📅 {format_date(m.created_at)}",
        "",
        _rule(RULE_WIDTH_DETAIL),
        body or placeholder,
        "",
    ]
    return "\n".join(lines)


def render_show(m: Meeting) -> str:
    return _detail(f"# {m.title}", m, m.summary, "(No summary available)")


def render_transcript(m: Meeting) -> str:
    return _detail(f"# Transcript: {m.title}", m, m.transcript, "(No transcript available)")


def render_search(query: str, hits: Sequence[SearchHit]) -> str:
    lines = [
        "",
        f'🔍 Search results for "{query}" ({len(hits)} found)',
        "",
        _rule(RULE_WIDTH_LIST),
    ]
    for hit in hits:
        m = hit.meeting
        lines += ["", f"[{m.short_id}] 📅 {format_date(m.created_at)} - {m.title}"]
        if hit.context:
            lines.append(f"   {hit.context}")
    lines.append("")
    return "\n".join(lines)


def _meeting_section(
    m: Meeting,
    *,
    include_transcripts: bool,
    show_id: bool = False,
    note_hidden_transcript: bool = False,
) -> List[str]:
    lines = ["---", "", f"## {m.title}", f"**Date:** {format_date(m.created_at)}"]
    if show_id:
        lines.append(f"**ID:** {m.short_id}")
    lines.append("")

    if m.summary:
        lines += ["### Summary", "", m.summary, ""]

    if m.transcript:
        if include_transcripts:
            lines += ["### Transcript", "", m.transcript, ""]
        elif note_hidden_transcript:
            lines += [
                f"_Transcript available ({len(m.transcript)} chars) - use --transcripts to include_",
                "",
            ]
    return lines


def render_dump(
    shown: Sequence[Meeting],
    total: int,
    *,
    include_transcripts: bool = False,
    limited: bool = False,
    generated_at: str,
) -> str:
    count = f"Total meetings: {len(shown)}"
    if limited:
        count += f" (of {total})"
    lines = ["# Granola Meeting Notes", "", count, f"Generated: {generated_at}", ""]
    for m in shown:
        lines += _meeting_section(m, include_transcripts=include_transcripts)
    return "\n".join(lines)


def render_context(
    selected: Sequence[Meeting],
    *,
    include_transcripts: bool = False,
    generated_at: str,
) -> str:
    lines = ["# Selected Meeting Notes", "", f"Meetings: {len(selected)}", f"Generated: {generated_at}", ""]
    for m in selected:
        lines += _meeting_section(
            m,
            include_transcripts=include_transcripts,
            show_id=True,
            note_hidden_transcript=True,
        )
    return "\n".join(lines)
