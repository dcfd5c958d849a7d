from granola_notes.models import Meeting
from granola_notes.query import SearchHit
from granola_notes.render import (
    render_context,
    render_dump,
    render_list,
    render_search,
    render_show,
    render_transcript,
)

GENERATED = "2024-06-01T08:00:00.000Z"


def _meetings(n):
    return [
        Meeting(
            id=f"{i:08d}-meeting",
            title=f"Meeting {i}",
            created_at=f"2024-01-{10 - i:02d}T12:00:00Z",
            summary=f"Summary {i}" if i % 2 == 0 else "",
            transcript=f"[A]: line {i}" if i < 2 else "",
        )
        for i in range(n)
    ]


def test_render_list_shows_counts_and_markers():
    meetings = _meetings(3)
    out = render_list(meetings[:2], 3)
    assert "Recent Meetings (2 of 3)" in out
    assert "📝📋 [00000000] " in out
    assert "📝   [00000001] " in out
    assert "Meeting 2" not in out


def test_render_show_and_transcript_placeholders():
    m = Meeting(id="x", title="Empty", created_at="")
    assert "# Empty" in render_show(m)
    assert "(No summary available)" in render_show(m)
    assert "Unknown date" in render_show(m)
    assert "# Transcript: Empty" in render_transcript(m)
    assert "(No transcript available)" in render_transcript(m)


def test_render_search(utc_tz):
    m = Meeting(id="abcdef123456", title="Kickoff", created_at="2024-01-03T12:00:00Z")
    out = render_search("kick", [SearchHit(meeting=m, context="...Kickoff...")])
    assert 'Search results for "kick" (1 found)' in out
    assert "[abcdef12] 📅 Wed, Jan 3, 2024 - Kickoff" in out
    assert "   ...Kickoff..." in out


def test_render_dump_with_limit():
    meetings = _meetings(5)
    out = render_dump(meetings[:2], 5, limited=True, generated_at=GENERATED)
    assert out.count("\n## Meeting ") == 2
    assert "Total meetings: 2 (of 5)" in out
    assert f"Generated: {GENERATED}" in out
    assert "### Transcript" not in out
    assert "Transcript available" not in out


def test_render_dump_without_limit_and_with_transcripts():
    meetings = _meetings(3)
    out = render_dump(meetings, 3, include_transcripts=True, generated_at=GENERATED)
    assert "Total meetings: 3\n" in out
    assert "(of 3)" not in out
    assert out.count("### Transcript") == 2
    assert "[A]: line 0" in out


def test_render_context_notes_hidden_transcripts():
    m = Meeting(id="abcdef123456", title="Sync", created_at="", summary="S", transcript="[A]: hi")
    out = render_context([m], generated_at=GENERATED)
    assert out.startswith("# Selected Meeting Notes\n\nMeetings: 1\n")
    assert "**ID:** abcdef12" in out
    assert "### Summary\n\nS\n" in out
    assert "_Transcript available (7 chars) - use --transcripts to include_" in out

    out = render_context([m], include_transcripts=True, generated_at=GENERATED)
    assert "### Transcript\n\n[A]: hi\n" in out
    assert "Transcript available" not in out
