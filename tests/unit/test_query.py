from granola_notes.models import Meeting
from granola_notes.query import (
    context_snippet,
    find_by_id_prefixes,
    find_by_title,
    search,
    select_recent,
)


def _meetings():
    return [
        Meeting(id="11111111-aaaa", title="Design Review", created_at="2024-03-02T10:00:00Z",
                summary="Agreed on colours."),
        Meeting(id="22222222-bbbb", title="Weekly standup", created_at="2024-03-01T10:00:00Z",
                transcript="[Ana]: Let's talk about the project deadline next week.\n[Bo]: OK"),
        Meeting(id="22223333-cccc", title="Standup notes", created_at="2024-02-28T10:00:00Z",
                summary="Deadline moved."),
    ]


def test_select_recent():
    meetings = _meetings()
    assert [m.id for m in select_recent(meetings, 2)] == ["11111111-aaaa", "22222222-bbbb"]
    assert len(select_recent(meetings, None)) == 3
    assert len(select_recent(meetings, 10)) == 3


def test_find_by_title_is_case_insensitive_and_first_wins():
    meetings = _meetings()
    assert find_by_title(meetings, "STANDUP").id == "22222222-bbbb"
    assert find_by_title(meetings, "review").id == "11111111-aaaa"
    assert find_by_title(meetings, "retro") is None
    assert find_by_title([], "anything") is None


def test_search_returns_all_matches_in_order():
    hits = search(_meetings(), "deadline")
    assert [h.meeting.id for h in hits] == ["22222222-bbbb", "22223333-cccc"]


def test_search_context_is_bounded_and_flattened():
    query = "deadline"
    [hit, _] = search(_meetings(), query)
    assert "deadline" in hit.context
    assert "\n" not in hit.context
    assert hit.context.startswith("...") and hit.context.endswith("...")
    assert len(hit.context) - 6 <= 100 + len(query)


def test_search_matches_title():
    [hit] = search(_meetings(), "design")
    assert hit.context.startswith("...Design Review")


def test_context_snippet_clamps_to_text_bounds():
    text = "x" * 80 + "NEEDLE" + "y" * 80
    snippet = context_snippet(text, "needle")
    assert snippet == "..." + "x" * 50 + "NEEDLE" + "y" * 50 + "..."
    assert context_snippet("short needle", "needle") == "...short needle..."
    assert context_snippet("nothing here", "needle") == ""


def test_find_by_id_prefixes():
    meetings = _meetings()
    selected, missing = find_by_id_prefixes(meetings, ["2222", "deadbeef", "11111111-aaaa"])
    assert [m.id for m in selected] == ["22222222-bbbb", "11111111-aaaa"]
    assert missing == ["deadbeef"]


def test_find_by_id_prefixes_is_case_sensitive():
    selected, missing = find_by_id_prefixes(_meetings(), ["11111111-AAAA"])
    assert selected == []
    assert missing == ["11111111-AAAA"]
