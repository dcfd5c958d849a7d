import json
import os
import time

import pytest


def make_cache_text(state):
    """Wrap a state dict the way Granola does: JSON inside a JSON string."""
    return json.dumps({"cache": json.dumps({"state": state})})


@pytest.fixture
def sample_state():
    return {
        "documents": {
            "aaaaaaaa-1111": {
                "title": "Weekly Standup",
                "created_at": "2024-01-02T12:00:00Z",
                "notes_markdown": "  Discussed the release plan.\n",
            },
            "bbbbbbbb-2222": {
                "title": "Project Kickoff",
                "created_at": "2024-01-03T12:00:00Z",
            },
            "cccccccc-3333": {
                "created_at": "",
            },
        },
        "transcripts": {
            "bbbbbbbb-2222": {
                "transcript": [
                    {"speaker": "Ana", "text": "We need to agree on the project deadline next week."},
                    {"text": "Sounds good."},
                ]
            },
        },
        "documentPanels": {
            "bbbbbbbb-2222": {
                "panel-1": {
                    "content": {
                        "type": "doc",
                        "content": [
                            {"type": "heading", "content": [{"type": "text", "text": "Goals"}]},
                            {"type": "paragraph", "content": [{"type": "text", "text": "Ship v1."}]},
                        ],
                    }
                }
            },
        },
    }


@pytest.fixture
def write_cache(tmp_path):
    def _write(state, name="cache-v3.json"):
        path = tmp_path / name
        path.write_text(make_cache_text(state), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def cache_file(write_cache, sample_state):
    return write_cache(sample_state)


@pytest.fixture
def utc_tz():
    """Run with the local timezone set to UTC so rendered dates are stable."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    old = os.environ.get("TZ")
    os.environ["TZ"] = "UTC"
    time.tzset()
    yield
    if old is None:
        del os.environ["TZ"]
    else:
        os.environ["TZ"] = old
    time.tzset()
