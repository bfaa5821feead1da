"""End-to-end integration tests."""

from __future__ import annotations

import json
from typing import Any

import pytest

from ghtypes import (
    DateTime,
    EventType,
    Oid,
    PushEvent,
    decode,
    encode,
    parse_event,
)
from ghtypes.cli.summary import iter_scalars, summarize_event


@pytest.fixture
def deliveries(
    push_payload: dict[str, Any],
    repository_data: dict[str, Any],
    user_data: dict[str, Any],
) -> list[tuple[str, dict[str, Any]]]:
    """A stream of webhook deliveries as (X-GitHub-Event, body) pairs."""
    comment = {
        "id": 11056394,
        "url": "https://api.github.com/repos/hubot/hello-world/comments/11056394",
        "html_url": "https://github.com/hubot/hello-world/commit/6113728f#commitcomment-11056394",
        "body": "This is a really good change! :+1:",
        "user": user_data,
        "created_at": "2019-01-01T01:00:00Z",
        "updated_at": 1546304400,
        "commit_id": "6113728f27ae82c7b1a177c8d03f9e96e0adf246",
        "path": None,
        "line": None,
    }
    return [
        ("push", push_payload),
        (
            "create",
            {
                "ref_type": "tag",
                "ref": "v1.0",
                "master_branch": "main",
                "repository": repository_data,
                "sender": user_data,
            },
        ),
        (
            "commit_comment",
            {
                "action": "created",
                "comment": comment,
                "repository": repository_data,
                "sender": user_data,
            },
        ),
        ("repository", {"action": "archived", "repository": repository_data, "sender": user_data}),
        ("watch", {"action": "started", "repository": repository_data, "sender": user_data}),
    ]


class TestWebhookFlow:
    """Receive, re-encode and forward webhook deliveries."""

    def test_text_delivery(self, deliveries: list[tuple[str, dict[str, Any]]]) -> None:
        """Test each delivery decodes from its raw JSON body."""
        for event_name, body in deliveries:
            event = parse_event(event_name, json.dumps(body))
            assert type(event) is EventType.parse(event_name).payload_model
            assert event.github_event == event_name

    def test_forward_over_binary_transport(
        self, deliveries: list[tuple[str, dict[str, Any]]]
    ) -> None:
        """Test every delivery survives a binary re-encode."""
        for event_name, body in deliveries:
            event = parse_event(event_name, body)
            fields = encode(event, human_readable=False)
            forwarded = parse_event(event_name, fields, human_readable=False)  # type: ignore[arg-type]
            assert forwarded == event

    def test_forward_over_text_transport(
        self, deliveries: list[tuple[str, dict[str, Any]]]
    ) -> None:
        """Test every delivery survives a JSON re-encode."""
        for event_name, body in deliveries:
            event = parse_event(event_name, body)
            assert parse_event(event_name, encode(event)) == event

    def test_mixed_timestamp_forms_normalize(
        self, deliveries: list[tuple[str, dict[str, Any]]]
    ) -> None:
        """Test integer and string timestamps re-encode as the same string form."""
        _, body = deliveries[2]
        event = parse_event("commit_comment", body)
        data = json.loads(encode(event))  # type: ignore[arg-type]
        assert data["comment"]["updated_at"] == "2019-01-01T01:00:00Z"
        assert data["comment"]["commit_id"] == "6113728f27ae82c7b1a177c8d03f9e96e0adf246"

    def test_deduplicate_deliveries(self, push_payload_text: str) -> None:
        """Test redelivered payloads collapse in a set."""
        seen = {decode(PushEvent, push_payload_text) for _ in range(3)}
        assert len(seen) == 1


class TestSummary:
    """Test the payload summary over a decoded push."""

    def test_iter_scalars(self, push_payload_text: str) -> None:
        """Test every identifier and timestamp is found with its path."""
        event = decode(PushEvent, push_payload_text)
        scalars = dict(iter_scalars(event))

        assert scalars["before"] == Oid.ZERO
        assert scalars["commits[0].tree_id"] == Oid.EMPTY_TREE
        assert scalars["head_commit.timestamp"] == DateTime.from_string("2019-01-01T00:30:00Z")
        assert scalars["repository.created_at"] == DateTime.from_timestamp(1546300800)

    def test_summarize_event(
        self, push_payload_text: str, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test the printed breakdown."""
        summarize_event(decode(PushEvent, push_payload_text))
        out = capsys.readouterr().out

        assert "push: PushEvent" in out
        assert "Identifiers" in out
        assert "Timestamps" in out
        line = next(ln for ln in out.splitlines() if ln.startswith("repository.created_at"))
        assert line.endswith("2019-01-01T00:00:00Z")
        assert len(line) == 54
