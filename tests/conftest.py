"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

EXAMPLES_DIR = Path(__file__).resolve().parent.parent / "examples"


@pytest.fixture
def push_payload_text() -> str:
    """Raw JSON body of a push webhook."""
    return (EXAMPLES_DIR / "push_event.json").read_text()


@pytest.fixture
def push_payload(push_payload_text: str) -> dict[str, Any]:
    """Parsed push webhook payload."""
    return json.loads(push_payload_text)


@pytest.fixture
def user_data() -> dict[str, Any]:
    """A user as embedded in webhook payloads."""
    return {
        "login": "hubot",
        "id": 1,
        "node_id": "MDQ6VXNlcjE=",
        "avatar_url": "https://github.com/images/error/hubot_happy.gif",
        "gravatar_id": "",
        "url": "https://api.github.com/users/hubot",
        "html_url": "https://github.com/hubot",
        "followers_url": "https://api.github.com/users/hubot/followers",
        "type": "User",
        "site_admin": True,
    }


@pytest.fixture
def repository_data(user_data: dict[str, Any]) -> dict[str, Any]:
    """A repository with string timestamps, as sent by most events."""
    return {
        "id": 1296269,
        "owner": user_data,
        "name": "hello-world",
        "full_name": "hubot/hello-world",
        "description": None,
        "private": False,
        "fork": False,
        "url": "https://api.github.com/repos/hubot/hello-world",
        "html_url": "https://github.com/hubot/hello-world",
        "default_branch": "main",
        "pushed_at": "2019-01-01T00:30:00Z",
        "created_at": "2019-01-01T00:00:00Z",
        "updated_at": "2019-01-01T00:30:00Z",
    }
