"""GitHub users and organizations."""

from __future__ import annotations

import enum

from pydantic import Field

from .base import GitHubModel


class UserType(enum.Enum):
    USER = "User"
    ORGANIZATION = "Organization"
    BOT = "Bot"


class User(GitHubModel):
    """A user, organization or bot account as embedded in payloads."""

    login: str
    id: int
    node_id: str | None = None
    avatar_url: str
    gravatar_id: str = ""
    url: str
    html_url: str
    type: UserType = Field(default=UserType.USER)
    site_admin: bool = False
