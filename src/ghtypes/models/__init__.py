"""Pydantic models for GitHub webhook payloads.

This module provides the schema structs that embed the Oid and DateTime
scalar types as fields.
"""

from __future__ import annotations

from .base import EVENT_MODELS, EventPayload, GitHubModel, InstallationId
from .events import (
    AppHook,
    CommitCommentEvent,
    CreateEvent,
    CreateRefType,
    DeleteEvent,
    DeleteRefType,
    EventType,
    GollumEvent,
    Hook,
    HookConfig,
    PageEvent,
    PingEvent,
    PullRequestAction,
    PullRequestEvent,
    PushAuthor,
    PushCommit,
    Pusher,
    PushEvent,
    RepoHook,
    RepositoryAction,
    RepositoryEvent,
    WatchEvent,
)
from .fields import GitRef, Paths
from .repo import Comment, Label, PullRequest, Repository, ShortCommit, ShortRepo
from .user import User, UserType

__all__ = [
    # Bases
    "GitHubModel",
    "EventPayload",
    "InstallationId",
    "EVENT_MODELS",
    # Field helpers
    "GitRef",
    "Paths",
    # Structs
    "User",
    "UserType",
    "ShortRepo",
    "Repository",
    "Label",
    "Comment",
    "ShortCommit",
    "PullRequest",
    # Events
    "EventType",
    "HookConfig",
    "RepoHook",
    "AppHook",
    "Hook",
    "PingEvent",
    "Pusher",
    "PushAuthor",
    "PushCommit",
    "PushEvent",
    "CreateRefType",
    "CreateEvent",
    "DeleteRefType",
    "DeleteEvent",
    "PageEvent",
    "GollumEvent",
    "CommitCommentEvent",
    "PullRequestAction",
    "PullRequestEvent",
    "RepositoryAction",
    "RepositoryEvent",
    "WatchEvent",
]
