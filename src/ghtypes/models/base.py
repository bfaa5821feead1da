"""Base model classes for the GitHub webhook schema.

This module provides GitHubModel, the base of every schema struct, and
EventPayload, the base of every webhook event payload.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict

# Event name (X-GitHub-Event header) -> payload model, filled by EventPayload subclasses
EVENT_MODELS: dict[str, type[EventPayload]] = {}


class GitHubModel(BaseModel):
    """Base class for all GitHub payload structs.

    Models are immutable value types. Unknown fields are ignored because
    GitHub adds fields to its payloads over time.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        # Fields renamed in Python (e.g. ``ref`` -> ``git_ref``) accept both names
        populate_by_name=True,
    )


class InstallationId(GitHubModel):
    """The App installation a webhook was delivered for."""

    id: int


class EventPayload(GitHubModel):
    """Base class for webhook event payloads.

    Subclasses name the event they carry with the ``github_event`` class
    variable and are registered under that name:

    Example:
        >>> class WatchEvent(EventPayload):
        ...     github_event: ClassVar[str | None] = "watch"
        ...     action: WatchAction

    Attributes:
        github_event: Value of the X-GitHub-Event header for this payload
        installation: The App installation ID, only present for GitHub App events
    """

    github_event: ClassVar[str | None] = None

    installation: InstallationId | None = None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        """Register the subclass under its event name."""
        super().__init_subclass__(**kwargs)

        event = cls.__dict__.get("github_event")
        if event is not None:
            EVENT_MODELS[event] = cls

    def installation_id(self) -> int | None:
        """Returns the installation ID for the event."""
        if self.installation is None:
            return None
        return self.installation.id
