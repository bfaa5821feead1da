"""Webhook event payloads.

Each payload model is registered under the X-GitHub-Event header value it is
delivered with. See: https://docs.github.com/en/webhooks/webhook-events-and-payloads
"""

from __future__ import annotations

import enum
from typing import Annotated, ClassVar, Literal, Union

from pydantic import Field

from ..codec import DateTime, Oid
from ..exceptions import UnknownEvent
from .base import EVENT_MODELS, EventPayload, GitHubModel
from .fields import GitRef, Paths
from .repo import Comment, PullRequest, Repository
from .user import User


class EventType(enum.Enum):
    """Modeled values of the X-GitHub-Event header."""

    PING = "ping"
    PUSH = "push"
    CREATE = "create"
    DELETE = "delete"
    GOLLUM = "gollum"
    COMMIT_COMMENT = "commit_comment"
    PULL_REQUEST = "pull_request"
    REPOSITORY = "repository"
    WATCH = "watch"

    @classmethod
    def parse(cls, name: str) -> EventType:
        """Look up an event by header value.

        Raises:
            UnknownEvent: If no payload model exists for the name
        """
        try:
            return cls(name)
        except ValueError as err:
            raise UnknownEvent(f"invalid GitHub event: {name!r}") from err

    @property
    def payload_model(self) -> type[EventPayload]:
        return EVENT_MODELS[self.value]

    def __str__(self) -> str:
        return self.value


class HookConfig(GitHubModel):
    content_type: str | None = None
    insecure_ssl: str | None = None
    secret: str | None = None
    url: str


class RepoHook(GitHubModel):
    type: Literal["Repository"]
    id: int
    name: str
    active: bool
    events: tuple[str, ...]
    config: HookConfig
    updated_at: DateTime
    created_at: DateTime
    url: str
    test_url: str
    ping_url: str


class AppHook(GitHubModel):
    type: Literal["App"]
    id: int
    name: str
    active: bool
    events: tuple[str, ...]
    config: HookConfig
    updated_at: DateTime
    created_at: DateTime
    app_id: int


Hook = Annotated[Union[RepoHook, AppHook], Field(discriminator="type")]


class PingEvent(EventPayload):
    """Sent when a webhook is added."""

    github_event: ClassVar[str | None] = "ping"

    zen: str
    hook_id: int
    hook: Hook
    repository: Repository | None = None
    sender: User | None = None


class Pusher(GitHubModel):
    name: str
    email: str | None = None


class PushAuthor(GitHubModel):
    name: str
    email: str | None = None
    username: str | None = None


class PushCommit(GitHubModel):
    id: Oid
    tree_id: Oid
    distinct: bool
    message: str
    timestamp: DateTime
    url: str
    author: PushAuthor
    committer: PushAuthor
    added: tuple[str, ...] = Paths()
    removed: tuple[str, ...] = Paths()
    modified: tuple[str, ...] = Paths()


class PushEvent(EventPayload):
    """Any git push to a repository, including editing tags or branches.

    ``before`` is the zero sha when the ref was created and ``after`` is the
    zero sha when it was deleted.
    """

    github_event: ClassVar[str | None] = "push"

    git_ref: str = GitRef(description="The full git ref that was pushed")
    before: Oid
    after: Oid
    created: bool = False
    deleted: bool = False
    forced: bool = False
    base_ref: str | None = None
    compare: str
    commits: tuple[PushCommit, ...] = ()
    head_commit: PushCommit | None = None
    repository: Repository
    pusher: Pusher
    sender: User

    def is_branch_created(self) -> bool:
        return self.before.is_zero

    def is_branch_deleted(self) -> bool:
        return self.after.is_zero

    @property
    def branch(self) -> str | None:
        """Short branch name, or None if a tag was pushed."""
        prefix = "refs/heads/"
        if self.git_ref.startswith(prefix):
            return self.git_ref[len(prefix) :]
        return None


class CreateRefType(enum.Enum):
    REPOSITORY = "repository"
    BRANCH = "branch"
    TAG = "tag"


class CreateEvent(EventPayload):
    """Any time a branch or tag is created."""

    github_event: ClassVar[str | None] = "create"

    ref_type: CreateRefType
    git_ref: str | None = GitRef(default=None)
    master_branch: str
    description: str | None = None
    repository: Repository
    sender: User


class DeleteRefType(enum.Enum):
    BRANCH = "branch"
    TAG = "tag"


class DeleteEvent(EventPayload):
    """Any time a branch or tag is deleted."""

    github_event: ClassVar[str | None] = "delete"

    ref_type: DeleteRefType
    git_ref: str = GitRef()
    repository: Repository
    sender: User


class PageAction(enum.Enum):
    CREATED = "created"
    EDITED = "edited"


class PageEvent(GitHubModel):
    page_name: str
    title: str
    summary: str | None = None
    action: PageAction
    sha: Oid
    html_url: str


class GollumEvent(EventPayload):
    """Any time a wiki page is updated."""

    github_event: ClassVar[str | None] = "gollum"

    pages: tuple[PageEvent, ...]
    repository: Repository
    sender: User


class CommitCommentAction(enum.Enum):
    CREATED = "created"


class CommitCommentEvent(EventPayload):
    github_event: ClassVar[str | None] = "commit_comment"

    action: CommitCommentAction
    comment: Comment
    repository: Repository
    sender: User


class PullRequestAction(enum.Enum):
    ASSIGNED = "assigned"
    UNASSIGNED = "unassigned"
    REVIEW_REQUESTED = "review_requested"
    REVIEW_REQUEST_REMOVED = "review_request_removed"
    LABELED = "labeled"
    UNLABELED = "unlabeled"
    OPENED = "opened"
    EDITED = "edited"
    CLOSED = "closed"
    READY_FOR_REVIEW = "ready_for_review"
    LOCKED = "locked"
    UNLOCKED = "unlocked"
    REOPENED = "reopened"
    SYNCHRONIZE = "synchronize"


class PullRequestEvent(EventPayload):
    github_event: ClassVar[str | None] = "pull_request"

    action: PullRequestAction
    number: int
    pull_request: PullRequest
    repository: Repository
    sender: User


class RepositoryAction(enum.Enum):
    CREATED = "created"
    DELETED = "deleted"
    ARCHIVED = "archived"
    UNARCHIVED = "unarchived"
    PUBLICIZED = "publicized"
    PRIVATIZED = "privatized"


class RepositoryEvent(EventPayload):
    github_event: ClassVar[str | None] = "repository"

    action: RepositoryAction
    repository: Repository
    sender: User


class WatchAction(enum.Enum):
    STARTED = "started"


class WatchEvent(EventPayload):
    """Any time a user stars a repository."""

    github_event: ClassVar[str | None] = "watch"

    action: WatchAction
    repository: Repository
    sender: User
