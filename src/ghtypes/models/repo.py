"""Repositories, pull requests and the structs they embed."""

from __future__ import annotations

from ..codec import DateTime, Oid
from .base import GitHubModel
from .fields import GitRef
from .user import User


class ShortRepo(GitHubModel):
    id: int
    name: str
    full_name: str
    private: bool


class Repository(GitHubModel):
    """A repository.

    Timestamps are strings on most endpoints, but push payloads send
    ``created_at`` and ``pushed_at`` as unix seconds.
    """

    id: int
    node_id: str | None = None
    owner: User
    name: str
    full_name: str
    description: str | None = None
    private: bool
    fork: bool
    url: str
    html_url: str
    clone_url: str | None = None
    git_url: str | None = None
    ssh_url: str | None = None
    homepage: str | None = None
    language: str | None = None
    forks_count: int = 0
    stargazers_count: int = 0
    watchers_count: int = 0
    size: int = 0
    default_branch: str
    open_issues_count: int = 0
    has_issues: bool = True
    has_wiki: bool = True
    has_pages: bool = False
    has_downloads: bool = True
    archived: bool = False
    # Null for a repository that has never been pushed to
    pushed_at: DateTime | None = None
    created_at: DateTime
    updated_at: DateTime


class Label(GitHubModel):
    url: str
    name: str
    color: str


class Comment(GitHubModel):
    """An issue, commit or review comment."""

    id: int
    url: str
    html_url: str
    body: str
    user: User
    created_at: DateTime
    updated_at: DateTime
    # Only set on commit comments
    commit_id: Oid | None = None
    path: str | None = None
    line: int | None = None


class ShortCommit(GitHubModel):
    """The head or base of a pull request."""

    label: str
    git_ref: str = GitRef()
    sha: Oid
    user: User


class PullRequest(GitHubModel):
    id: int
    url: str
    html_url: str
    diff_url: str
    patch_url: str
    number: int
    state: str
    title: str
    body: str | None = None
    created_at: DateTime
    updated_at: DateTime
    closed_at: DateTime | None = None
    merged_at: DateTime | None = None
    head: ShortCommit
    base: ShortCommit
    user: User
    assignee: User | None = None
    assignees: tuple[User, ...] = ()
    merge_commit_sha: Oid | None = None
    merged: bool = False
    mergeable: bool | None = None
    merged_by: User | None = None
    comments: int | None = None
    commits: int | None = None
    additions: int | None = None
    deletions: int | None = None
    changed_files: int | None = None
    labels: tuple[Label, ...] = ()

    @property
    def is_merged(self) -> bool:
        return self.merged or self.merged_at is not None
