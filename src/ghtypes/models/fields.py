"""Field helpers for the webhook schema.

This module provides convenience functions for fields whose JSON names or
defaults need special handling.
"""

from __future__ import annotations

from typing import Any, cast

from pydantic import Field
from pydantic.fields import FieldInfo


def GitRef(**kwargs: Any) -> FieldInfo:
    """Create a field for a JSON ``ref`` member.

    The Python attribute is named ``git_ref``; payloads use ``ref``.

    Args:
        **kwargs: Additional Field() arguments (default, description, etc.)

    Example:
        >>> class DeleteEvent(EventPayload):
        ...     git_ref: str = GitRef(description="Name of the deleted branch or tag")
    """
    return cast(FieldInfo, Field(alias="ref", **kwargs))


def Paths(**kwargs: Any) -> FieldInfo:
    """Create a list-of-paths field that defaults to empty.

    Push payloads omit ``added``/``removed``/``modified`` on some commits
    (e.g. for very large pushes).

    Example:
        >>> class PushCommit(GitHubModel):
        ...     added: tuple[str, ...] = Paths()
    """
    return cast(FieldInfo, Field(default=(), **kwargs))
