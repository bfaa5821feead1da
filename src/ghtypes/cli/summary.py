"""Payload summary CLI command."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from ..codec import DateTime, Oid
from ..models.base import EventPayload
from ..payload import parse_event


def summarize_file(file_path: Path, event_name: str) -> None:
    """Decode a JSON payload file and print its identifiers and timestamps.

    Args:
        file_path: Path to a JSON webhook payload
        event_name: X-GitHub-Event header value for the payload
    """
    event = parse_event(event_name, file_path.read_bytes())
    summarize_event(event)


def summarize_event(event: EventPayload) -> None:
    """Print a breakdown of every identifier and timestamp in an event.

    Args:
        event: Decoded event payload
    """
    title = f"{event.github_event}: {type(event).__name__}"
    print(f"{'=' * 19} {title} {'=' * 19}")

    installation = event.installation_id()
    if installation is not None:
        print(f"installation{'.' * (42 - len(str(installation)))}{installation}")
    print()

    scalars = list(iter_scalars(event))
    print(f"{'-' * 24} Identifiers {'-' * 24}")
    for path, value in scalars:
        if isinstance(value, Oid):
            _print_line(path, str(value))
    print()

    print(f"{'-' * 24} Timestamps {'-' * 25}")
    for path, value in scalars:
        if isinstance(value, DateTime):
            _print_line(path, value.to_rfc3339())
    print()


def iter_scalars(model: BaseModel, prefix: str = "") -> Iterator[tuple[str, Oid | DateTime]]:
    """Yield (dotted path, value) for every Oid and DateTime field, depth first."""
    for name in type(model).model_fields:
        yield from _walk(getattr(model, name), f"{prefix}{name}")


def _walk(value: Any, path: str) -> Iterator[tuple[str, Oid | DateTime]]:
    if isinstance(value, (Oid, DateTime)):
        yield path, value
    elif isinstance(value, BaseModel):
        yield from iter_scalars(value, f"{path}.")
    elif isinstance(value, tuple):
        for i, item in enumerate(value):
            yield from _walk(item, f"{path}[{i}]")


def _print_line(path: str, text: str) -> None:
    dots = "." * max(1, 54 - len(path) - len(text))
    print(f"{path}{dots}{text}")
