"""ghtypes: Typed GitHub Webhook Payloads

A Python library of pydantic models for GitHub webhook and REST payloads,
built around two scalar codecs whose wire form depends on the transport:

- Oid: a 20-byte git object ID, hex text in JSON and raw bytes in binary
  transports
- DateTime: a UTC timestamp that arrives either as an RFC 3339 string or as
  integer seconds since the unix epoch

Quick Start:
    >>> from ghtypes import Oid, PushEvent, decode
    >>>
    >>> event = decode(PushEvent, request_body)
    >>> event.before == Oid.ZERO
    True
    >>> event.repository.pushed_at
    DateTime('2019-01-01T00:00:00Z')
"""

from __future__ import annotations

from .codec import (
    DateTime,
    Oid,
    Transport,
    decode_datetime,
    decode_oid,
    encode_datetime,
    encode_oid,
    identifier_from_bytes,
    identifier_from_hex,
    identifier_to_bytes,
    identifier_to_hex,
    timestamp_from_epoch_seconds,
    timestamp_from_string,
    timestamp_to_rfc3339,
)
from .exceptions import (
    GhTypesError,
    InvalidCharacter,
    InvalidLength,
    MalformedInput,
    UnknownEvent,
)
from .models import (
    CommitCommentEvent,
    CreateEvent,
    DeleteEvent,
    EventPayload,
    EventType,
    GitHubModel,
    GollumEvent,
    PingEvent,
    PullRequestEvent,
    PushEvent,
    Repository,
    RepositoryEvent,
    User,
    WatchEvent,
)
from .payload import decode, encode, parse_event

__version__ = "0.1.0"

__all__ = [
    # Scalar types
    "Oid",
    "DateTime",
    "Transport",
    # Identifier codec
    "identifier_from_hex",
    "identifier_from_bytes",
    "identifier_to_hex",
    "identifier_to_bytes",
    "decode_oid",
    "encode_oid",
    # Timestamp codec
    "timestamp_from_string",
    "timestamp_from_epoch_seconds",
    "timestamp_to_rfc3339",
    "decode_datetime",
    "encode_datetime",
    # Payloads
    "decode",
    "encode",
    "parse_event",
    # Models
    "GitHubModel",
    "EventPayload",
    "EventType",
    "User",
    "Repository",
    "PingEvent",
    "PushEvent",
    "CreateEvent",
    "DeleteEvent",
    "GollumEvent",
    "CommitCommentEvent",
    "PullRequestEvent",
    "RepositoryEvent",
    "WatchEvent",
    # Exceptions
    "GhTypesError",
    "MalformedInput",
    "InvalidLength",
    "InvalidCharacter",
    "UnknownEvent",
    # Version
    "__version__",
]
