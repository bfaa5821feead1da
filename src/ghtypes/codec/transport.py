"""Transport selection for the scalar codecs.

The same logical value is written differently depending on whether the
transport is human-readable (JSON text) or binary. The choice travels through
the pydantic validation and serialization ``context`` under the
``human_readable`` key and defaults to human-readable.
"""

from __future__ import annotations

import enum
from typing import Any

HUMAN_READABLE_KEY = "human_readable"


class Transport(enum.Enum):
    """Kind of transport a payload is read from or written to."""

    HUMAN_READABLE = "human_readable"
    BINARY = "binary"

    @property
    def is_human_readable(self) -> bool:
        return self is Transport.HUMAN_READABLE

    @classmethod
    def from_flag(cls, human_readable: bool) -> Transport:
        return cls.HUMAN_READABLE if human_readable else cls.BINARY

    def context(self) -> dict[str, Any]:
        """Build the pydantic context dict that carries this transport."""
        return {HUMAN_READABLE_KEY: self.is_human_readable}


def is_human_readable(context: Any) -> bool:
    """Read the transport flag from a pydantic context, if any."""
    if isinstance(context, dict):
        return bool(context.get(HUMAN_READABLE_KEY, True))
    return True


def validation_transport(info: Any) -> Transport:
    """Transport for a validator call.

    JSON input is text by definition, so ``model_validate_json`` is always
    human-readable.
    """
    if getattr(info, "mode", "python") == "json":
        return Transport.HUMAN_READABLE
    return Transport.from_flag(is_human_readable(getattr(info, "context", None)))


def serialization_transport(info: Any) -> Transport:
    """Transport for a serializer call.

    JSON output cannot carry raw bytes, so JSON mode is always human-readable.
    """
    if info.mode_is_json():
        return Transport.HUMAN_READABLE
    return Transport.from_flag(is_human_readable(getattr(info, "context", None)))
