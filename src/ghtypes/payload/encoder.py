"""Payload encoder for GitHub webhook models.

This module provides the encode() function that writes a model out in the
representation of the target transport.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel

from ..codec.transport import Transport

logger = logging.getLogger(__name__)


def encode(model: BaseModel, human_readable: bool = True) -> str | dict[str, Any]:
    """Encode a model for a transport.

    Human-readable transports get JSON text with hex identifiers. Binary
    transports get a mapping of Python values with identifiers as raw 20-byte
    buffers, ready to hand to a binary serializer. Field names use their
    payload spelling (``ref``, not ``git_ref``). Timestamps are RFC 3339
    strings in both cases.

    Example:
        ```python
        text = encode(event)
        fields = encode(event, human_readable=False)
        assert decode(PushEvent, fields, human_readable=False) == event
        ```
    """
    transport = Transport.from_flag(human_readable)
    logger.debug("Encoding %s for %s transport", type(model).__name__, transport.value)

    if transport.is_human_readable:
        return model.model_dump_json(by_alias=True, context=transport.context())
    return model.model_dump(mode="python", by_alias=True, context=transport.context())
