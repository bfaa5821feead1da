"""Payload decoder for GitHub webhook models.

This module provides the decode() function that turns a wire payload into a
schema model, and parse_event() which picks the model from the event name.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from ..codec.transport import Transport
from ..exceptions import MalformedInput
from ..models.base import EventPayload
from ..models.events import EventType

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


def decode(
    model_class: type[T],
    data: str | bytes | bytearray | Mapping[str, Any],
    human_readable: bool = True,
) -> T:
    """Decode a wire payload into a model.

    In a human-readable transport, ``data`` is JSON text (str or bytes) or an
    already-parsed JSON mapping. In a binary transport, ``data`` is a mapping
    of native values as produced by the binary decoder: identifiers as raw
    20-byte buffers and timestamps as integer seconds.

    Args:
        model_class: Model class to decode to
        data: Payload to decode
        human_readable: Whether the payload came from a text transport

    Returns:
        Decoded model instance

    Raises:
        MalformedInput: If any field is missing, has the wrong shape, or holds
            a malformed identifier or timestamp

    Example:
        ```python
        from ghtypes import PushEvent, decode

        event = decode(PushEvent, request_body)
        if event.is_branch_deleted():
            ...
        ```
    """
    transport = Transport.from_flag(human_readable)

    try:
        if isinstance(data, Mapping):
            decoded = model_class.model_validate(data, context=transport.context())
        elif transport.is_human_readable and isinstance(data, (str, bytes, bytearray)):
            decoded = model_class.model_validate_json(data, context=transport.context())
        else:
            raise MalformedInput(
                f"Cannot decode {model_class.__name__} from {type(data).__name__} "
                f"over a {transport.value} transport"
            )
    except ValidationError as e:
        raise MalformedInput(f"Failed to decode {model_class.__name__}: {e}") from e

    logger.debug("Decoded %s from %s transport", model_class.__name__, transport.value)
    return decoded


def parse_event(
    event_name: str,
    data: str | bytes | bytearray | Mapping[str, Any],
    human_readable: bool = True,
) -> EventPayload:
    """Decode a webhook payload given its X-GitHub-Event header value.

    Raises:
        UnknownEvent: If the event name has no payload model
        MalformedInput: If the payload does not decode
    """
    event_type = EventType.parse(event_name)
    return decode(event_type.payload_model, data, human_readable=human_readable)
