"""Scalar codecs for ghtypes.

This module provides the two custom scalar types embedded in the webhook
schema: git object IDs and UTC timestamps, each with a human-readable and a
binary wire form.
"""

from __future__ import annotations

from .oid import (
    Oid,
    decode_oid,
    encode_oid,
    identifier_from_bytes,
    identifier_from_hex,
    identifier_to_bytes,
    identifier_to_hex,
)
from .timestamp import (
    DateTime,
    decode_datetime,
    encode_datetime,
    timestamp_from_epoch_seconds,
    timestamp_from_string,
    timestamp_to_rfc3339,
)
from .transport import Transport

__all__ = [
    "Oid",
    "identifier_from_hex",
    "identifier_from_bytes",
    "identifier_to_hex",
    "identifier_to_bytes",
    "decode_oid",
    "encode_oid",
    "DateTime",
    "timestamp_from_string",
    "timestamp_from_epoch_seconds",
    "timestamp_to_rfc3339",
    "decode_datetime",
    "encode_datetime",
    "Transport",
]
