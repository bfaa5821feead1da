"""Transport-aware payload encoding and decoding.

This module converts between wire payloads and the schema models, passing
the human-readable/binary transport flag down to the scalar codecs.
"""

from __future__ import annotations

from .decoder import decode, parse_event
from .encoder import encode

__all__ = [
    "encode",
    "decode",
    "parse_event",
]
