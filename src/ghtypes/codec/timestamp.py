"""UTC timestamps that arrive as strings or as unix seconds.

GitHub payloads are inconsistent about timestamps: most endpoints send an
RFC 3339 string, but some fields (e.g. ``repository.pushed_at`` in push
events) are integer seconds since the unix epoch. Both forms decode to the
same instant. Encoding always produces the RFC 3339 string.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from ..exceptions import MalformedInput
from .transport import validation_transport

I64_MIN = -(1 << 63)
I64_MAX = (1 << 63) - 1
U64_MAX = (1 << 64) - 1

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_RFC3339 = re.compile(
    r"(?P<year>[0-9]{4})-(?P<month>[0-9]{2})-(?P<day>[0-9]{2})"
    r"[Tt ](?P<hour>[0-9]{2}):(?P<minute>[0-9]{2}):(?P<second>[0-9]{2})"
    r"(?:\.(?P<fraction>[0-9]+))?"
    r"(?P<offset>[Zz]|[+-][0-9]{2}:?[0-9]{2})"
)


@dataclass(frozen=True, order=True, repr=False)
class DateTime:
    """A UTC datetime that can be decoded from a string or a unix timestamp.

    Equality, ordering and hashing follow the underlying instant.

    Example:
        >>> DateTime.from_timestamp(1546300800) == DateTime.from_string("2019-01-01T00:00:00Z")
        True
    """

    value: datetime

    def __post_init__(self) -> None:
        if not isinstance(self.value, datetime):
            raise MalformedInput(
                f"invalid type: {type(self.value).__name__}, expected datetime"
            )
        if self.value.utcoffset() is None:
            raise MalformedInput(f"naive datetime {self.value.isoformat()} has no UTC offset")
        try:
            utc = self.value.astimezone(timezone.utc)
        except OverflowError as err:
            raise MalformedInput(f"datetime {self.value.isoformat()} is out of range") from err
        object.__setattr__(self, "value", utc)

    @classmethod
    def now(cls) -> DateTime:
        return cls(datetime.now(timezone.utc))

    @classmethod
    def from_string(cls, text: str) -> DateTime:
        return timestamp_from_string(text)

    @classmethod
    def from_timestamp(cls, seconds: int) -> DateTime:
        return timestamp_from_epoch_seconds(seconds)

    @property
    def epoch_seconds(self) -> int:
        """Whole seconds since the unix epoch (fractions are floored)."""
        return (self.value - UNIX_EPOCH) // timedelta(seconds=1)

    def to_rfc3339(self) -> str:
        return timestamp_to_rfc3339(self)

    def __str__(self) -> str:
        return self.to_rfc3339()

    def __repr__(self) -> str:
        return f"DateTime('{self.to_rfc3339()}')"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.with_info_plain_validator_function(
            _validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                timestamp_to_rfc3339, info_arg=False, return_schema=core_schema.str_schema()
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {
            "anyOf": [
                {"type": "string", "format": "date-time"},
                {"type": "integer", "minimum": I64_MIN, "maximum": I64_MAX},
            ]
        }


def timestamp_from_string(text: str) -> DateTime:
    """Parse an RFC 3339 date-time string.

    Fractional seconds beyond microsecond precision are truncated.

    Raises:
        MalformedInput: If the string is not a valid RFC 3339 date-time
    """
    if not isinstance(text, str):
        raise MalformedInput(f"invalid type: {type(text).__name__}, expected date time string")
    match = _RFC3339.fullmatch(text)
    if match is None:
        raise MalformedInput(
            f"invalid date-time {text!r}: expected YYYY-MM-DDTHH:MM:SS[.fraction] "
            f"followed by Z or a +HH:MM offset"
        )

    try:
        fraction = (match["fraction"] or "")[:6].ljust(6, "0")
        parsed = datetime(
            int(match["year"]),
            int(match["month"]),
            int(match["day"]),
            int(match["hour"]),
            int(match["minute"]),
            int(match["second"]),
            int(fraction),
            tzinfo=_parse_offset(match["offset"]),
        )
        return DateTime(parsed.astimezone(timezone.utc))
    except (ValueError, OverflowError) as err:
        raise MalformedInput(f"invalid date-time {text!r}: {err}") from err


def _parse_offset(offset: str) -> timezone:
    if offset in ("Z", "z"):
        return timezone.utc

    sign = -1 if offset[0] == "-" else 1
    digits = offset[1:].replace(":", "")
    hours, minutes = int(digits[:2]), int(digits[2:])
    if minutes > 59:
        raise ValueError(f"offset minute must be in 0..59, got {minutes}")
    # timezone() rejects offsets of 24 hours or more
    return timezone(sign * timedelta(hours=hours, minutes=minutes))


def timestamp_from_epoch_seconds(value: int) -> DateTime:
    """Interpret an integer as whole seconds since the unix epoch (UTC).

    Unsigned 64-bit inputs are accepted when they fit in a signed 64-bit
    integer.

    Raises:
        MalformedInput: If the value is not an integer, is outside the 64-bit
            range, or does not correspond to a representable instant
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedInput(
            f"invalid type: {type(value).__name__}, expected seconds since unix epoch"
        )
    if not I64_MIN <= value <= U64_MAX:
        raise MalformedInput(f"integer {value} is out of range for a 64-bit timestamp")
    if value > I64_MAX:
        raise MalformedInput(f"unsigned integer {value} does not fit in a signed 64-bit timestamp")

    try:
        return DateTime(UNIX_EPOCH + timedelta(seconds=value))
    except OverflowError as err:
        raise MalformedInput(f"value is not a legal timestamp: {value}") from err


def timestamp_to_rfc3339(timestamp: DateTime) -> str:
    """Format as ``YYYY-MM-DDTHH:MM:SS[.fff|.ffffff]Z``."""
    dt = timestamp.value
    text = (
        f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d}"
        f"T{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}"
    )
    if dt.microsecond:
        if dt.microsecond % 1000 == 0:
            text += f".{dt.microsecond // 1000:03d}"
        else:
            text += f".{dt.microsecond:06d}"
    return text + "Z"


def decode_datetime(value: Any, human_readable: bool = True) -> DateTime:
    """Decode a timestamp from whatever shape the transport delivered.

    Human-readable transports may deliver either shape, so both are probed.
    Binary transports carry integer seconds; strings are still accepted there
    because encoding always writes the RFC 3339 form.

    Raises:
        MalformedInput: If the value has the wrong shape or does not decode
    """
    if isinstance(value, DateTime):
        return value
    if isinstance(value, datetime):
        return DateTime(value)

    is_integer = isinstance(value, int) and not isinstance(value, bool)
    if human_readable:
        if isinstance(value, str):
            return timestamp_from_string(value)
        if is_integer:
            return timestamp_from_epoch_seconds(value)
        expected = "date time string or seconds since unix epoch"
    else:
        if is_integer:
            return timestamp_from_epoch_seconds(value)
        if isinstance(value, str):
            return timestamp_from_string(value)
        expected = "seconds since unix epoch"

    raise MalformedInput(f"invalid type: {type(value).__name__}, expected {expected}")


def encode_datetime(timestamp: DateTime) -> str:
    return timestamp_to_rfc3339(timestamp)


def _validate(value: Any, info: core_schema.ValidationInfo) -> DateTime:
    return decode_datetime(value, validation_transport(info).is_human_readable)
