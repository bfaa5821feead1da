"""Git object identifiers.

An object ID is a 20-byte SHA-1. Human-readable transports (JSON) carry it as
40 hex characters, binary transports as the raw 20 bytes. Both forms decode
to the same value.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Any, ClassVar

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from ..exceptions import InvalidCharacter, InvalidLength, MalformedInput
from .transport import Transport, serialization_transport, validation_transport

OID_SIZE = 20
HEX_LENGTH = OID_SIZE * 2

_HEX_DIGITS = frozenset(string.hexdigits)


@dataclass(frozen=True, order=True, repr=False)
class Oid:
    """A git object ID (i.e., a SHA-1).

    Ordering is byte-lexicographic. Instances are immutable and hashable; a
    changed identifier is a new value.

    Example:
        >>> oid = Oid.from_hex("4b825dc642cb6eb9a060e54bf8d69288fbee4904")
        >>> oid == Oid.EMPTY_TREE
        True
        >>> format(oid, "X")
        '4B825DC642CB6EB9A060E54BF8D69288FBEE4904'
    """

    raw: bytes

    ZERO: ClassVar[Oid]
    EMPTY_TREE: ClassVar[Oid]

    def __post_init__(self) -> None:
        if not isinstance(self.raw, (bytes, bytearray, memoryview)):
            raise MalformedInput(
                f"invalid type: {type(self.raw).__name__}, expected {OID_SIZE} bytes"
            )
        raw = bytes(self.raw)
        if len(raw) != OID_SIZE:
            raise InvalidLength(
                f"invalid length {len(raw)}, expected {OID_SIZE} bytes",
                len(raw),
                OID_SIZE,
            )
        object.__setattr__(self, "raw", raw)

    @classmethod
    def from_hex(cls, text: str) -> Oid:
        return identifier_from_hex(text)

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview) -> Oid:
        return identifier_from_bytes(data)

    @classmethod
    def default(cls) -> Oid:
        """The default identifier is the zero sha."""
        return cls.ZERO

    @property
    def is_zero(self) -> bool:
        return self.raw == bytes(OID_SIZE)

    def hex(self) -> str:
        return self.raw.hex()

    def upper_hex(self) -> str:
        return self.raw.hex().upper()

    def __bytes__(self) -> bytes:
        return self.raw

    def __str__(self) -> str:
        return self.hex()

    def __repr__(self) -> str:
        return f"Oid('{self.hex()}')"

    def __format__(self, format_spec: str) -> str:
        if format_spec == "X":
            return self.upper_hex()
        if format_spec in ("", "x"):
            return self.hex()
        return format(self.hex(), format_spec)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.with_info_plain_validator_function(
            _validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                _serialize, info_arg=True
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {
            "type": "string",
            "minLength": HEX_LENGTH,
            "maxLength": HEX_LENGTH,
            "pattern": f"^[0-9a-fA-F]{{{HEX_LENGTH}}}$",
        }


# The empty tree sha. Computed with `git hash-object -t tree /dev/null`.
Oid.EMPTY_TREE = Oid(bytes.fromhex("4b825dc642cb6eb9a060e54bf8d69288fbee4904"))

# A sha of all zeros. Indicates that a branch is either created or deleted.
Oid.ZERO = Oid(bytes(OID_SIZE))


def identifier_from_hex(text: str) -> Oid:
    """Decode a 40 character hex string (either case).

    Raises:
        InvalidLength: If the string has an odd length or is not 40 characters
        InvalidCharacter: If a character is not a hex digit
    """
    if not isinstance(text, str):
        raise MalformedInput(
            f"invalid type: {type(text).__name__}, expected hex string"
        )
    length = len(text)
    if length % 2 != 0:
        raise InvalidLength(
            f"invalid length {length}, expected hex string with an even length",
            length,
        )
    if length != HEX_LENGTH:
        raise InvalidLength(
            f"invalid length {length}, expected hex string with a valid length "
            f"({HEX_LENGTH} characters)",
            length,
            HEX_LENGTH,
        )
    for index, char in enumerate(text):
        if char not in _HEX_DIGITS:
            raise InvalidCharacter(
                f"invalid value: character {char!r} at index {index}, "
                f"expected string with only hexadecimal characters",
                char,
                index,
            )
    return Oid(bytes.fromhex(text))


def identifier_from_bytes(data: bytes | bytearray | memoryview) -> Oid:
    """Decode exactly 20 raw bytes.

    Raises:
        MalformedInput: If the value is not bytes-like
        InvalidLength: If the buffer is not 20 bytes long
    """
    return Oid(data)


def identifier_to_hex(oid: Oid, upper: bool = False) -> str:
    return oid.upper_hex() if upper else oid.hex()


def identifier_to_bytes(oid: Oid) -> bytes:
    return oid.raw


def decode_oid(value: Any, human_readable: bool = True) -> Oid:
    """Decode an identifier from whatever shape the transport delivered.

    Strings take the hex path and bytes-like values the binary path, whichever
    transport is in use; the flag only decides how identifiers are written.

    Raises:
        MalformedInput: If the value has the wrong shape, length or characters
    """
    if isinstance(value, Oid):
        return value
    if isinstance(value, str):
        return identifier_from_hex(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return identifier_from_bytes(value)
    if human_readable:
        expected = f"hex string or {OID_SIZE} bytes"
    else:
        expected = f"{OID_SIZE} bytes or hex string"
    raise MalformedInput(f"invalid type: {type(value).__name__}, expected {expected}")


def encode_oid(oid: Oid, human_readable: bool = True) -> str | bytes:
    """Hex string for human-readable transports, raw bytes for binary ones."""
    if human_readable:
        return oid.hex()
    return oid.raw


def _validate(value: Any, info: core_schema.ValidationInfo) -> Oid:
    return decode_oid(value, validation_transport(info).is_human_readable)


def _serialize(oid: Oid, info: core_schema.SerializationInfo) -> str | bytes:
    return encode_oid(oid, serialization_transport(info) is Transport.HUMAN_READABLE)
