"""Property-based tests using hypothesis."""

from __future__ import annotations

import string
from datetime import datetime, timedelta, timezone

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ghtypes import (
    DateTime,
    InvalidLength,
    Oid,
    decode_datetime,
    decode_oid,
    encode_datetime,
    encode_oid,
    identifier_from_bytes,
    identifier_from_hex,
    timestamp_from_epoch_seconds,
    timestamp_from_string,
)
from ghtypes.codec.timestamp import UNIX_EPOCH

hex_strings = st.text(alphabet=string.hexdigits, min_size=40, max_size=40)

aware_datetimes = st.datetimes(
    min_value=datetime(1, 1, 2),
    max_value=datetime(9999, 12, 30),
    timezones=st.sampled_from(
        [timezone.utc, timezone(timedelta(hours=9)), timezone(timedelta(hours=-5, minutes=-30))]
    ),
)

# Seconds covering the full representable range of years 1..9999
epoch_seconds = st.integers(min_value=-62135596800, max_value=253402300799)


class TestOidProperties:
    """Property-based tests for the identifier codec."""

    @given(raw=st.binary(min_size=20, max_size=20))
    def test_bytes_roundtrip(self, raw: bytes) -> None:
        """Test any 20 bytes round-trip."""
        assert bytes(identifier_from_bytes(raw)) == raw

    @given(text=hex_strings)
    def test_hex_roundtrip_is_lowercase(self, text: str) -> None:
        """Test hex of either case round-trips to its lowercase form."""
        assert identifier_from_hex(text).hex() == text.lower()

    @given(raw=st.binary(min_size=20, max_size=20), human_readable=st.booleans())
    def test_transport_roundtrip(self, raw: bytes, human_readable: bool) -> None:
        """Test decode(encode(x)) == x for each transport."""
        oid = Oid(raw)
        assert decode_oid(encode_oid(oid, human_readable), human_readable) == oid

    @given(a=st.binary(min_size=20, max_size=20), b=st.binary(min_size=20, max_size=20))
    def test_order_matches_bytes(self, a: bytes, b: bytes) -> None:
        """Test ordering follows the raw bytes."""
        assert (Oid(a) < Oid(b)) == (a < b)
        assert (Oid(a) == Oid(b)) == (a == b)

    @given(raw=st.binary().filter(lambda b: len(b) != 20))
    def test_wrong_length_rejected(self, raw: bytes) -> None:
        """Test every other buffer length is rejected."""
        with pytest.raises(InvalidLength):
            identifier_from_bytes(raw)


class TestDateTimeProperties:
    """Property-based tests for the timestamp codec."""

    @given(value=aware_datetimes)
    def test_string_roundtrip(self, value: datetime) -> None:
        """Test RFC 3339 formatting round-trips any aware datetime."""
        ts = DateTime(value)
        assert timestamp_from_string(encode_datetime(ts)) == ts
        assert ts.value == value

    @given(seconds=epoch_seconds)
    def test_epoch_roundtrip(self, seconds: int) -> None:
        """Test whole seconds round-trip through the instant."""
        ts = timestamp_from_epoch_seconds(seconds)
        assert ts.epoch_seconds == seconds
        assert ts.value == UNIX_EPOCH + timedelta(seconds=seconds)

    @given(seconds=epoch_seconds, human_readable=st.booleans())
    def test_both_forms_agree(self, seconds: int, human_readable: bool) -> None:
        """Test the integer and string forms decode to the same instant."""
        from_int = decode_datetime(seconds, human_readable)
        from_text = decode_datetime(encode_datetime(from_int), human_readable)
        assert from_int == from_text

    @given(a=epoch_seconds, b=epoch_seconds)
    def test_order_matches_seconds(self, a: int, b: int) -> None:
        """Test ordering follows the instant."""
        assert (timestamp_from_epoch_seconds(a) < timestamp_from_epoch_seconds(b)) == (a < b)
