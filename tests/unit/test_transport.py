"""Unit tests for transport selection."""

from __future__ import annotations

import pytest

from ghtypes import Transport
from ghtypes.codec.transport import is_human_readable


class TestTransport:
    """Test the transport flag."""

    @pytest.mark.parametrize(
        ("flag", "expected"),
        [(True, Transport.HUMAN_READABLE), (False, Transport.BINARY)],
    )
    def test_from_flag(self, flag: bool, expected: Transport) -> None:
        """Test the boolean flag maps to a transport."""
        assert Transport.from_flag(flag) is expected
        assert expected.is_human_readable is flag

    def test_context(self) -> None:
        """Test the pydantic context carries the flag."""
        assert Transport.BINARY.context() == {"human_readable": False}
        assert Transport.HUMAN_READABLE.context() == {"human_readable": True}

    @pytest.mark.parametrize(
        ("context", "expected"),
        [
            (None, True),
            ({}, True),
            ({"human_readable": False}, False),
            ({"human_readable": True, "other": 1}, True),
            ("not a dict", True),
        ],
    )
    def test_read_context(self, context: object, expected: bool) -> None:
        """Test a missing or foreign context defaults to human-readable."""
        assert is_human_readable(context) is expected
