"""Tests for the CD-Text checksum."""

from __future__ import annotations

import pytest

from ccd2cue.transform import crc16
from ccd2cue.transform.crc import P16CCITT_N


class TestCrc16:
    """Tests for crc16."""

    def test_zero_block(self) -> None:
        """Should give 0xFFFF for sixteen zero bytes."""
        assert crc16(bytes(16)) == 0xFFFF

    def test_check_value(self) -> None:
        """Should give the standard check value for "123456789"."""
        assert crc16(b"123456789") == 0xCE3C

    def test_empty_message(self) -> None:
        """Should give the complemented initial value for no data."""
        assert crc16(b"") == 0xFFFF

    def test_default_polynomial(self) -> None:
        """Should use the CCITT polynomial by default."""
        payload = bytes.fromhex("80000000546573742044697363000000")
        assert crc16(payload) == crc16(payload, P16CCITT_N)

    @pytest.mark.parametrize("bit", [0, 7, 63, 127])
    def test_single_bit_change(self, bit: int) -> None:
        """Should change when any single bit of the pack changes."""
        payload = bytearray.fromhex("80000000546573742044697363000000")
        original = crc16(bytes(payload))
        payload[bit // 8] ^= 0x80 >> (bit % 8)
        assert crc16(bytes(payload)) != original

    def test_result_in_range(self) -> None:
        """Should always return a 16 bit value."""
        for value in range(256):
            assert 0 <= crc16(bytes([value]) * 16) <= 0xFFFF
