"""Cyclic redundancy check used by CD-Text packs."""

from __future__ import annotations

# CRC-16-CCITT, normal (MSB first) representation.
P16CCITT_N = 0x1021


def crc16(message: bytes, polynomial: int = P16CCITT_N) -> int:
    """Calculate the negated 16 bit CRC of ``message``.

    Each byte is fed most significant bit first into a zero initialized
    accumulator; the complement of the accumulator is returned. This is
    the checksum trailing every pack of a CDT file.

    Args:
    ----
        message: Bytes to checksum.
        polynomial: Generator polynomial, CCITT normal by default.

    Returns:
    -------
        The negated CRC as an integer in 0..0xFFFF.

    Examples:
    --------
        >>> hex(crc16(bytes(16)))
        '0xffff'
        >>> hex(crc16(b"123456789"))
        '0xce3c'

    """
    crc = 0
    for byte in message:
        crc ^= byte << 8
        for _ in range(8):
            crc = ((crc << 1) ^ polynomial) if crc & 0x8000 else (crc << 1)
            crc &= 0xFFFF
    return ~crc & 0xFFFF
