"""Models for CD-Text (CDT) data."""

from __future__ import annotations

from dataclasses import dataclass, field

from ccd2cue.models.ccd import CDTEXT_PAYLOAD_SIZE


@dataclass(frozen=True)
class CdtRecord:
    """A CD-Text pack followed by its checksum.

    Attributes
    ----------
        payload: The 16 raw pack bytes.
        crc: Negated CRC-16/CCITT of ``payload``.

    """

    payload: bytes
    crc: int

    def __post_init__(self) -> None:
        if len(self.payload) != CDTEXT_PAYLOAD_SIZE:
            raise ValueError(
                f"CD-Text payload must be {CDTEXT_PAYLOAD_SIZE} bytes, got {len(self.payload)}"
            )
        if not 0 <= self.crc <= 0xFFFF:
            raise ValueError(f"CRC out of 16-bit range: {self.crc:#x}")

    @property
    def crc_bytes(self) -> bytes:
        """Checksum trailer, most significant byte first."""
        return self.crc.to_bytes(2, "big")


@dataclass(frozen=True)
class CdtData:
    """Ordered CD-Text records ready to be written to a CDT file."""

    records: tuple[CdtRecord, ...] = field(default_factory=tuple)

    @property
    def entries(self) -> int:
        return len(self.records)
