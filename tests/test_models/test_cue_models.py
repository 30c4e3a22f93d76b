"""Tests for the CUE sheet and CDT models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from ccd2cue.models import (
    CdtData,
    CdtRecord,
    CueFile,
    CueSheet,
    CueTime,
    CueTrack,
    DataType,
    FileType,
)


class TestCueTime:
    """Tests for CueTime model."""

    def test_str(self) -> None:
        """Should format as mm:ss:ff."""
        assert str(CueTime(minutes=1, seconds=2, frames=74)) == "01:02:74"

    def test_minutes_not_limited_to_two_digits(self) -> None:
        """Should accept and print minutes beyond 99."""
        assert str(CueTime(minutes=120, seconds=0, frames=0)) == "120:00:00"

    @pytest.mark.parametrize(
        ("minutes", "seconds", "frames"),
        [(-1, 0, 0), (0, 60, 0), (0, 0, 75), (0, -1, 0)],
    )
    def test_out_of_range(self, minutes: int, seconds: int, frames: int) -> None:
        """Should reject out of range components."""
        with pytest.raises(ValidationError):
            CueTime(minutes=minutes, seconds=seconds, frames=frames)

    def test_frozen(self) -> None:
        """Should not allow mutation."""
        time = CueTime(minutes=0, seconds=0, frames=0)
        with pytest.raises(ValidationError):
            time.minutes = 1  # type: ignore[misc]


class TestCueTrack:
    """Tests for CueTrack model."""

    def test_defaults(self) -> None:
        """Should default every optional entry to absent."""
        track = CueTrack(data_type=DataType.AUDIO_2352)
        assert track.flags is None
        assert track.isrc is None
        assert track.pregap is None
        assert track.indexes == []
        assert track.postgap is None

    def test_valid_isrc(self) -> None:
        """Should accept a twelve character ISRC."""
        track = CueTrack(data_type=DataType.AUDIO_2352, isrc="USABC1234567")
        assert track.isrc == "USABC1234567"

    @pytest.mark.parametrize("isrc", ["", "USABC12345678", "US-ABC-12"])
    def test_invalid_isrc(self, isrc: str) -> None:
        """Should reject empty, too long or non alphanumeric ISRCs."""
        with pytest.raises(ValidationError):
            CueTrack(data_type=DataType.AUDIO_2352, isrc=isrc)

    def test_extra_fields_forbidden(self) -> None:
        """Should reject unknown fields."""
        with pytest.raises(ValidationError):
            CueTrack(data_type=DataType.AUDIO_2352, unknown="x")  # type: ignore[call-arg]

    def test_data_type_values(self) -> None:
        """Should carry the CUE keywords as enum values."""
        assert DataType.AUDIO_2352.value == "AUDIO"
        assert DataType.MODE1_2352.value == "MODE1/2352"
        assert DataType.MODE2_2352.value == "MODE2/2352"


class TestCueSheet:
    """Tests for CueSheet and CueFile models."""

    def test_valid_catalog(self) -> None:
        """Should accept a thirteen character catalog."""
        assert CueSheet(catalog="0123456789012").catalog == "0123456789012"

    @pytest.mark.parametrize("catalog", ["", "01234567890123", "0123 456"])
    def test_invalid_catalog(self, catalog: str) -> None:
        """Should reject empty, too long or non alphanumeric catalogs."""
        with pytest.raises(ValidationError):
            CueSheet(catalog=catalog)

    def test_file_defaults(self) -> None:
        """Should default to MOTOROLA and track number 1."""
        cue_file = CueFile(filename="disc.img")
        assert cue_file.file_type is FileType.MOTOROLA
        assert cue_file.first_track == 1
        assert cue_file.tracks == []

    @pytest.mark.parametrize("first_track", [0, 100])
    def test_first_track_range(self, first_track: int) -> None:
        """Should keep the first track number within 1..99."""
        with pytest.raises(ValidationError):
            CueFile(filename="disc.img", first_track=first_track)


class TestCdtModels:
    """Tests for CdtRecord and CdtData."""

    def test_crc_bytes_big_endian(self) -> None:
        """Should put the checksum high byte first."""
        record = CdtRecord(payload=bytes(16), crc=0x1234)
        assert record.crc_bytes == b"\x12\x34"

    def test_payload_size(self) -> None:
        """Should require exactly 16 payload bytes."""
        with pytest.raises(ValueError, match="16 bytes"):
            CdtRecord(payload=bytes(15), crc=0)

    def test_crc_range(self) -> None:
        """Should require a 16 bit checksum."""
        with pytest.raises(ValueError, match="16-bit"):
            CdtRecord(payload=bytes(16), crc=0x10000)

    def test_entries(self) -> None:
        """Should count the records."""
        assert CdtData().entries == 0
        record = CdtRecord(payload=bytes(16), crc=0xFFFF)
        assert CdtData(records=(record, record)).entries == 2
