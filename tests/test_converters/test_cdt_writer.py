"""Tests for the CDT file writer."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from ccd2cue.converters import CdtWriter
from ccd2cue.converters.cdt_writer import CDT_TERMINATOR
from ccd2cue.errors import ConversionError, ErrorKind
from ccd2cue.models import CdtData, CdtRecord
from ccd2cue.transform import crc16


def _record(payload: bytes) -> CdtRecord:
    return CdtRecord(payload=payload, crc=crc16(payload))


class TestCdtWriter:
    """Tests for CdtWriter class."""

    @pytest.fixture
    def writer(self) -> CdtWriter:
        """Create a CDT writer."""
        return CdtWriter()

    def test_empty(self, writer: CdtWriter) -> None:
        """Should write only the terminator for no records."""
        assert writer.write_bytes(CdtData()) == CDT_TERMINATOR

    def test_zero_pack(self, writer: CdtWriter) -> None:
        """Should write the pack, its checksum high byte first, then the terminator."""
        data = writer.write_bytes(CdtData(records=(_record(bytes(16)),)))
        assert data == bytes(16) + b"\xff\xff" + b"\x00"

    def test_layout(self, writer: CdtWriter) -> None:
        """Should write 18 bytes per record plus one terminator byte."""
        first = _record(bytes.fromhex("80000000546573742044697363000000"))
        second = _record(bytes.fromhex("800101004f70656e6572000000000000"))

        data = writer.write_bytes(CdtData(records=(first, second)))

        assert len(data) == 2 * 18 + 1
        assert data[:16] == first.payload
        assert data[16:18] == first.crc.to_bytes(2, "big")
        assert data[18:34] == second.payload
        assert data[34:36] == second.crc.to_bytes(2, "big")
        assert data[-1:] == CDT_TERMINATOR

    def test_write_file(self, writer: CdtWriter, tmp_path: Path) -> None:
        """Should write the bytes to a file, creating parent directories."""
        cdt = CdtData(records=(_record(bytes(16)),))
        output = tmp_path / "out" / "disc.cdt"
        writer.write(cdt, output)
        assert output.read_bytes() == writer.write_bytes(cdt)

    def test_write_stream(self, writer: CdtWriter) -> None:
        """Should write the bytes to a binary stream."""
        stream = io.BytesIO()
        writer.write_stream(CdtData(), stream)
        assert stream.getvalue() == CDT_TERMINATOR

    def test_unwritable_path(self, writer: CdtWriter, tmp_path: Path) -> None:
        """Should raise STREAM_IO_FAILED with the output path."""
        blocker = tmp_path / "file"
        blocker.write_bytes(b"")
        output = blocker / "disc.cdt"
        with pytest.raises(ConversionError) as exc_info:
            writer.write(CdtData(), output)
        assert exc_info.value.kind is ErrorKind.STREAM_IO_FAILED
        assert exc_info.value.path == output
