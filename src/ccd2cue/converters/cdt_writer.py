"""Write CD-Text (CDT) files.

A CDT file is the sequence of CD-Text packs, each made of its 16 data
bytes followed by the 2 byte checksum (high byte first), terminated by
a single null byte.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO

from ccd2cue.errors import ConversionError, ErrorKind
from ccd2cue.models.cdt import CdtData

logger = logging.getLogger(__name__)

CDT_TERMINATOR = b"\x00"


class CdtWriter:
    """Serialize CdtData to the CDT binary layout.

    Usage:
        writer = CdtWriter()
        writer.write(cdt_data, Path("disc.cdt"))

    Or for in-memory conversion:
        cdt_bytes = writer.write_bytes(cdt_data)
    """

    def write(self, cdt: CdtData, output_path: Path) -> None:
        """Write CDT data to a file.

        Args:
        ----
            cdt: The CD-Text records to write.
            output_path: Output file path. Parent directories will be created.

        Raises:
        ------
            ConversionError: STREAM_IO_FAILED if the file cannot be written.

        """
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(output_path, "wb") as f:
                f.write(self.write_bytes(cdt))
        except OSError as e:
            raise ConversionError(
                ErrorKind.STREAM_IO_FAILED, f"File write error: {e}", output_path
            ) from e
        logger.debug("Wrote %d CD-Text pack(s) to %s", cdt.entries, output_path)

    def write_stream(self, cdt: CdtData, stream: BinaryIO) -> None:
        """Write CDT data to an open binary stream."""
        try:
            stream.write(self.write_bytes(cdt))
            stream.flush()
        except OSError as e:
            raise ConversionError(
                ErrorKind.STREAM_IO_FAILED, f"cannot write CDT stream: {e}"
            ) from e

    def write_bytes(self, cdt: CdtData) -> bytes:
        """Return the CDT file content as bytes."""
        chunks = [record.payload + record.crc_bytes for record in cdt.records]
        chunks.append(CDT_TERMINATOR)
        return b"".join(chunks)
