"""Write CUE sheets.

Entries are written in a fixed order and only when present:

    CATALOG 0123456789012
    CDTEXTFILE "disc.cdt"
    FILE "disc.img" BINARY
      TRACK 1 AUDIO
        FLAGS DCP
        ISRC USABC1234567
        INDEX 01 00:00:00
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, TextIO

from ccd2cue.errors import ConversionError, ErrorKind
from ccd2cue.models.cue import CueSheet, CueTrack

if TYPE_CHECKING:
    from ccd2cue.models.cdt import CdtData

logger = logging.getLogger(__name__)


class CueWriter:
    """Render a CueSheet as CUE sheet text.

    Usage:
        writer = CueWriter()
        writer.write(cue_sheet, Path("disc.cue"))

    Or for in-memory conversion:
        text = writer.write_text(cue_sheet)
    """

    def write(self, cue: CueSheet, output_path: Path) -> None:
        """Write a CUE sheet to a file.

        Args:
        ----
            cue: The CUE sheet to write.
            output_path: Output file path. Parent directories will be created.

        Raises:
        ------
            ConversionError: STREAM_IO_FAILED if the file cannot be written.

        """
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(output_path, "w", encoding="utf-8", newline="\n") as f:
                self.write_stream(cue, f)
            logger.debug("Wrote CUE sheet to %s", output_path)
        except ConversionError as e:
            raise ConversionError(e.kind, str(e), output_path) from e
        except OSError as e:
            raise ConversionError(
                ErrorKind.STREAM_IO_FAILED, f"File write error: {e}", output_path
            ) from e

    def write_stream(self, cue: CueSheet, stream: TextIO) -> None:
        """Write a CUE sheet to an open text stream.

        Raises:
        ------
            ConversionError: STREAM_IO_FAILED if the stream cannot be written.

        """
        try:
            for line in self.lines(cue):
                stream.write(line + "\n")
            stream.flush()
        except OSError as e:
            raise ConversionError(
                ErrorKind.STREAM_IO_FAILED, f"cannot write CUE sheet stream: {e}"
            ) from e

    def write_text(self, cue: CueSheet) -> str:
        """Return the CUE sheet as a string."""
        return "".join(line + "\n" for line in self.lines(cue))

    def lines(self, cue: CueSheet) -> list[str]:
        """Return the CUE sheet lines, without terminators."""
        lines: list[str] = []

        if cue.catalog:
            lines.append(f"CATALOG {cue.catalog}")
        if cue.cdtextfile is not None:
            lines.append(f'CDTEXTFILE "{cue.cdtextfile}"')
        if cue.performer is not None:
            lines.append(f'PERFORMER "{cue.performer}"')
        if cue.songwriter is not None:
            lines.append(f'SONGWRITER "{cue.songwriter}"')
        if cue.title is not None:
            lines.append(f'TITLE "{cue.title}"')

        for cue_file in cue.files:
            lines.append(f'FILE "{cue_file.filename}" {cue_file.file_type.value}')
            for number, track in enumerate(cue_file.tracks, start=cue_file.first_track):
                lines.extend(self._track_lines(number, track))

        return lines

    def _track_lines(self, number: int, track: CueTrack) -> list[str]:
        lines = [f"  TRACK {number} {track.data_type.value}"]

        if track.flags is not None:
            lines.append(f"    FLAGS {track.flags}")
        if track.isrc:
            lines.append(f"    ISRC {track.isrc}")
        if track.performer is not None:
            lines.append(f'    PERFORMER "{track.performer}"')
        if track.songwriter is not None:
            lines.append(f'    SONGWRITER "{track.songwriter}"')
        if track.title is not None:
            lines.append(f'    TITLE "{track.title}"')
        if track.pregap is not None:
            lines.append(f"    PREGAP {track.pregap}")

        for slot, time in enumerate(track.indexes):
            if time is not None:
                lines.append(f"    INDEX {slot:02d} {time}")

        if track.postgap is not None:
            lines.append(f"    POSTGAP {track.postgap}")

        return lines


def convert_ccd_sheet(
    ccd_path: Path,
    image_name: str | None = None,
    cdt_name: str | None = None,
) -> tuple[CueSheet, CdtData]:
    """Load a CCD sheet file and convert it to a CUE sheet and CDT data.

    Args:
    ----
        ccd_path: Input CCD sheet path.
        image_name: Disc image name; defaults to the CCD base name with ".img".
        cdt_name: CDT file name; defaults to the CCD base name with ".cdt".

    Returns:
    -------
        The CUE sheet and the CDT data, the latter empty when the sheet
        has no CD-Text.

    Raises:
    ------
        ConversionError: On unreadable input or an invariant violation.

    """
    from ccd2cue.models.loader import load_ccd_sheet
    from ccd2cue.paths import make_reference_name
    from ccd2cue.transform.converter import ccd2cdt, ccd2cue

    reference = make_reference_name(str(ccd_path))
    sheet = load_ccd_sheet(ccd_path)
    logger.debug("Loaded %s", ccd_path)

    cue = ccd2cue(
        sheet,
        image_name if image_name is not None else f"{reference}.img",
        cdt_name if cdt_name is not None else f"{reference}.cdt",
    )
    return cue, ccd2cdt(sheet)


def convert_ccd_file(
    ccd_path: Path,
    cue_stream: TextIO | None = None,
    image_name: str | None = None,
    cdt_name: str | None = None,
) -> CdtData:
    """High-level function to convert a CCD sheet file.

    Handles the full pipeline:
    1. Parse the CCD sheet
    2. Convert it to a CUE sheet and CDT data
    3. Write the CUE sheet to ``cue_stream`` (stdout by default)

    The CDT data is returned so the caller decides where it goes; it is
    empty when the sheet has no CD-Text.

    Args:
    ----
        ccd_path: Input CCD sheet path.
        cue_stream: Output text stream for the CUE sheet.
        image_name: Disc image name; defaults to the CCD base name with ".img".
        cdt_name: CDT file name; defaults to the CCD base name with ".cdt".

    Raises:
    ------
        ConversionError: On unreadable input, unwritable output or an
            invariant violation.

    """
    cue, cdt = convert_ccd_sheet(ccd_path, image_name, cdt_name)
    CueWriter().write_stream(cue, cue_stream if cue_stream is not None else sys.stdout)
    return cdt
