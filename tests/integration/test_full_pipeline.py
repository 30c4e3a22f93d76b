"""Full pipeline integration tests for ccd2cue.

Tests the complete conversion flow: CCD text -> CcdSheet -> CueSheet/CdtData -> files.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from ccd2cue.converters import CdtWriter, CueWriter
from ccd2cue.models import load_ccd_sheet, parse_ccd_text
from ccd2cue.transform import ccd2cdt, ccd2cue, crc16
from tests.fixtures.sample_sheets import (
    FULL_CCD,
    FULL_CDTEXT_PACKS,
    FULL_CUE,
    MIXED_MODE_CCD,
)


class TestFullPipeline:
    """Integration tests for the full conversion pipeline."""

    def test_minimal_sheet(self) -> None:
        """Should convert the smallest useful sheet to a one track CUE sheet."""
        sheet = parse_ccd_text(
            "[Disc]\nTocEntries=1\n[Entry 0]\nPoint=1\n[TRACK 1]\nMODE=0\nINDEX 1=0\n"
        )
        text = CueWriter().write_text(ccd2cue(sheet, "disc.img", "disc.cdt"))

        assert "  TRACK 1 AUDIO\n    INDEX 01 00:00:00\n" in text
        assert "CDTEXTFILE" not in text
        assert ccd2cdt(sheet).entries == 0

    def test_full_sheet_files(self, full_ccd_file: Path, tmp_path: Path) -> None:
        """Should write the CUE sheet and the CDT file from a full sheet."""
        sheet = load_ccd_sheet(full_ccd_file)
        cue_path = tmp_path / "out" / "disc.cue"
        cdt_path = tmp_path / "out" / "disc.cdt"

        CueWriter().write(ccd2cue(sheet, "disc.img", "disc.cdt"), cue_path)
        CdtWriter().write(ccd2cdt(sheet), cdt_path)

        assert cue_path.read_text() == FULL_CUE

        expected = b"".join(pack + crc16(pack).to_bytes(2, "big") for pack in FULL_CDTEXT_PACKS)
        assert cdt_path.read_bytes() == expected + b"\x00"

    def test_mixed_mode(self) -> None:
        """Should write a data track followed by an audio track with a pregap index."""
        sheet = parse_ccd_text(MIXED_MODE_CCD)
        text = CueWriter().write_text(ccd2cue(sheet, "game.img", "game.cdt"))

        assert text == (
            'FILE "game.img" BINARY\n'
            "  TRACK 1 MODE1/2352\n"
            "    INDEX 01 00:00:00\n"
            "  TRACK 2 AUDIO\n"
            "    INDEX 00 04:58:00\n"
            "    INDEX 01 05:00:00\n"
        )

    def test_reordered_sections(self) -> None:
        """Should give the same result when [Disc] follows the tracks."""
        tracks = "[TRACK 1]\nMODE=0\nISRC=USABC1234567\nINDEX 1=0\n"
        disc = "[Disc]\nCATALOG=0123456789012\n"

        first = CueWriter().write_text(ccd2cue(parse_ccd_text(disc + tracks), "a.img", "a.cdt"))
        second = CueWriter().write_text(ccd2cue(parse_ccd_text(tracks + disc), "a.img", "a.cdt"))

        assert first == second
        assert first.startswith("CATALOG 0123456789012\n")

    @pytest.mark.parametrize("declared", [1, 2, 3])
    def test_cdtext_count_mismatch(self, declared: int) -> None:
        """Should keep only packs that were both announced and present."""
        text = FULL_CCD.replace("Entries=2", f"Entries={declared}")
        sheet = parse_ccd_text(text)
        cdt = ccd2cdt(sheet)

        assert cdt.entries == min(declared, 2)
        assert [record.payload for record in cdt.records] == list(
            FULL_CDTEXT_PACKS[: cdt.entries]
        )
