"""Models for a parsed CloneCD (CCD) sheet.

The CCD sheet is an INI-like text file written by CloneCD next to a raw
disc image. Each dataclass below mirrors one section of the sheet:

    [CloneCD]      -> CloneCdSection
    [Disc]         -> DiscSection
    [CDText]       -> CdTextSection (holding CdTextEntry records)
    [Session N]    -> SessionSection
    [Entry N]      -> TocEntry
    [TRACK N]      -> TrackSection

The models are filled incrementally by ``ccd2cue.models.loader`` and are
treated as read-only once parsing has finished.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

# Sentinel stored in TrackSection.index for an INDEX that was not given.
INDEX_UNSET = -1

CDTEXT_PAYLOAD_SIZE = 16
CDTEXT_TEXT_SIZE = 12


@dataclass
class CloneCdSection:
    """The [CloneCD] section."""

    version: int = 3


@dataclass
class DiscSection:
    """The [Disc] section.

    Attributes
    ----------
        toc_entries: Number of [Entry N] (TOC) sections.
        sessions: Number of [Session N] sections.
        data_tracks_scrambled: Raw DataTracksScrambled value.
        cdtext_length: Raw CDTextLength value (not used for conversion).
        catalog: Media Catalog Number, empty when absent.

    """

    toc_entries: int = 0
    sessions: int = 0
    data_tracks_scrambled: int = 0
    cdtext_length: int = 0
    catalog: str = ""


@dataclass
class CdTextEntry:
    """A single raw CD-Text pack as found in ``Entry N = ...`` lines.

    The pack is kept as its 16 raw bytes: type, track, sequence, block
    and a 12 byte text payload.
    """

    data: bytearray = field(default_factory=lambda: bytearray(CDTEXT_PAYLOAD_SIZE))

    @property
    def type(self) -> int:
        return self.data[0]

    @property
    def track(self) -> int:
        return self.data[1]

    @property
    def sequence(self) -> int:
        return self.data[2]

    @property
    def block(self) -> int:
        return self.data[3]

    @property
    def text(self) -> bytes:
        return bytes(self.data[4:])

    def update(self, values: list[int]) -> None:
        """Overwrite the leading bytes of the pack with ``values``."""
        for offset, value in enumerate(values[:CDTEXT_PAYLOAD_SIZE]):
            self.data[offset] = value & 0xFF

    def to_bytes(self) -> bytes:
        return bytes(self.data)


@dataclass
class CdTextSection:
    """The [CDText] section: announced entry count and the raw packs."""

    entries: int = 0
    entry: list[CdTextEntry] = field(default_factory=list)


@dataclass
class SessionSection:
    """A [Session N] section."""

    pre_gap_mode: int = 0
    pre_gap_subc: int = 0


@dataclass
class TocEntry:
    """An [Entry N] section, one raw TOC record.

    ``point``, ``adr`` and ``control`` are written in hexadecimal in the
    sheet; the rest are decimal.
    """

    session: int = 0
    point: int = 0
    adr: int = 0
    control: int = 0
    track_no: int = 0
    amin: int = 0
    asec: int = 0
    aframe: int = 0
    alba: int = 0
    zero: int = 0
    pmin: int = 0
    psec: int = 0
    pframe: int = 0
    plba: int = 0


@dataclass
class TrackSection:
    """A [TRACK N] section.

    Attributes
    ----------
        mode: 0 = AUDIO, 1 = MODE1/2352, 2 = MODE2/2352.
        flags: Space separated subcode flags (DCP, 4CH, PRE, SCMS), or None.
        isrc: International Standard Recording Code, empty when absent.
        index: Frame offsets; slots 0 and 1 always exist and hold
            INDEX_UNSET until given, further INDEX lines are appended.

    """

    mode: int = 0
    flags: str | None = None
    isrc: str = ""
    index: list[int] = field(default_factory=lambda: [INDEX_UNSET, INDEX_UNSET])

    @property
    def index_entries(self) -> int:
        return len(self.index)


@dataclass
class CcdSheet:
    """Structured representation of a whole CCD sheet.

    Sessions and tracks are numbered from 1 in the sheet while TOC and
    CD-Text entries are numbered from 0. The lists here hold only the
    entries actually observed; use ``session(n)`` and ``track(n)`` for
    the 1-based view.
    """

    clonecd: CloneCdSection = field(default_factory=CloneCdSection)
    disc: DiscSection = field(default_factory=DiscSection)
    cdtext: CdTextSection = field(default_factory=CdTextSection)
    sessions: list[SessionSection] = field(default_factory=list)
    toc: list[TocEntry] = field(default_factory=list)
    tracks: list[TrackSection] = field(default_factory=list)

    @property
    def track_entries(self) -> int:
        return len(self.tracks)

    def session(self, number: int) -> SessionSection:
        """Return the session numbered ``number`` (1-based)."""
        if number < 1:
            raise IndexError(f"session numbers start at 1, got {number}")
        return self.sessions[number - 1]

    def track(self, number: int) -> TrackSection:
        """Return the track numbered ``number`` (1-based)."""
        if number < 1:
            raise IndexError(f"track numbers start at 1, got {number}")
        return self.tracks[number - 1]

    def to_dict(self) -> dict[str, Any]:
        """Return a plain dictionary view, suitable for YAML output."""
        return {
            "CloneCD": {"Version": self.clonecd.version},
            "Disc": {
                "TocEntries": self.disc.toc_entries,
                "Sessions": self.disc.sessions,
                "DataTracksScrambled": self.disc.data_tracks_scrambled,
                "CDTextLength": self.disc.cdtext_length,
                "CATALOG": self.disc.catalog or None,
            },
            "CDText": {
                "Entries": self.cdtext.entries,
                "Entry": [entry.to_bytes().hex(" ") for entry in self.cdtext.entry],
            },
            "Session": [
                {"PreGapMode": s.pre_gap_mode, "PreGapSubC": s.pre_gap_subc}
                for s in self.sessions
            ],
            "Entry": [
                {
                    "Session": e.session,
                    "Point": f"0x{e.point:02x}",
                    "ADR": f"0x{e.adr:02x}",
                    "Control": f"0x{e.control:02x}",
                    "TrackNo": e.track_no,
                    "AMin": e.amin,
                    "ASec": e.asec,
                    "AFrame": e.aframe,
                    "ALBA": e.alba,
                    "Zero": e.zero,
                    "PMin": e.pmin,
                    "PSec": e.psec,
                    "PFrame": e.pframe,
                    "PLBA": e.plba,
                }
                for e in self.toc
            ],
            "TRACK": [
                {
                    "MODE": t.mode,
                    "FLAGS": t.flags,
                    "ISRC": t.isrc or None,
                    "INDEX": list(t.index),
                }
                for t in self.tracks
            ],
        }
