"""CCD sheet parsing.

The parser is deliberately tolerant: every line is matched against every
known key, independently of the section it appears in, and anything it
does not recognize is skipped. Section headers only mark where a new
Session, Entry (TOC), CD-Text pack or TRACK element begins.

Sessions, TOC entries and CD-Text packs are announced up front by a
count (``Sessions=``, ``TocEntries=``, ``Entries=``). The first positive
count seen is authoritative: elements past it are dropped along with
their fields, and once the stream is consumed the count is lowered to
the number of elements actually found. Tracks have no announced count.
"""

from __future__ import annotations

import io
import logging
import re
from collections.abc import Callable, Iterable
from enum import Enum
from pathlib import Path
from typing import Any, NamedTuple, TextIO

from ccd2cue.errors import ConversionError, ErrorKind
from ccd2cue.models.ccd import (
    CDTEXT_PAYLOAD_SIZE,
    INDEX_UNSET,
    CcdSheet,
    CdTextEntry,
    SessionSection,
    TocEntry,
    TrackSection,
)

logger = logging.getLogger(__name__)

# CCD sheets are plain ASCII; latin-1 maps every byte so decoding never fails.
CCD_ENCODING = "latin-1"


class SectionKind(Enum):
    """Section the parser is currently in."""

    NONE = "none"
    CLONECD = "CloneCD"
    DISC = "Disc"
    SESSION = "Session"
    ENTRY = "Entry"
    CDTEXT = "CDText"
    TRACK = "TRACK"


_INT = r"([+-]?\d+)"
_HEX = r"([+-]?(?:0[xX](?=[0-9a-fA-F]))?[0-9a-fA-F]+)"

# A header only needs its opening bracket, name and number to count.
_HEADERS: tuple[tuple[SectionKind, re.Pattern[str]], ...] = (
    (SectionKind.CLONECD, re.compile(r"\s*\[\s*CloneCD\s*\]")),
    (SectionKind.DISC, re.compile(r"\s*\[\s*Disc\s*\]")),
    (SectionKind.CDTEXT, re.compile(r"\s*\[\s*CDText\s*\]")),
    (SectionKind.SESSION, re.compile(r"\s*\[\s*Session\s*[+-]?\d+")),
    (SectionKind.ENTRY, re.compile(r"\s*\[\s*Entry\s*[+-]?\d+")),
    (SectionKind.TRACK, re.compile(r"\s*\[\s*TRACK\s*[+-]?\d+")),
)

_SESSIONS_COUNT = re.compile(rf"\s*Sessions\s*=\s*{_INT}")
_TOC_ENTRIES_COUNT = re.compile(rf"\s*TocEntries\s*=\s*{_INT}")
_CDTEXT_ENTRIES_COUNT = re.compile(rf"\s*Entries\s*=\s*{_INT}")

_CATALOG = re.compile(r"\s*CATALOG\s*=\s*([A-Za-z0-9]{1,13})")

_CDTEXT_PACK = re.compile(r"\s*Entry\s*[+-]?\d+")
_CDTEXT_PACK_DATA = re.compile(r"\s*Entry\s*[+-]?\d+\s*=(.*)", re.DOTALL)
_HEX_BYTE = re.compile(rf"\s*{_HEX}")

_MODE = re.compile(rf"\s*MODE\s*=\s*{_INT}")
_FLAGS = re.compile(r"\s*FLAGS\s*=\s*([A-Za-z0-9][A-Za-z0-9 ]*)")
_ISRC = re.compile(r"\s*ISRC\s*=\s*([A-Za-z0-9]{1,12})")
_INDEX_NUMBER = re.compile(rf"\s*INDEX\s*{_INT}")
_INDEX_VALUE = re.compile(rf"\s*INDEX\s*[+-]?\d+\s*=\s*{_INT}")


class _Field(NamedTuple):
    """A ``Key = value`` line bound to a model attribute."""

    pattern: re.Pattern[str]
    attribute: str
    convert: Callable[[str], int]


def _decimal(text: str) -> int:
    return int(text, 10)


def _unsigned_hex(text: str) -> int:
    return int(text, 16) & 0xFFFFFFFF


def _field(key: str, attribute: str, hexadecimal: bool = False) -> _Field:
    value = _HEX if hexadecimal else _INT
    return _Field(
        re.compile(rf"\s*{re.escape(key)}\s*=\s*{value}"),
        attribute,
        _unsigned_hex if hexadecimal else _decimal,
    )


_CLONECD_FIELDS = (_field("Version", "version"),)

_DISC_FIELDS = (
    _field("DataTracksScrambled", "data_tracks_scrambled"),
    _field("CDTextLength", "cdtext_length"),
)

_SESSION_FIELDS = (
    _field("PreGapMode", "pre_gap_mode"),
    _field("PreGapSubC", "pre_gap_subc"),
)

_TOC_FIELDS = (
    _field("Session", "session"),
    _field("Point", "point", hexadecimal=True),
    _field("ADR", "adr", hexadecimal=True),
    _field("Control", "control", hexadecimal=True),
    _field("TrackNo", "track_no"),
    _field("AMin", "amin"),
    _field("ASec", "asec"),
    _field("AFrame", "aframe"),
    _field("ALBA", "alba"),
    _field("Zero", "zero"),
    _field("PMin", "pmin"),
    _field("PSec", "psec"),
    _field("PFrame", "pframe"),
    _field("PLBA", "plba"),
)


def _match_int(pattern: re.Pattern[str], line: str) -> int | None:
    match = pattern.match(line)
    return int(match.group(1)) if match else None


def _apply_fields(line: str, fields: Iterable[_Field], target: object) -> None:
    for fld in fields:
        match = fld.pattern.match(line)
        if match:
            setattr(target, fld.attribute, fld.convert(match.group(1)))


def _parse_hex_bytes(text: str) -> list[int]:
    """Read up to 16 hex numbers, stopping at the first one that fails."""
    values: list[int] = []
    pos = 0
    while len(values) < CDTEXT_PAYLOAD_SIZE:
        match = _HEX_BYTE.match(text, pos)
        if not match:
            break
        values.append(int(match.group(1), 16) & 0xFF)
        pos = match.end()
    return values


class CcdParser:
    """Incremental, line oriented CCD sheet parser.

    Usage:
        parser = CcdParser()
        for line in stream:
            parser.feed(line)
        sheet = parser.finish()
    """

    def __init__(self) -> None:
        """Initialize the parser with an empty sheet."""
        self._sheet = CcdSheet()
        self._section = SectionKind.NONE
        self._line_number = 0
        self._finished = False
        # Element receiving field lines; None after a header past the count.
        self._session: SessionSection | None = None
        self._toc_entry: TocEntry | None = None
        self._cdtext_entry: CdTextEntry | None = None

    @property
    def section(self) -> SectionKind:
        """Section of the most recent header line."""
        return self._section

    def feed(self, line: str) -> None:
        """Scan one line of the sheet."""
        if self._finished:
            raise RuntimeError("parser already finished")

        self._line_number += 1
        line = line.rstrip("\r\n")

        header = self._match_header(line)
        if header is not None:
            self._section = header

        self._scan_scalars(line)
        self._scan_sessions(line, header)
        self._scan_toc(line, header)
        self._scan_cdtext(line)
        self._scan_tracks(line, header)

    def finish(self) -> CcdSheet:
        """Reconcile announced counts with what was found and return the sheet."""
        if not self._finished:
            sheet = self._sheet
            sheet.disc.sessions = self._reconcile(
                "Sessions", sheet.disc.sessions, sheet.sessions
            )
            sheet.disc.toc_entries = self._reconcile(
                "TocEntries", sheet.disc.toc_entries, sheet.toc
            )
            sheet.cdtext.entries = self._reconcile(
                "Entries", sheet.cdtext.entries, sheet.cdtext.entry
            )
            self._finished = True
            logger.debug(
                "Parsed %d lines: %d session(s), %d TOC entr(ies), %d CD-Text pack(s), "
                "%d track(s)",
                self._line_number,
                sheet.disc.sessions,
                sheet.disc.toc_entries,
                sheet.cdtext.entries,
                sheet.track_entries,
            )
        return self._sheet

    @staticmethod
    def _match_header(line: str) -> SectionKind | None:
        for kind, pattern in _HEADERS:
            if pattern.match(line):
                return kind
        return None

    @staticmethod
    def _reconcile(key: str, declared: int, found: list[Any]) -> int:
        if len(found) < declared:
            logger.debug("%s=%d announced but only %d found", key, declared, len(found))
        del found[declared:]
        return len(found)

    def _admit(self, key: str, declared: int, found: list[Any]) -> bool:
        """Check whether one more element fits under the announced count."""
        if len(found) < declared:
            return True
        logger.debug(
            "line %d: ignoring element beyond %s=%d", self._line_number, key, declared
        )
        return False

    def _scan_scalars(self, line: str) -> None:
        sheet = self._sheet
        _apply_fields(line, _CLONECD_FIELDS, sheet.clonecd)
        _apply_fields(line, _DISC_FIELDS, sheet.disc)

        match = _CATALOG.match(line)
        if match:
            sheet.disc.catalog = match.group(1)

    def _scan_sessions(self, line: str, header: SectionKind | None) -> None:
        sheet = self._sheet
        count = _match_int(_SESSIONS_COUNT, line)
        if count is not None and count > 0 and sheet.disc.sessions == 0:
            sheet.disc.sessions = count

        if sheet.disc.sessions <= 0:
            return

        if header is SectionKind.SESSION:
            self._session = None
            if self._admit("Sessions", sheet.disc.sessions, sheet.sessions):
                self._session = SessionSection()
                sheet.sessions.append(self._session)

        if self._session is not None:
            _apply_fields(line, _SESSION_FIELDS, self._session)

    def _scan_toc(self, line: str, header: SectionKind | None) -> None:
        sheet = self._sheet
        count = _match_int(_TOC_ENTRIES_COUNT, line)
        if count is not None and count > 0 and sheet.disc.toc_entries == 0:
            sheet.disc.toc_entries = count

        if sheet.disc.toc_entries <= 0:
            return

        if header is SectionKind.ENTRY:
            self._toc_entry = None
            if self._admit("TocEntries", sheet.disc.toc_entries, sheet.toc):
                self._toc_entry = TocEntry()
                sheet.toc.append(self._toc_entry)

        if self._toc_entry is not None:
            _apply_fields(line, _TOC_FIELDS, self._toc_entry)

    def _scan_cdtext(self, line: str) -> None:
        cdtext = self._sheet.cdtext
        count = _match_int(_CDTEXT_ENTRIES_COUNT, line)
        if count is not None and count > 0 and cdtext.entries == 0:
            cdtext.entries = count

        if cdtext.entries <= 0:
            return

        if _CDTEXT_PACK.match(line):
            self._cdtext_entry = None
            if self._admit("Entries", cdtext.entries, cdtext.entry):
                self._cdtext_entry = CdTextEntry()
                cdtext.entry.append(self._cdtext_entry)

        if self._cdtext_entry is not None:
            match = _CDTEXT_PACK_DATA.match(line)
            if match:
                self._cdtext_entry.update(_parse_hex_bytes(match.group(1)))

    def _scan_tracks(self, line: str, header: SectionKind | None) -> None:
        sheet = self._sheet
        if header is SectionKind.TRACK:
            sheet.tracks.append(TrackSection())

        if not sheet.tracks:
            return

        track = sheet.tracks[-1]

        mode = _match_int(_MODE, line)
        if mode is not None:
            track.mode = mode

        match = _FLAGS.match(line)
        if match:
            track.flags = match.group(1).rstrip()

        match = _ISRC.match(line)
        if match:
            track.isrc = match.group(1)

        number = _match_int(_INDEX_NUMBER, line)
        if number is not None:
            self._add_index(track, number, _match_int(_INDEX_VALUE, line))

    def _add_index(self, track: TrackSection, number: int, frames: int | None) -> None:
        if frames is not None and frames < 0:
            logger.debug(
                "line %d: ignoring negative INDEX %d value %d", self._line_number, number, frames
            )
            frames = None

        if number in (0, 1):
            if frames is not None:
                track.index[number] = frames
        else:
            track.index.append(INDEX_UNSET if frames is None else frames)


def parse_ccd_stream(stream: TextIO) -> CcdSheet:
    """Parse a CCD sheet from an open text stream.

    Args:
    ----
        stream: Readable text stream positioned at the start of the sheet.

    Returns:
    -------
        The reconciled CcdSheet. Malformed content never raises; unknown or
        broken lines are simply skipped.

    Raises:
    ------
        ConversionError: STREAM_IO_FAILED if the stream cannot be read.

    """
    parser = CcdParser()
    try:
        for line in stream:
            parser.feed(line)
    except (OSError, UnicodeDecodeError) as e:
        raise ConversionError(
            ErrorKind.STREAM_IO_FAILED, f"cannot parse CCD sheet stream: {e}"
        ) from e
    return parser.finish()


def parse_ccd_text(text: str) -> CcdSheet:
    """Parse a CCD sheet held in a string."""
    return parse_ccd_stream(io.StringIO(text, newline=""))


def load_ccd_sheet(path: Path) -> CcdSheet:
    """Load and parse a CCD sheet file.

    Args:
    ----
        path: Path to the .ccd file.

    Returns:
    -------
        The reconciled CcdSheet.

    Raises:
    ------
        ConversionError: STREAM_IO_FAILED if the file cannot be opened or read.

    """
    try:
        with path.open("r", encoding=CCD_ENCODING, newline="") as f:
            return parse_ccd_stream(f)
    except ConversionError as e:
        raise ConversionError(e.kind, str(e), path) from e
    except OSError as e:
        raise ConversionError(ErrorKind.STREAM_IO_FAILED, f"File read error: {e}", path) from e
