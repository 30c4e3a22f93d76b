"""Models for CCD sheets, CUE sheets and CD-Text data.

This package provides:
- Dataclasses mirroring the sections of a CloneCD (CCD) sheet
- The tolerant, line oriented CCD sheet parser
- Pydantic models for CUE sheets
- Dataclasses for CD-Text (CDT) records

Usage:
    >>> from ccd2cue.models import load_ccd_sheet
    >>> sheet = load_ccd_sheet(Path("disc.ccd"))
    >>> print(sheet.track_entries)
"""

from ccd2cue.models.ccd import (
    INDEX_UNSET,
    CcdSheet,
    CdTextEntry,
    CdTextSection,
    CloneCdSection,
    DiscSection,
    SessionSection,
    TocEntry,
    TrackSection,
)
from ccd2cue.models.cdt import CdtData, CdtRecord
from ccd2cue.models.cue import (
    CueFile,
    CueSheet,
    CueTime,
    CueTrack,
    DataType,
    FileType,
)
from ccd2cue.models.loader import (
    CcdParser,
    SectionKind,
    load_ccd_sheet,
    parse_ccd_stream,
    parse_ccd_text,
)

__all__ = [
    # CCD sheet
    "INDEX_UNSET",
    "CcdSheet",
    "CdTextEntry",
    "CdTextSection",
    "CloneCdSection",
    "DiscSection",
    "SessionSection",
    "TocEntry",
    "TrackSection",
    # Parser
    "CcdParser",
    "SectionKind",
    "load_ccd_sheet",
    "parse_ccd_stream",
    "parse_ccd_text",
    # CUE sheet
    "CueFile",
    "CueSheet",
    "CueTime",
    "CueTrack",
    "DataType",
    "FileType",
    # CD-Text
    "CdtData",
    "CdtRecord",
]
