"""Models for a CUE sheet.

A CUE sheet describes how tracks are laid out in one or more data or
audio files. Only a subset is produced from CCD sheets (CATALOG,
CDTEXTFILE, one FILE with its TRACKs, FLAGS, ISRC and INDEX entries),
but the model covers every entry the serializer can write.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

FRAMES_PER_SECOND = 75
SECONDS_PER_MINUTE = 60
FRAMES_PER_MINUTE = FRAMES_PER_SECOND * SECONDS_PER_MINUTE


class FileType(Enum):
    """Type of the file named in a FILE entry."""

    BINARY = "BINARY"  # little endian
    MOTOROLA = "MOTOROLA"  # big endian
    AIFF = "AIFF"
    WAVE = "WAVE"
    MP3 = "MP3"


class DataType(Enum):
    """Data type of a TRACK entry."""

    AUDIO_2352 = "AUDIO"
    CDG_2448 = "CDG"
    MODE1_2048 = "MODE1/2048"
    MODE1_2352 = "MODE1/2352"
    MODE2_2336 = "MODE2/2336"
    MODE2_2352 = "MODE2/2352"
    CDI_2336 = "CDI/2336"
    CDI_2352 = "CDI/2352"


class CueTime(BaseModel):
    """A time in MSF (minutes, seconds, frames) form.

    One second has 75 frames.

    Example:
    -------
        ```
        INDEX 01 01:02:74
        ```

    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    minutes: Annotated[int, Field(ge=0, description="Minutes")]
    seconds: Annotated[int, Field(ge=0, lt=SECONDS_PER_MINUTE, description="Seconds")]
    frames: Annotated[int, Field(ge=0, lt=FRAMES_PER_SECOND, description="Frames")]

    def __str__(self) -> str:
        return f"{self.minutes:02d}:{self.seconds:02d}:{self.frames:02d}"


class CueTrack(BaseModel):
    """A TRACK entry and the entries nested under it.

    ``indexes`` is positional: slot N holds INDEX N, or None when that
    index is not set.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    data_type: DataType
    flags: Annotated[
        str | None,
        Field(default=None, description="Subcode flags, e.g. 'DCP PRE'"),
    ]
    isrc: Annotated[
        str | None,
        Field(
            default=None,
            pattern=r"^[A-Za-z0-9]{1,12}$",
            description="International Standard Recording Code",
        ),
    ]
    performer: str | None = None
    songwriter: str | None = None
    title: str | None = None
    pregap: CueTime | None = None
    indexes: list[CueTime | None] = Field(default_factory=list)
    postgap: CueTime | None = None


class CueFile(BaseModel):
    """A FILE entry with its tracks, numbered from ``first_track``."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    filename: str
    file_type: FileType = FileType.MOTOROLA
    first_track: Annotated[int, Field(default=1, ge=1, le=99)]
    tracks: list[CueTrack] = Field(default_factory=list)


class CueSheet(BaseModel):
    """Structured representation of a CUE sheet."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    catalog: Annotated[
        str | None,
        Field(
            default=None,
            pattern=r"^[A-Za-z0-9]{1,13}$",
            description="Media Catalog Number (UPC/EAN)",
        ),
    ]
    cdtextfile: Annotated[
        str | None,
        Field(default=None, description="Name of the CD-Text (CDT) file"),
    ]
    performer: str | None = None
    songwriter: str | None = None
    title: str | None = None
    files: list[CueFile] = Field(default_factory=list)
