"""CCD sheet to CUE sheet and CDT conversion.

CCD sheets carry more information than CUE sheets can express, so the
mapping is lossy. From the CCD sheet only these entries are used:

- Disc/CATALOG                       -> CATALOG
- CDText/Entry N (presence)          -> CDTEXTFILE
- TRACK N/MODE                       -> TRACK data type
- TRACK N/FLAGS, TRACK N/ISRC        -> FLAGS, ISRC
- TRACK N/INDEX N                    -> INDEX (frames converted to MSF)

CD-Text itself is not mapped to PERFORMER/SONGWRITER/TITLE; the raw
packs go to a separate CDT file produced by ``ccd2cdt``.
"""

from __future__ import annotations

import logging

from pydantic import ValidationError

from ccd2cue.errors import ConversionError, ErrorKind
from ccd2cue.models.ccd import INDEX_UNSET, CcdSheet, TrackSection
from ccd2cue.models.cdt import CdtData, CdtRecord
from ccd2cue.models.cue import (
    FRAMES_PER_MINUTE,
    FRAMES_PER_SECOND,
    CueFile,
    CueSheet,
    CueTime,
    CueTrack,
    DataType,
    FileType,
)
from ccd2cue.transform.crc import crc16

logger = logging.getLogger(__name__)

# CCD track MODE -> CUE track data type
MODE_DATA_TYPES: dict[int, DataType] = {
    0: DataType.AUDIO_2352,
    1: DataType.MODE1_2352,
    2: DataType.MODE2_2352,
}


def frames_to_msf(frames: int) -> CueTime:
    """Convert a frame count to MSF time.

    Args:
    ----
        frames: Non-negative number of frames (75 per second).

    Returns:
    -------
        The equivalent CueTime.

    Raises:
    ------
        ConversionError: INVARIANT_VIOLATION if ``frames`` is negative.

    Examples:
    --------
        >>> str(frames_to_msf(4724))
        '01:02:74'

    """
    if frames < 0:
        raise ConversionError(
            ErrorKind.INVARIANT_VIOLATION, f"negative frame count {frames}; please report a bug"
        )
    return CueTime(
        minutes=frames // FRAMES_PER_MINUTE,
        seconds=(frames % FRAMES_PER_MINUTE) // FRAMES_PER_SECOND,
        frames=frames % FRAMES_PER_SECOND,
    )


def _convert_track(number: int, track: TrackSection) -> CueTrack:
    data_type = MODE_DATA_TYPES.get(track.mode)
    if data_type is None:
        raise ConversionError(
            ErrorKind.INVARIANT_VIOLATION,
            f"unknown data type {track.mode} for track {number}; please report a bug",
        )

    indexes = [None if frames == INDEX_UNSET else frames_to_msf(frames) for frames in track.index]

    return CueTrack(
        data_type=data_type,
        flags=track.flags,
        isrc=track.isrc or None,
        indexes=indexes,
    )


def ccd2cue(ccd: CcdSheet, image_name: str, cdt_name: str) -> CueSheet:
    """Convert a parsed CCD sheet to a CUE sheet.

    Args:
    ----
        ccd: Reconciled CCD sheet.
        image_name: Disc image file name for the FILE entry.
        cdt_name: CDT file name for the CDTEXTFILE entry, used only when
            the sheet has CD-Text.

    Returns:
    -------
        A new CueSheet with a single BINARY FILE entry.

    Raises:
    ------
        ConversionError: INVARIANT_VIOLATION for a track mode other than 0, 1 or 2.

    """
    try:
        tracks = [
            _convert_track(number, track) for number, track in enumerate(ccd.tracks, start=1)
        ]
        cue = CueSheet(
            catalog=ccd.disc.catalog or None,
            cdtextfile=cdt_name if ccd.cdtext.entries > 0 else None,
            files=[
                CueFile(
                    filename=image_name,
                    file_type=FileType.BINARY,
                    first_track=1,
                    tracks=tracks,
                )
            ],
        )
    except ValidationError as e:
        raise ConversionError(
            ErrorKind.INVARIANT_VIOLATION, f"inconsistent CCD sheet model: {e}"
        ) from e

    logger.debug("Converted %d track(s) to CUE", len(tracks))
    return cue


def ccd2cdt(ccd: CcdSheet) -> CdtData:
    """Extract the CD-Text packs of a CCD sheet, each with its checksum.

    A sheet without CD-Text yields an empty CdtData.
    """
    records = []
    for entry in ccd.cdtext.entry[: ccd.cdtext.entries]:
        payload = entry.to_bytes()
        records.append(CdtRecord(payload=payload, crc=crc16(payload)))
    return CdtData(records=tuple(records))
