"""Transformation from CCD sheets to CUE sheets and CDT data."""

from ccd2cue.transform.converter import MODE_DATA_TYPES, ccd2cdt, ccd2cue, frames_to_msf
from ccd2cue.transform.crc import crc16

__all__ = [
    "MODE_DATA_TYPES",
    "ccd2cdt",
    "ccd2cue",
    "crc16",
    "frames_to_msf",
]
