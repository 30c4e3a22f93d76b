"""Serializers for the final stage of the conversion pipeline.

Primary Classes:
    CueWriter: Render a CueSheet as CUE sheet text
    CdtWriter: Serialize CdtData to a binary CDT file

Example:
-------
    >>> from ccd2cue.converters import CdtWriter, CueWriter
    >>> from ccd2cue.models import load_ccd_sheet
    >>> from ccd2cue.transform import ccd2cdt, ccd2cue
    >>>
    >>> sheet = load_ccd_sheet(Path("disc.ccd"))
    >>> CueWriter().write(ccd2cue(sheet, "disc.img", "disc.cdt"), Path("disc.cue"))
    >>> CdtWriter().write(ccd2cdt(sheet), Path("disc.cdt"))

"""

from ccd2cue.converters.cdt_writer import CdtWriter
from ccd2cue.converters.cue_writer import CueWriter, convert_ccd_file, convert_ccd_sheet

__all__ = [
    "CdtWriter",
    "CueWriter",
    "convert_ccd_file",
    "convert_ccd_sheet",
]
