"""ccd2cue: Converter from CloneCD (CCD) sheets to CUE sheets.

This package provides tools for:
- Parsing CCD sheets, tolerating malformed or reordered input
- Converting them to CUE sheets
- Extracting CD-Text into CDT files with per-pack checksums

Quick Start:
    >>> from pathlib import Path
    >>> from ccd2cue.models import load_ccd_sheet
    >>> from ccd2cue.transform import ccd2cdt, ccd2cue
    >>> from ccd2cue.converters import CdtWriter, CueWriter
    >>>
    >>> sheet = load_ccd_sheet(Path("disc.ccd"))
    >>> CueWriter().write(ccd2cue(sheet, "disc.img", "disc.cdt"), Path("disc.cue"))
    >>> CdtWriter().write(ccd2cdt(sheet), Path("disc.cdt"))

Modules:
    models: CCD, CUE and CDT models and the CCD sheet parser
    transform: CCD to CUE/CDT conversion and the CD-Text checksum
    converters: CUE and CDT serializers
    cli: Command-line interface
"""

import logging

__version__ = "0.1.0"

# Applications configure logging; the library stays silent by default.
logging.getLogger(__name__).addHandler(logging.NullHandler())
