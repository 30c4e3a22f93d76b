"""File name helpers."""

from __future__ import annotations

import os


def make_reference_name(filename: str, keep_dirname: bool = False) -> str:
    """Strip the extension from a file name.

    The reference name is the base for every file derived from the
    input sheet (``<ref>.img``, ``<ref>.cdt``).

    Args:
    ----
        filename: Input file name or path.
        keep_dirname: Keep the directory components instead of only the
            base name.

    Returns:
    -------
        ``filename`` without its extension.

    Examples:
    --------
        >>> make_reference_name("/media/images/disc.ccd")
        'disc'
        >>> make_reference_name("/media/images/disc.ccd", keep_dirname=True)
        '/media/images/disc'
        >>> make_reference_name("archive.tar.ccd")
        'archive.tar'

    """
    head, base = os.path.split(filename)
    dot = base.rfind(".")
    if dot != -1:
        base = base[:dot]
    return os.path.join(head, base) if keep_dirname else base
