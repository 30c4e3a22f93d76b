"""Error types for the CCD to CUE conversion pipeline."""

from __future__ import annotations

from enum import Enum
from pathlib import Path


class ErrorKind(Enum):
    """Category of an unrecoverable conversion failure.

    Malformed CCD content is never an error; only these three
    conditions abort a run.
    """

    ALLOCATION_FAILED = "allocation-failed"
    STREAM_IO_FAILED = "stream-io-failed"
    INVARIANT_VIOLATION = "invariant-violation"

    @property
    def exit_code(self) -> int:
        """Process exit status for this category (sysexits.h values)."""
        return _EXIT_CODES[self]


_EXIT_CODES: dict[ErrorKind, int] = {
    ErrorKind.ALLOCATION_FAILED: 71,  # EX_OSERR
    ErrorKind.STREAM_IO_FAILED: 74,  # EX_IOERR
    ErrorKind.INVARIANT_VIOLATION: 69,  # EX_UNAVAILABLE
}


class ConversionError(Exception):
    """Unrecoverable error while parsing, converting or writing a sheet."""

    def __init__(self, kind: ErrorKind, message: str, path: Path | None = None) -> None:
        """Initialize ConversionError.

        Args:
        ----
            kind: Failure category.
            message: Error message describing what went wrong.
            path: Optional path to the file that caused the error.

        """
        self.kind = kind
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)
