"""CLI support for ccd2cue.

The Typer application itself lives in ``ccd2cue.cli_main``.
"""

from ccd2cue.cli.exception_handler import handle_exceptions
from ccd2cue.cli.options import ConversionOptions

__all__ = [
    "ConversionOptions",
    "handle_exceptions",
]
