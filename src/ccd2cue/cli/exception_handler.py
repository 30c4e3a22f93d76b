"""CLI exception handling."""

from __future__ import annotations

import traceback
from collections.abc import Callable
from functools import wraps
from typing import TypeVar

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from ccd2cue.errors import ConversionError, ErrorKind

T = TypeVar("T")

console = Console(stderr=True)

# sysexits.h
EX_NOINPUT = 66
EX_NOPERM = 77


def handle_exceptions(func: Callable[..., T]) -> Callable[..., T]:
    """Report exceptions raised by a CLI command and exit with a matching status.

    A ``verbose`` keyword argument of the wrapped command, when true,
    adds the full traceback to the report.
    """

    @wraps(func)
    def wrapper(*args: object, **kwargs: object) -> T:
        verbose = bool(kwargs.get("verbose", False))
        try:
            return func(*args, **kwargs)
        except typer.Exit:
            raise
        except ConversionError as e:
            _handle_conversion_error(e, verbose)
            raise typer.Exit(conversion_exit_code(e)) from None
        except MemoryError as e:
            _handle_conversion_error(
                ConversionError(ErrorKind.ALLOCATION_FAILED, f"out of memory: {e}"), verbose
            )
            raise typer.Exit(ErrorKind.ALLOCATION_FAILED.exit_code) from None
        except FileNotFoundError as e:
            _handle_file_error(e, verbose)
            raise typer.Exit(EX_NOINPUT) from None
        except PermissionError as e:
            _handle_permission_error(e, verbose)
            raise typer.Exit(EX_NOPERM) from None
        except Exception as e:
            _handle_generic_error(e, verbose)
            raise typer.Exit(1) from None

    return wrapper


def conversion_exit_code(error: ConversionError) -> int:
    """Return the exit status for a conversion error.

    A missing or unreadable file keeps its sysexits status even when it
    surfaces as a STREAM_IO_FAILED conversion error.
    """
    cause = error.__cause__
    while isinstance(cause, ConversionError):
        cause = cause.__cause__
    if isinstance(cause, FileNotFoundError):
        return EX_NOINPUT
    if isinstance(cause, PermissionError):
        return EX_NOPERM
    return error.kind.exit_code


def _handle_conversion_error(error: ConversionError, verbose: bool) -> None:
    """Handle unrecoverable conversion errors."""
    titles = {
        ErrorKind.ALLOCATION_FAILED: "Out of Memory",
        ErrorKind.STREAM_IO_FAILED: "I/O Error",
        ErrorKind.INVARIANT_VIOLATION: "Internal Error",
    }
    console.print(
        Panel(
            f"[red]{escape(str(error))}[/red]",
            title=titles[error.kind],
            border_style="red",
        )
    )

    if verbose:
        console.print("\n[dim]Traceback:[/dim]")
        console.print(traceback.format_exc())


def _handle_file_error(error: FileNotFoundError, verbose: bool) -> None:
    """Handle file not found errors."""
    filename = error.filename or "unknown"
    console.print(
        Panel(
            f"[red]File not found: {filename}[/red]\n\n"
            "Please check that the file path is correct.",
            title="Error",
            border_style="red",
        )
    )


def _handle_permission_error(error: PermissionError, verbose: bool) -> None:
    """Handle permission errors."""
    filename = error.filename or "unknown"
    console.print(
        Panel(
            f"[red]Permission denied: {filename}[/red]\n\n" "Check file permissions and try again.",
            title="Error",
            border_style="red",
        )
    )


def _handle_generic_error(error: Exception, verbose: bool) -> None:
    """Handle unexpected errors."""
    console.print(
        Panel(
            f"[red]An unexpected error occurred:[/red]\n{error}",
            title="Error",
            border_style="red",
        )
    )

    if verbose:
        console.print("\n[dim]Traceback:[/dim]")
        console.print(traceback.format_exc())
    else:
        console.print("\n[dim]Use --verbose for full traceback[/dim]")
