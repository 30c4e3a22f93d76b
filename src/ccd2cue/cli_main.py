"""Command-line interface for the ccd2cue converter."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ccd2cue import __version__
from ccd2cue.cli.exception_handler import handle_exceptions
from ccd2cue.models import CcdSheet, load_ccd_sheet

# Create Typer app
app = typer.Typer(
    name="ccd2cue",
    help="Convert CloneCD CCD sheets to CUE sheets and CD-Text (CDT) files.",
    add_completion=True,
    no_args_is_help=True,
)

# Rich consoles for output
console = Console()
error_console = Console(stderr=True, style="bold red")

InputFile = Annotated[
    Path,
    typer.Argument(
        help="Input CCD sheet.",
        file_okay=True,
        dir_okay=False,
        readable=True,
        resolve_path=True,
    ),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"ccd2cue version {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr through rich; DEBUG when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Convert CloneCD CCD sheets to CUE sheets.

    The CUE sheet references the disc image as a BINARY file. When the CCD
    sheet carries CD-Text, a CDT file is written as well and referenced by
    a CDTEXTFILE entry.
    """


@app.command()
@handle_exceptions
def convert(
    input_file: InputFile,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output CUE sheet path. Defaults to standard output.",
            dir_okay=False,
            writable=True,
            resolve_path=True,
        ),
    ] = None,
    image: Annotated[
        str | None,
        typer.Option(
            "--image",
            "-i",
            help="Disc image name for the FILE entry. Defaults to the input name with .img.",
        ),
    ] = None,
    cdt: Annotated[
        str | None,
        typer.Option(
            "--cdt",
            "-c",
            help="CDT file name for the CDTEXTFILE entry. Defaults to the input name with .cdt.",
        ),
    ] = None,
    absolute: Annotated[
        bool,
        typer.Option(
            "--absolute",
            "-a",
            help="Keep the input's directory in derived image and CDT names.",
        ),
    ] = False,
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="Overwrite output files if they exist.",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-V",
            help="Show detailed conversion progress.",
        ),
    ] = False,
) -> None:
    """Convert a CCD sheet to a CUE sheet (and a CDT file when it has CD-Text).

    Examples
    --------
        ccd2cue convert disc.ccd > disc.cue
        ccd2cue convert disc.ccd -o disc.cue
        ccd2cue convert disc.ccd -o disc.cue --image disc.bin
        ccd2cue convert disc.ccd -o out/disc.cue --force

    """
    from ccd2cue.cli.options import ConversionOptions
    from ccd2cue.converters import CdtWriter, CueWriter, convert_ccd_sheet

    configure_logging(verbose)

    options = ConversionOptions.from_cli(
        input_path=input_file,
        output_path=output,
        image_name=image,
        cdt_name=cdt,
        absolute=absolute,
        force=force,
    )

    if options.output_path is not None:
        _refuse_overwrite(options.output_path, options.force)

    cue, cdt_data = convert_ccd_sheet(
        options.input_path, options.image_name, options.cdt_name
    )

    if cdt_data.entries:
        _refuse_overwrite(options.cdt_path, options.force)

    if options.output_path is None:
        CueWriter().write_stream(cue, sys.stdout)
    else:
        CueWriter().write(cue, options.output_path)

    if cdt_data.entries:
        CdtWriter().write(cdt_data, options.cdt_path)

    if options.output_path is not None:
        console.print(
            f"\n[bold green]✓ Wrote {escape(str(options.output_path))}[/bold green]"
        )
        if cdt_data.entries:
            console.print(
                f"[bold green]✓ Wrote {cdt_data.entries} CD-Text pack(s) to "
                f"{escape(str(options.cdt_path))}[/bold green]"
            )
        console.print()


def _refuse_overwrite(path: Path, force: bool) -> None:
    if path.exists() and not force:
        error_console.print(
            f"\n[bold red]✗ Output file already exists: {escape(str(path))}[/bold red]\n"
            "Use --force to overwrite."
        )
        raise typer.Exit(code=1)


@app.command()
@handle_exceptions
def info(input_file: InputFile) -> None:
    """Display a summary of a CCD sheet.

    Examples
    --------
        ccd2cue info disc.ccd

    """
    from ccd2cue.transform import MODE_DATA_TYPES, frames_to_msf

    sheet = load_ccd_sheet(input_file)

    console.print(
        Panel.fit(
            f"[bold]CloneCD Sheet[/bold]\nFile: {escape(str(input_file))}",
            title="File Info",
        )
    )
    _print_summary(sheet)

    if not sheet.tracks:
        return

    tracks_table = Table(title="Tracks")
    tracks_table.add_column("#", style="dim")
    tracks_table.add_column("Mode")
    tracks_table.add_column("Flags")
    tracks_table.add_column("ISRC")
    tracks_table.add_column("INDEX 01")

    for number, track in enumerate(sheet.tracks, start=1):
        start = track.index[1]
        data_type = MODE_DATA_TYPES.get(track.mode)
        tracks_table.add_row(
            str(number),
            data_type.value if data_type is not None else f"? ({track.mode})",
            track.flags or "-",
            track.isrc or "-",
            str(frames_to_msf(start)) if start >= 0 else "-",
        )

    console.print(tracks_table)


def _print_summary(sheet: CcdSheet) -> None:
    """Print a summary of the CCD sheet contents."""
    table = Table(title="Sheet Summary", show_header=False, box=None)
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("CloneCD Version", str(sheet.clonecd.version))
    table.add_row("Catalog", sheet.disc.catalog or "-")
    table.add_row("", "")  # Spacer
    table.add_row("Sessions", str(sheet.disc.sessions))
    table.add_row("TOC Entries", str(sheet.disc.toc_entries))
    table.add_row("Tracks", str(sheet.track_entries))
    table.add_row("CD-Text Packs", str(sheet.cdtext.entries))
    table.add_row("Data Tracks Scrambled", str(sheet.disc.data_tracks_scrambled))

    console.print(table)


@app.command()
@handle_exceptions
def dump(input_file: InputFile) -> None:
    """Print the parsed CCD sheet as YAML.

    Shows what the parser extracted after announced counts were
    reconciled with the sections actually present.

    Examples
    --------
        ccd2cue dump disc.ccd

    """
    import yaml

    sheet = load_ccd_sheet(input_file)
    typer.echo(yaml.safe_dump(sheet.to_dict(), sort_keys=False), nl=False)


if __name__ == "__main__":
    app()
