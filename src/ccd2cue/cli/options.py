"""Runtime options for the convert command."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from ccd2cue.paths import make_reference_name


class ConversionOptions(BaseModel):
    """Settings gathered from the command line.

    Names omitted on the command line are derived from the input sheet's
    reference name (its file name without extension).

    Example:
    -------
        ```
        ccd2cue convert disc.ccd -o disc.cue
        # image_name="disc.img", cdt_name="disc.cdt"
        ```

    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    input_path: Path
    output_path: Annotated[
        Path | None,
        Field(default=None, description="CUE sheet path; None writes to stdout"),
    ]
    image_name: Annotated[
        str,
        Field(min_length=1, description="Disc image name used in the FILE entry"),
    ]
    cdt_name: Annotated[
        str,
        Field(min_length=1, description="CDT file name used in the CDTEXTFILE entry"),
    ]
    absolute: bool = False
    force: bool = False

    @classmethod
    def from_cli(
        cls,
        input_path: Path,
        output_path: Path | None = None,
        image_name: str | None = None,
        cdt_name: str | None = None,
        absolute: bool = False,
        force: bool = False,
    ) -> ConversionOptions:
        """Build options, filling in derived names."""
        reference = make_reference_name(str(input_path), keep_dirname=absolute)
        return cls(
            input_path=input_path,
            output_path=output_path,
            image_name=image_name or f"{reference}.img",
            cdt_name=cdt_name or f"{reference}.cdt",
            absolute=absolute,
            force=force,
        )

    @property
    def cdt_path(self) -> Path:
        """Where the CDT file is written.

        Relative CDT names are resolved against the CUE sheet's directory,
        or the working directory when the sheet goes to stdout.
        """
        cdt = Path(self.cdt_name)
        if cdt.is_absolute():
            return cdt
        base = self.output_path.parent if self.output_path is not None else Path.cwd()
        return base / cdt
