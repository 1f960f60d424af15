#!/usr/bin/env python3
"""
imco.cli.cli

Typer-based CLI for converting images between formats.

Examples
--------
Convert one file, inferring the output format from its extension:

    imco -i photo.jpg -o photo.png

Convert several files to WebP next to the working directory:

    imco -i a.png,b.png -o a.webp,b.webp -d webp

Batch-convert every PNG of a directory into ``out/``:

    imco -b -i "imgs/*.png" -o out -d jpg
"""

from __future__ import annotations

import logging
import traceback

import typer
from pydantic import ValidationError

from imco import __version__
from imco.application.results import ConversionOutcome
from imco.errors import ImcoError
from imco.formats import ImageFormat
from imco.schemas import ConversionRequestConfig

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="imco",
    help="Convert images between formats, one by one or in batches.",
    add_completion=False,
)

FILES_METAVAR = "FILE,..."
FORMATS_EPILOG = "Supported formats: " + "; ".join(
    "/".join(fmt.extensions) for fmt in ImageFormat
)


def _split_files(raw: str) -> tuple[str, ...]:
    """Split a comma-separated file list."""
    return tuple(raw.split(","))


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _print_conversion_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly conversion error.

    Parameters
    ----------
    exc : Exception
        Exception raised during conversion.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    if isinstance(exc, ImcoError):
        typer.echo(str(exc))
    else:
        typer.echo(f"{type(exc).__name__}: {exc}")
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo(
            "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
            err=True,
        )
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _report(outcome: ConversionOutcome) -> None:
    typer.echo(outcome.summary())


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"imco {__version__}")
        raise typer.Exit()


@app.command(epilog=FORMATS_EPILOG, no_args_is_help=True)
def convert_cmd(
    input_files: str = typer.Option(
        ...,
        "--input",
        "-i",
        metavar=FILES_METAVAR,
        help="Input files (separated by ',').",
    ),
    output_files: str = typer.Option(
        ...,
        "--output",
        "-o",
        metavar=FILES_METAVAR,
        help="Output files (separated by ',').",
    ),
    input_format: str | None = typer.Option(
        None,
        "--input-format",
        "-f",
        metavar="FORMAT",
        help="Input files format (see below).",
    ),
    output_format: str | None = typer.Option(
        None,
        "--output-format",
        "-d",
        metavar="FORMAT",
        help="Output files format (see below).",
    ),
    batch: bool = typer.Option(
        False,
        "--batch",
        "-b",
        help="Enables batch processing (using patterns to specify multiple files at once).",
    ),
    jobs: int = typer.Option(
        1,
        "--jobs",
        "-j",
        min=1,
        help=(
            "Number of files converted concurrently. On error, files already"
            " being converted may still be written."
        ),
    ),
    debug: bool = typer.Option(False, "--debug", help="Show full tracebacks on error."),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=_version_callback,
        is_eager=True,
        help="Displays the version.",
    ),
) -> None:
    """Convert images to another format.

    Parameters
    ----------
    input_files : str
        Comma-separated input paths, or glob patterns with ``--batch``.
    output_files : str
        Comma-separated output paths; with ``--batch``, output directories.
        Inputs beyond the last output reuse the last one.
    input_format : str | None, default=None
        Format forced for decoding every input.
    output_format : str | None, default=None
        Format every output is encoded to.
    batch : bool, default=False
        Whether to expand inputs as glob patterns.
    jobs : int, default=1
        Number of conversions run concurrently.
    debug : bool, default=False
        Whether to enable debug logging and tracebacks.

    Notes
    -----
    - Processing stops at the first failing file; files converted before it
      are already reported.
    """
    del version
    _configure_logging(debug)

    try:
        config = ConversionRequestConfig(
            inputs=_split_files(input_files),
            outputs=_split_files(output_files),
            input_format=input_format,
            output_format=output_format,
            batch=batch,
            jobs=jobs,
        )
    except ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc

    try:
        from imco.application.use_cases import run_conversions

        run_conversions(config.to_options(), on_outcome=_report)
    except ImcoError as exc:
        raise typer.Exit(code=_print_conversion_error(exc, debug))
    except Exception as exc:
        # Unexpected crash: still show a clean message; debug prints traceback.
        if debug:
            logger.exception("unexpected error during conversion")
        raise typer.Exit(code=_print_conversion_error(exc, debug))


if __name__ == "__main__":
    app()
