"""Top-level API for batch image-format conversion."""

from __future__ import annotations

from collections.abc import Sequence

from imco.application.ports import ImageCodec
from imco.application.results import ConversionOutcome
from imco.errors import ImcoError
from imco.formats import ImageFormat

__version__ = "0.4.0"


def convert_files(
    inputs: Sequence[str],
    outputs: Sequence[str] = (),
    *,
    input_format: str | None = None,
    output_format: str | None = None,
    batch: bool = False,
    jobs: int = 1,
    codec: ImageCodec | None = None,
) -> list[ConversionOutcome]:
    """Convert image files to another format.

    Parameters
    ----------
    inputs : Sequence[str]
        Input paths, or glob patterns when ``batch`` is enabled.
    outputs : Sequence[str], default=()
        Output paths (or directories in batch mode), paired with inputs by
        position; the last entry is reused for any remaining inputs.
    input_format : str, optional
        Format token forcing how every input is decoded.
    output_format : str, optional
        Format token every output is encoded to.
    batch : bool, default=False
        Expand inputs as glob patterns and treat outputs as directories.
    jobs : int, default=1
        Number of conversions run concurrently.
    codec : ImageCodec, optional
        Codec adapter; defaults to the Pillow-backed codec.

    Returns
    -------
    list[ConversionOutcome]
        Outcomes in input order.

    Raises
    ------
    ImcoError
        On the first failed conversion; later inputs are not attempted.
    """
    from .api import convert_files as _impl

    return _impl(
        inputs,
        outputs,
        input_format=input_format,
        output_format=output_format,
        batch=batch,
        jobs=jobs,
        codec=codec,
    )


__all__ = [
    "ConversionOutcome",
    "ImageFormat",
    "ImcoError",
    "convert_files",
]
