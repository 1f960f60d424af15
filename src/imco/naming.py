"""Output path derivation for work units."""

from __future__ import annotations

import os
from pathlib import PurePath

from imco.application.options import (
    Absent,
    BatchDirectory,
    ExplicitFormatOnly,
    ExplicitPath,
    OutputSpec,
)
from imco.errors import InvalidBatching, NoDestFormat
from imco.formats import ImageFormat, resolve_from_path


def derived_filename(input_path: str, image_format: ImageFormat) -> str:
    """Return ``<stem>.<canonical extension>`` for ``input_path``.

    Paths without a usable stem (empty, ``.``, ``..`` or a root) keep the whole
    input string and get the extension appended.
    """
    name = PurePath(input_path).name
    if name in {"", ".", ".."}:
        return f"{input_path}.{image_format.extension}"
    return f"{PurePath(input_path).stem}.{image_format.extension}"


def check_destination(
    output_spec: OutputSpec, target_format: ImageFormat | None, batch: bool
) -> None:
    """Reject requests with no determinable destination.

    Raises
    ------
    NoDestFormat
        If there is neither an output path nor an output format.
    InvalidBatching
        If batch mode (or a batch directory) is used without an output format.
    """
    if isinstance(output_spec, ExplicitFormatOnly):
        return
    if isinstance(output_spec, Absent) and target_format is None:
        raise NoDestFormat()
    if target_format is None and (batch or isinstance(output_spec, BatchDirectory)):
        raise InvalidBatching()


def derive_output(
    input_path: str,
    output_spec: OutputSpec,
    target_format: ImageFormat | None,
    batch: bool,
) -> tuple[str, ImageFormat]:
    """Resolve the output path and output format of one conversion.

    Parameters
    ----------
    input_path : str
        Input file path.
    output_spec : OutputSpec
        Destination chosen during pairing.
    target_format : ImageFormat | None
        Output format override.
    batch : bool
        Whether batch mode is enabled.

    Returns
    -------
    tuple[str, ImageFormat]
        Output path and the format to encode it in.

    Raises
    ------
    NoDestFormat, InvalidBatching, InvalidFormat
        When no destination can be determined, or an explicit output path has
        an unknown extension and no target format was given.
    """
    check_destination(output_spec, target_format, batch)
    match output_spec:
        case ExplicitFormatOnly(image_format):
            chosen = target_format or image_format
            return derived_filename(input_path, chosen), chosen
        case ExplicitPath(path):
            if target_format is not None:
                return path, target_format
            return path, resolve_from_path(path)
        case BatchDirectory(directory) if target_format is not None:
            return (
                os.path.join(directory, derived_filename(input_path, target_format)),
                target_format,
            )
        case Absent() if target_format is not None:
            return derived_filename(input_path, target_format), target_format
    raise TypeError(f"Unknown output spec: {output_spec!r}")
