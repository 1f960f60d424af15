"""Public file-based conversion API (delegates to application use-cases)."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

from pydantic import ValidationError

from imco.application.ports import ImageCodec
from imco.application.results import ConversionOutcome
from imco.application.use_cases import run_conversions
from imco.schemas import ConversionRequestConfig


def convert_files(
    inputs: Sequence[str],
    outputs: Sequence[str] = (),
    *,
    input_format: Optional[str] = None,
    output_format: Optional[str] = None,
    batch: bool = False,
    jobs: int = 1,
    codec: Optional[ImageCodec] = None,
) -> list[ConversionOutcome]:
    """Convert image files and return one outcome per converted input.

    Raises
    ------
    ValueError
        If the request itself is malformed (empty input list, blank entries).
    ImcoError
        On the first conversion failure.
    """
    try:
        config = ConversionRequestConfig(
            inputs=tuple(inputs),
            outputs=tuple(outputs),
            input_format=input_format,
            output_format=output_format,
            batch=batch,
            jobs=jobs,
        )
    except ValidationError as exc:
        raise ValueError(f"Invalid conversion parameters: {exc}") from exc
    return run_conversions(config.to_options(), codec=codec)
