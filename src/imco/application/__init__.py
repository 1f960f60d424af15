"""Application-layer use-cases and option objects."""

from __future__ import annotations

from collections.abc import Sequence

from imco.application.options import (
    Absent,
    BatchDirectory,
    ConversionOptions,
    ExplicitFormatOnly,
    ExplicitPath,
    OutputSpec,
    WorkUnit,
)
from imco.application.ports import DecodedImage, ImageCodec, ImageReader
from imco.application.results import ConversionOutcome


def build_conversion_options(
    *,
    inputs: Sequence[str],
    outputs: Sequence[str] = (),
    input_format: str | None = None,
    output_format: str | None = None,
    batch: bool = False,
    jobs: int = 1,
) -> ConversionOptions:
    """Build typed conversion options via lazy use-case import."""
    from imco.application.use_cases import build_conversion_options as _impl

    return _impl(
        inputs=inputs,
        outputs=outputs,
        input_format=input_format,
        output_format=output_format,
        batch=batch,
        jobs=jobs,
    )


def run_conversions(
    options: ConversionOptions,
    codec: ImageCodec | None = None,
) -> list[ConversionOutcome]:
    """Run the conversion pipeline via lazy use-case import."""
    from imco.application.use_cases import run_conversions as _impl

    return _impl(options, codec=codec)


__all__ = [
    "Absent",
    "BatchDirectory",
    "ConversionOptions",
    "ConversionOutcome",
    "DecodedImage",
    "ExplicitFormatOnly",
    "ExplicitPath",
    "ImageCodec",
    "ImageReader",
    "OutputSpec",
    "WorkUnit",
    "build_conversion_options",
    "run_conversions",
]
