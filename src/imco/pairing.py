"""Positional pairing of inputs with output destinations."""

from __future__ import annotations

from collections.abc import Sequence

from imco.application.options import (
    Absent,
    BatchDirectory,
    ExplicitFormatOnly,
    ExplicitPath,
    OutputSpec,
    WorkUnit,
)
from imco.formats import ImageFormat


def pair(
    inputs: Sequence[str], outputs: Sequence[str]
) -> list[tuple[str, str | None]]:
    """Pair every input with an output by position.

    Inputs past the end of ``outputs`` reuse its last element, so a single
    output (shared directory or path) serves any number of inputs. With no
    outputs at all every input is paired with ``None``.
    """
    if not outputs:
        return [(item, None) for item in inputs]
    last = len(outputs) - 1
    return [(item, outputs[min(index, last)]) for index, item in enumerate(inputs)]


def output_spec_for(
    output: str | None, output_format: ImageFormat | None, batch: bool
) -> OutputSpec:
    """Choose the output spec variant for one paired output."""
    if output is not None:
        return BatchDirectory(output) if batch else ExplicitPath(output)
    if output_format is not None:
        return ExplicitFormatOnly(output_format)
    return Absent()


def build_work_units(
    pairs: Sequence[tuple[str, str | None]],
    input_format: ImageFormat | None,
    output_format: ImageFormat | None,
    batch: bool,
) -> list[WorkUnit]:
    """Turn ``(input, output)`` pairs into work units, preserving order."""
    return [
        WorkUnit(
            input_path=input_path,
            output_spec=output_spec_for(output, output_format, batch),
            input_format_override=input_format,
            output_format_override=output_format,
        )
        for input_path, output in pairs
    ]
