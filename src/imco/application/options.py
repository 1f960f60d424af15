"""Typed option objects and work units shared across conversion use-cases."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from imco.formats import ImageFormat


@dataclass(frozen=True)
class ExplicitPath:
    """Output written exactly to ``path``."""

    path: str


@dataclass(frozen=True)
class ExplicitFormatOnly:
    """No output path; the name is derived from the input and ``image_format``."""

    image_format: ImageFormat


@dataclass(frozen=True)
class BatchDirectory:
    """Batch output placed inside ``path``."""

    path: str


@dataclass(frozen=True)
class Absent:
    """No destination information at all."""


OutputSpec: TypeAlias = ExplicitPath | ExplicitFormatOnly | BatchDirectory | Absent


@dataclass(frozen=True)
class WorkUnit:
    """One file's conversion request."""

    input_path: str
    output_spec: OutputSpec
    input_format_override: ImageFormat | None = None
    output_format_override: ImageFormat | None = None


@dataclass(frozen=True)
class ConversionOptions:
    """Pre-validated options consumed by the conversion pipeline."""

    inputs: tuple[str, ...]
    outputs: tuple[str, ...] = ()
    input_format: str | None = None
    output_format: str | None = None
    batch: bool = False
    jobs: int = 1
