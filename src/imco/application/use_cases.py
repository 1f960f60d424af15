"""Application use-cases orchestrating conversion workflows."""

from __future__ import annotations

import logging
import os
from collections import deque
from collections.abc import Callable, Iterator, Sequence
from concurrent import futures
from typing import TypeAlias

from imco.application.options import ConversionOptions, WorkUnit
from imco.application.ports import ImageCodec
from imco.application.results import ConversionOutcome
from imco.classify import classify_codec, classify_io
from imco.errors import ImcoError, InvalidBatching
from imco.formats import ImageFormat, resolve
from imco.naming import check_destination, derive_output
from imco.pairing import build_work_units, pair
from imco.patterns import expand

logger = logging.getLogger(__name__)

OutcomeCallback: TypeAlias = Callable[[ConversionOutcome], None]


def _default_codec() -> ImageCodec:
    from imco.adapters.pillow_codec import PillowCodec

    return PillowCodec()


def convert_work_unit(
    unit: WorkUnit, batch: bool, codec: ImageCodec
) -> ConversionOutcome:
    """Use-case: decode one input and re-encode it to its destination.

    Parameters
    ----------
    unit : WorkUnit
        Conversion request.
    batch : bool
        Whether batch naming rules apply.
    codec : ImageCodec
        Codec used for reading, decoding and encoding.

    Returns
    -------
    ConversionOutcome
        Paths and formats of the finished conversion.

    Raises
    ------
    ImcoError
        On the first failing stage.
    """
    path = unit.input_path
    check_destination(unit.output_spec, unit.output_format_override, batch)

    try:
        reader = codec.open(path)
    except OSError as exc:
        raise classify_io(exc, path, is_read=True) from exc

    if unit.input_format_override is not None:
        reader.set_format(unit.input_format_override)
    try:
        image = reader.decode()
    except Exception as exc:
        raise classify_codec(exc, path, is_read=True) from exc
    input_format = unit.input_format_override or reader.format()

    output_path, output_format = derive_output(
        path, unit.output_spec, unit.output_format_override, batch
    )
    try:
        if unit.output_format_override is not None:
            image.save_with_format(output_path, output_format)
        else:
            image.save(output_path)
    except Exception as exc:
        raise classify_codec(exc, path) from exc

    logger.debug("converted %s -> %s", path, output_path)
    return ConversionOutcome(
        input_path=path,
        output_path=output_path,
        output_format=output_format,
        resolved_input_format=input_format,
    )


def plan_work_units(options: ConversionOptions) -> list[WorkUnit]:
    """Use-case: resolve formats, expand patterns and pair inputs with outputs.

    Format tokens are resolved, and batch mode without an output format is
    rejected, before any filesystem access. A pattern matching nothing still
    fails with ``InvalidBatching`` in that case.
    """
    input_format = _resolve_optional(options.input_format)
    output_format = _resolve_optional(options.output_format)
    if options.batch and output_format is None:
        raise InvalidBatching()
    inputs = expand(options.inputs, options.batch)
    units = build_work_units(
        pair(inputs, options.outputs), input_format, output_format, options.batch
    )
    logger.debug("planned %d work units", len(units))
    return units


def _resolve_optional(token: str | None) -> ImageFormat | None:
    return resolve(token) if token is not None else None


def _destination(unit: WorkUnit, batch: bool) -> str | None:
    try:
        path, _ = derive_output(
            unit.input_path, unit.output_spec, unit.output_format_override, batch
        )
    except ImcoError:
        return None
    return os.path.normpath(path)


def _has_shared_destination(units: Sequence[WorkUnit], batch: bool) -> bool:
    seen: set[str] = set()
    for unit in units:
        path = _destination(unit, batch)
        if path is None:
            continue
        if path in seen:
            return True
        seen.add(path)
    return False


def _convert_parallel(
    units: Sequence[WorkUnit], batch: bool, codec: ImageCodec, jobs: int
) -> Iterator[ConversionOutcome]:
    """Convert on a pool with at most ``jobs`` units in flight.

    No unit is submitted once an in-flight unit has failed, so only units
    already running when the failure surfaces may still write their output.
    """
    executor = futures.ThreadPoolExecutor(max_workers=jobs)
    remaining = iter(units)
    in_flight: deque[futures.Future[ConversionOutcome]] = deque()

    def submit_next() -> None:
        if any(f.done() and f.exception() is not None for f in in_flight):
            return
        unit = next(remaining, None)
        if unit is not None:
            in_flight.append(executor.submit(convert_work_unit, unit, batch, codec))

    try:
        for _ in range(jobs):
            submit_next()
        while in_flight:
            outcome = in_flight.popleft().result()
            submit_next()
            yield outcome
    finally:
        executor.shutdown(wait=True, cancel_futures=True)


def iter_conversions(
    options: ConversionOptions, codec: ImageCodec | None = None
) -> Iterator[ConversionOutcome]:
    """Use-case: yield conversion outcomes in input order, stopping at the first error.

    With ``options.jobs > 1`` conversions run on a bounded thread pool; outcomes
    are still yielded in input order and no further unit is started once an
    error surfaces. Requests where two units write the same path run
    sequentially.
    """
    codec = codec or _default_codec()
    units = plan_work_units(options)
    parallel = options.jobs > 1 and len(units) > 1
    if parallel and _has_shared_destination(units, options.batch):
        logger.debug("outputs share a destination; converting sequentially")
        parallel = False
    if parallel:
        yield from _convert_parallel(units, options.batch, codec, options.jobs)
        return
    for unit in units:
        yield convert_work_unit(unit, options.batch, codec)


def run_conversions(
    options: ConversionOptions,
    codec: ImageCodec | None = None,
    on_outcome: OutcomeCallback | None = None,
) -> list[ConversionOutcome]:
    """Use-case: convert every planned work unit, fail-fast.

    ``on_outcome`` is called after each success, before the next unit is
    reported, so callers can print progress that survives a later failure.
    """
    outcomes: list[ConversionOutcome] = []
    for outcome in iter_conversions(options, codec):
        if on_outcome is not None:
            on_outcome(outcome)
        outcomes.append(outcome)
    return outcomes


def build_conversion_options(
    *,
    inputs: Sequence[str],
    outputs: Sequence[str] = (),
    input_format: str | None = None,
    output_format: str | None = None,
    batch: bool = False,
    jobs: int = 1,
) -> ConversionOptions:
    """Build typed option object from command/API params."""
    return ConversionOptions(
        inputs=tuple(inputs),
        outputs=tuple(outputs),
        input_format=input_format,
        output_format=output_format,
        batch=batch,
        jobs=jobs,
    )
