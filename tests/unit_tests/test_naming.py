"""Unit tests for output path derivation."""

from __future__ import annotations

import os

import pytest

from imco.application.options import (
    Absent,
    BatchDirectory,
    ExplicitFormatOnly,
    ExplicitPath,
)
from imco.errors import InvalidBatching, InvalidFormat, NoDestFormat
from imco.formats import ImageFormat
from imco.naming import check_destination, derive_output, derived_filename


def test_format_only_derives_stem_plus_canonical_extension() -> None:
    """Replace the extension with the target format's canonical one."""
    assert derive_output(
        "photo.jpg", ExplicitFormatOnly(ImageFormat.PNG), ImageFormat.PNG, False
    ) == ("photo.png", ImageFormat.PNG)


def test_format_only_drops_directory_components() -> None:
    """Derive a bare file name relative to the working directory."""
    assert derive_output(
        "some/dir/photo.jpg", Absent(), ImageFormat.JPEG, False
    ) == ("photo.jpg", ImageFormat.JPEG)


def test_explicit_path_with_target_format_is_used_as_is() -> None:
    """Keep the user's path even when its extension differs from the format."""
    assert derive_output(
        "a.png", ExplicitPath("out/b.dat"), ImageFormat.WEBP, False
    ) == ("out/b.dat", ImageFormat.WEBP)


def test_explicit_path_infers_format_from_extension() -> None:
    """Infer the output format from the explicit output path."""
    assert derive_output("a.png", ExplicitPath("b.tif"), None, False) == (
        "b.tif",
        ImageFormat.TIFF,
    )


def test_explicit_path_with_unknown_extension_fails() -> None:
    """Fail when neither a format nor a known extension is available."""
    with pytest.raises(InvalidFormat) as excinfo:
        derive_output("a.png", ExplicitPath("b.unknown"), None, False)
    assert excinfo.value.token == "b.unknown"


def test_batch_directory_naming() -> None:
    """Place batch outputs inside the directory with the target extension."""
    assert derive_output(
        "dir/photo.jpg", BatchDirectory("out"), ImageFormat.WEBP, True
    ) == (os.path.join("out", "photo.webp"), ImageFormat.WEBP)


@pytest.mark.parametrize(
    "spec", [BatchDirectory("out"), ExplicitPath("out/x.png")]
)
def test_batch_without_format_is_rejected(spec: object) -> None:
    """Batch mode needs a target format to name each output."""
    with pytest.raises(InvalidBatching):
        derive_output("a.png", spec, None, True)


@pytest.mark.parametrize("batch", [True, False])
def test_absent_without_format_is_rejected(batch: bool) -> None:
    """No destination at all is reported before anything else."""
    with pytest.raises(NoDestFormat):
        check_destination(Absent(), None, batch)


def test_check_destination_accepts_resolvable_requests() -> None:
    """Accept every combination that names a destination."""
    check_destination(ExplicitPath("x.png"), None, False)
    check_destination(ExplicitFormatOnly(ImageFormat.PNG), None, True)
    check_destination(BatchDirectory("out"), ImageFormat.PNG, True)
    check_destination(Absent(), ImageFormat.PNG, False)


@pytest.mark.parametrize(
    ("input_path", "expected"),
    [
        ("photo.jpeg", "photo.png"),
        ("archive.tar.gz", "archive.tar.png"),
        ("noext", "noext.png"),
        (".hidden", ".hidden.png"),
        ("", ".png"),
        ("/", "/.png"),
        ("..", "...png"),
    ],
)
def test_derived_filename(input_path: str, expected: str) -> None:
    """Use the stem, or the whole input when there is no usable stem."""
    assert derived_filename(input_path, ImageFormat.PNG) == expected
