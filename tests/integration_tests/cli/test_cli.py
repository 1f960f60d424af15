"""Integration tests for the CLI against real image files."""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path

import pytest
from PIL import Image
from typer.testing import CliRunner

from imco.cli.cli import app

runner = CliRunner()


def test_cli_forced_format_keeps_explicit_path(
    tmp_path: Path, make_image: Callable[..., Path], monkeypatch: pytest.MonkeyPatch
) -> None:
    """Encode in the forced format while keeping the explicit output path."""
    monkeypatch.chdir(tmp_path)
    make_image(tmp_path / "src" / "photo.jpg", "JPEG")

    result = runner.invoke(
        app, ["-i", "src/photo.jpg", "-o", "photo.bmp", "-d", "png"]
    )

    assert result.exit_code == 0, result.output
    assert result.output == "src/photo.jpg (jpg) -> photo.bmp (png)\n"
    with Image.open(tmp_path / "photo.bmp") as written:
        assert written.format == "PNG"


def test_cli_is_fail_fast(
    tmp_path: Path, make_image: Callable[..., Path], monkeypatch: pytest.MonkeyPatch
) -> None:
    """Print earlier successes, then the error, and skip later inputs."""
    monkeypatch.chdir(tmp_path)
    make_image(tmp_path / "good.png")
    make_image(tmp_path / "good2.png")

    result = runner.invoke(
        app,
        ["-i", "good.png,bad.png,good2.png", "-o", "good.gif,bad.gif,good2.gif"],
    )

    assert result.exit_code == 1
    assert result.output.splitlines() == [
        "good.png (png) -> good.gif (gif)",
        "Failed reading 'bad.png' => Not found",
    ]
    assert (tmp_path / "good.gif").exists()
    assert not (tmp_path / "good2.gif").exists()


def test_cli_batch_writes_into_directory(
    tmp_path: Path, make_image: Callable[..., Path], monkeypatch: pytest.MonkeyPatch
) -> None:
    """Expand patterns and name outputs inside the shared directory."""
    monkeypatch.chdir(tmp_path)
    make_image(tmp_path / "imgs" / "b.png")
    make_image(tmp_path / "imgs" / "a.png")
    (tmp_path / "out").mkdir()

    result = runner.invoke(app, ["-b", "-i", "imgs/*.png", "-o", "out", "-d", "webp"])

    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == [
        f"{os.path.join('imgs', 'a.png')} (png) -> {os.path.join('out', 'a.webp')} (webp)",
        f"{os.path.join('imgs', 'b.png')} (png) -> {os.path.join('out', 'b.webp')} (webp)",
    ]
    assert sorted(p.name for p in (tmp_path / "out").iterdir()) == ["a.webp", "b.webp"]


def test_cli_batch_requires_output_format(
    tmp_path: Path, make_image: Callable[..., Path], monkeypatch: pytest.MonkeyPatch
) -> None:
    """Refuse batch mode without an output format and write nothing."""
    monkeypatch.chdir(tmp_path)
    make_image(tmp_path / "a.png")

    result = runner.invoke(app, ["-b", "-i", "*.png", "-o", "out.jpg"])

    assert result.exit_code == 2
    assert "Batch processing requires an output format" in result.output
    assert not (tmp_path / "out.jpg").exists()


def test_cli_unknown_output_format(tmp_path: Path) -> None:
    """Reject unknown format tokens with the help hint."""
    result = runner.invoke(
        app, ["-i", str(tmp_path / "a.png"), "-o", "x", "-d", "zzz"]
    )
    assert result.exit_code == 2
    assert "Unknown format zzz, use --help for a list" in result.output


def test_cli_parallel_jobs(
    tmp_path: Path, make_image: Callable[..., Path], monkeypatch: pytest.MonkeyPatch
) -> None:
    """Convert on a worker pool while reporting in input order."""
    monkeypatch.chdir(tmp_path)
    names = [f"img{index}.png" for index in range(5)]
    for name in names:
        make_image(tmp_path / name)

    outputs = [name.replace(".png", ".tga") for name in names]
    result = runner.invoke(
        app, ["-i", ",".join(names), "-o", ",".join(outputs), "-d", "tga", "-j", "3"]
    )

    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == [
        f"img{index}.png (png) -> img{index}.tga (tga)" for index in range(5)
    ]
