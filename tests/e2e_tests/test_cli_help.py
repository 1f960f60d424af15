"""End-to-end smoke tests for the installed console script."""

from __future__ import annotations

import subprocess
from collections.abc import Callable
from pathlib import Path

import imco


def test_package_import_smoke() -> None:
    """Ensure package can be imported in the test process."""
    assert imco.__version__


def test_cli_help_smoke() -> None:
    """Ensure the installed CLI entrypoint responds to --help."""
    result = subprocess.run(
        ["imco", "--help"],
        capture_output=True,
        text=True,
        check=False,
    )

    assert result.returncode == 0, result.stderr
    assert "Convert images" in result.stdout


def test_cli_version_smoke() -> None:
    """Ensure --version prints the package version."""
    result = subprocess.run(
        ["imco", "--version"], capture_output=True, text=True, check=False
    )

    assert result.returncode == 0, result.stderr
    assert result.stdout.strip() == f"imco {imco.__version__}"


def test_cli_missing_input_fails_with_status(tmp_path: Path) -> None:
    """Exit non-zero and print the read failure on stdout."""
    result = subprocess.run(
        ["imco", "-i", "definitely-missing.png", "-o", "out.png"],
        capture_output=True,
        text=True,
        check=False,
        cwd=tmp_path,
    )

    assert result.returncode == 1
    assert "Failed reading 'definitely-missing.png' => Not found" in result.stdout


def test_cli_converts_file(tmp_path: Path, make_image: Callable[..., Path]) -> None:
    """Convert a real file through the console script."""
    make_image(tmp_path / "in.png")
    result = subprocess.run(
        ["imco", "-i", "in.png", "-o", "out.bmp"],
        capture_output=True,
        text=True,
        check=False,
        cwd=tmp_path,
    )

    assert result.returncode == 0, result.stdout + result.stderr
    assert result.stdout == "in.png (png) -> out.bmp (bmp)\n"
    assert (tmp_path / "out.bmp").is_file()
