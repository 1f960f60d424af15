"""Shared pytest configuration, marker assignment and image fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from PIL import Image


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def make_image() -> Callable[..., Path]:
    """Return a factory writing a small RGB image in the requested format."""

    def _make(
        path: Path, pillow_format: str = "PNG", mode: str = "RGB"
    ) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        color = (200, 40, 40, 255)[: len(mode)] if mode != "L" else 128
        Image.new(mode, (8, 6), color).save(path, format=pillow_format)
        return path

    return _make
