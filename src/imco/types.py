"""Shared type aliases for conversion modules."""

from __future__ import annotations

from typing import Literal, TypeAlias

IoReason: TypeAlias = Literal[
    "Not found",
    "Permission denied",
    "Already exists",
    "Is not a directory",
    "Is a directory",
    "Storage is full",
    "File is too large",
    "Unknown (unhandled)",
]

UnsupportedKind: TypeAlias = Literal["color", "format", "feature", "other"]
