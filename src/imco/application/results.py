"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass

from imco.formats import ImageFormat


@dataclass(frozen=True)
class ConversionOutcome:
    """Structured outcome of one successful conversion."""

    input_path: str
    output_path: str
    output_format: ImageFormat
    resolved_input_format: ImageFormat | None = None

    def summary(self) -> str:
        """Return the one-line report printed for this conversion."""
        if self.resolved_input_format is not None:
            return (
                f"{self.input_path} ({self.resolved_input_format.extension}) -> "
                f"{self.output_path} ({self.output_format.extension})"
            )
        return f"{self.input_path} -> {self.output_path} ({self.output_format.extension})"
