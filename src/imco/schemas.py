"""Pydantic schemas for runtime validation of conversion requests."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from imco.application.options import ConversionOptions


class ConversionRequestConfig(BaseModel):
    """Validated command/API input for a conversion run."""

    model_config = ConfigDict(extra="forbid")

    inputs: tuple[str, ...] = Field(min_length=1)
    outputs: tuple[str, ...] = ()
    input_format: str | None = None
    output_format: str | None = None
    batch: bool = False
    jobs: int = Field(default=1, ge=1)

    @field_validator("inputs", "outputs")
    @classmethod
    def _validate_entries(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if any(not item.strip() for item in value):
            raise ValueError("file lists cannot contain empty entries.")
        return value

    @field_validator("input_format", "output_format")
    @classmethod
    def _blank_format_is_absent(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            return None
        return value

    def to_options(self) -> ConversionOptions:
        """Return the frozen options object consumed by the pipeline."""
        return ConversionOptions(
            inputs=self.inputs,
            outputs=self.outputs,
            input_format=self.input_format,
            output_format=self.output_format,
            batch=self.batch,
            jobs=self.jobs,
        )
