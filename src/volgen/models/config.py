"""Pydantic models for the generation configuration.

The TOML files use the key ``exporter`` for an array of exporter tables;
the model exposes it as ``exporters``. Models are frozen: once a config
has been validated the engine only reads from it.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

DEFAULT_TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S.%f%z"


class ExporterConfig(BaseModel):
    """One ``[[exporter]]`` table."""

    model_config = ConfigDict(frozen=True)

    name: str
    verbose: bool = False
    enabled: bool = False
    fields: dict[str, str] = Field(default_factory=dict)


class GenerationConfig(BaseModel):
    """Everything the engine needs to produce a distribution."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    number_of_entries: int = Field(ge=0)
    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT
    use_now_as_timestamp: bool = True
    generation_duration: str | None = "10m"
    start_timestamp: str | None = None
    distribution_by: str = "even"
    exporters: list[ExporterConfig] = Field(default_factory=list, alias="exporter")

    @model_validator(mode="after")
    def _require_start_timestamp(self) -> GenerationConfig:
        if not self.use_now_as_timestamp and self.start_timestamp is None:
            raise ValueError("start_timestamp is required when use_now_as_timestamp is false")
        return self

    def enabled_exporters(self) -> list[ExporterConfig]:
        return [e for e in self.exporters if e.enabled]
