"""Shared pydantic bases for resource records and source configuration."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

SEMVER_PATTERN = (
    r"^(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)"
    r"(?:-((?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+([0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?$"
)


class BaseSchema(BaseModel):
    """
    Base for every resource record.

    Field names are snake_case in Python and camelCase in YAML/JSON
    (``executable_path`` <-> ``executablePath``). Records are immutable once
    validated; unknown keys in source files are ignored.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


class SourceConfig(BaseSchema):
    """A single source URI, e.g. ``local://./rulebooks/general/ai/skills``."""

    uri: str = Field(..., min_length=1, description="Source URI in the form scheme://opaque-part")

    @field_validator("uri")
    @classmethod
    def _require_scheme(cls, value: str) -> str:
        if "://" not in value:
            raise ValueError("uri must be in the form scheme://path")
        return value


class SourcesConfig(BaseSchema):
    """Ordered list of sources for one resource kind."""

    sources: List[SourceConfig] = Field(default_factory=list)

    def uris(self) -> list[str]:
        return [source.uri for source in self.sources]
