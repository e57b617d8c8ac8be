"""Skill records."""

from __future__ import annotations

import base64
import binascii
from typing import Any, Dict

from pydantic import Field, ValidationInfo, field_serializer, field_validator

from projectkit.resource.models import BaseSchema


class SkillMetadata(BaseSchema):
    """Identity and summary of a skill, read from ``metadata.yaml``."""

    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1, max_length=256)


class Script(BaseSchema):
    """
    A helper script shipped with a skill.

    ``content`` holds the raw file bytes; in JSON it is standard (RFC 4648,
    padded) base64.
    """

    content_type: str
    content: bytes

    @field_validator("content", mode="before")
    @classmethod
    def _decode_json_content(cls, value: Any, info: ValidationInfo) -> Any:
        if info.mode != "json" or not isinstance(value, str):
            return value
        try:
            return base64.b64decode(value, validate=True)
        except binascii.Error as exc:
            raise ValueError(f"content is not valid base64: {exc}") from exc

    @field_serializer("content", when_used="json")
    def _encode_json_content(self, value: bytes) -> str:
        return base64.b64encode(value).decode("ascii")


class Skill(BaseSchema):
    """
    A reusable capability for coding agents.

    Attributes:
        metadata: Name and description of the skill.
        instructions: Free-text instructions; may be empty.
        scripts: Scripts keyed by file name.
    """

    metadata: SkillMetadata
    instructions: str
    scripts: Dict[str, Script] = Field(default_factory=dict)
