"""Documentation standard records.

A standard describes one engineering convention: what it is for, the rules
it imposes, and good and bad examples. Text fields carry length limits so
rendered documents stay readable.
"""

from __future__ import annotations

from typing import Annotated, List, Literal, Optional

from pydantic import AfterValidator, AnyUrl, Field, StringConstraints, TypeAdapter

from projectkit.resource.models import SEMVER_PATTERN, BaseSchema, SourcesConfig

KEBAB_CASE_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"
NAME_FORMAT_PATTERN = r"^[a-zA-Z0-9\s\-]+$"
ISO639_1_PATTERN = r"^[a-z]{2}$"

_URL_ADAPTER = TypeAdapter(AnyUrl)


def _check_url(value: str) -> str:
    _URL_ADAPTER.validate_python(value)
    return value


Url = Annotated[str, AfterValidator(_check_url)]
Prose = Annotated[str, StringConstraints(min_length=10, max_length=500)]
DisplayName = Annotated[str, StringConstraints(min_length=1, max_length=200, pattern=NAME_FORMAT_PATTERN)]
Tag = Annotated[str, StringConstraints(min_length=1, max_length=50, pattern=KEBAB_CASE_PATTERN)]
Language = Annotated[str, StringConstraints(pattern=ISO639_1_PATTERN)]
ScopeEntry = Annotated[str, StringConstraints(min_length=1, max_length=100)]


class ScopeMetadata(BaseSchema):
    languages: List[Language] = Field(..., min_length=1)
    applies_to: List[ScopeEntry] = Field(default_factory=list)
    not_applicable_to: List[ScopeEntry] = Field(default_factory=list)


class RelationMetadata(BaseSchema):
    standard: List[Url] = Field(default_factory=list)


class StandardMetadata(BaseSchema):
    """Identity, version and classification of a standard."""

    id: str = Field(..., min_length=1, max_length=100, pattern=KEBAB_CASE_PATTERN)
    name: DisplayName
    version: str = Field(..., pattern=SEMVER_PATTERN)
    tags: List[Tag] = Field(..., min_length=1)
    scope: ScopeMetadata
    relations: RelationMetadata = Field(default_factory=RelationMetadata)


class Specification(BaseSchema):
    purpose: Prose
    goals: List[Prose] = Field(..., min_length=1)
    non_goals: List[Prose] = Field(default_factory=list)


class FieldDefinition(BaseSchema):
    field_name: DisplayName


class TermDefinition(BaseSchema):
    abbreviation: str = Field(..., min_length=1, max_length=50)
    term: DisplayName
    meaning: Prose


class Definitions(BaseSchema):
    field_definitions: List[FieldDefinition] = Field(default_factory=list, alias="fields")
    terms: List[TermDefinition] = Field(default_factory=list)


class VerificationMethod(BaseSchema):
    type: Prose
    hint: Prose


class RequirementException(BaseSchema):
    when: Prose


class RequirementRule(BaseSchema):
    """A single rule of a standard and how strongly it applies."""

    level: Literal["must", "should", "may", "recommended", "optional"]
    statement: Prose
    rationale: Prose
    exceptions: List[RequirementException] = Field(default_factory=list)
    verification_method: List[VerificationMethod] = Field(default_factory=list)


class Requirements(BaseSchema):
    rules: List[RequirementRule] = Field(..., min_length=1)


class GoldenPathExampleFile(BaseSchema):
    path: str = Field(..., min_length=1, max_length=500)
    snippet: str = Field(..., min_length=1)


class GoldenPathExample(BaseSchema):
    name: DisplayName
    when: List[Prose] = Field(default_factory=list)
    steps: List[Prose] = Field(..., min_length=1)
    examples: List[GoldenPathExampleFile] = Field(default_factory=list)


class GoldenPath(BaseSchema):
    steps: List[Prose] = Field(..., min_length=1)
    examples: List[GoldenPathExample] = Field(default_factory=list)


class Reference(BaseSchema):
    title: str = Field(..., min_length=1, max_length=200)
    type: str = Field(..., min_length=1, max_length=50)
    uri: Url


class Example(BaseSchema):
    title: str = Field(..., min_length=1, max_length=200)
    language: str = Field(..., min_length=2, max_length=10)
    snippet: str = Field(..., min_length=1)
    reason: Prose


class Examples(BaseSchema):
    good: List[Example] = Field(..., min_length=1)
    bad: List[Example] = Field(default_factory=list)


class Standard(BaseSchema):
    """
    A documentation standard.

    Attributes:
        metadata: Identity, version, tags, scope and related standards.
        specification: Purpose, goals and non-goals.
        definitions: Optional glossary of fields and terms.
        requirements: The rules, at least one.
        golden_path: Optional recommended way of following the standard.
        examples: Good (at least one) and bad examples.
        references: External reading.
    """

    metadata: StandardMetadata
    specification: Specification
    definitions: Optional[Definitions] = None
    requirements: Requirements
    golden_path: Optional[GoldenPath] = None
    examples: Examples
    references: List[Reference] = Field(default_factory=list)


class RenderConfig(BaseSchema):
    """Where and in which format standards are rendered. Rendering itself lives outside this package."""

    destination: str = Field(..., min_length=1)
    format: str = Field(..., min_length=1)


class StandardConfig(SourcesConfig):
    """The ``doc.standard`` configuration section: sources plus render targets."""

    render: List[RenderConfig] = Field(default_factory=list)
