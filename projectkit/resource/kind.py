"""Resource kind descriptor.

A :class:`ResourceKind` bundles what the generic loader needs to know about
one kind of resource: its record model and the error classes it raises.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Type, TypeVar

from pydantic import BaseModel

from .errors import NoResourcesFoundError, ResourceParseError, ResourceReadError, ResourceValidationError

T = TypeVar("T", bound=BaseModel)


@dataclass(frozen=True)
class ResourceKind(Generic[T]):
    """Parameter object describing one resource kind."""

    name: str
    model: Type[T]
    read_error: Type[ResourceReadError] = ResourceReadError
    parse_error: Type[ResourceParseError] = ResourceParseError
    validation_error: Type[ResourceValidationError] = ResourceValidationError
    not_found_error: Type[NoResourcesFoundError] = NoResourcesFoundError
