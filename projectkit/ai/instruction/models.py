"""Instruction set records."""

from __future__ import annotations

from typing import Annotated, List

from pydantic import Field, StringConstraints

from projectkit.resource.models import BaseSchema

Rule = Annotated[str, StringConstraints(min_length=1)]


class Instructions(BaseSchema):
    """
    A category of rules handed to coding agents.

    Attributes:
        category: Category the rules belong to (e.g. ``"git"``).
        rules: The rules, at least one.
    """

    category: str = Field(..., min_length=1)
    rules: List[Rule] = Field(..., min_length=1)
