"""Workflow records."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import Field

from projectkit.resource.models import SEMVER_PATTERN, BaseSchema

WORKFLOW_ID_PATTERN = r"^[a-zA-Z0-9-]+$"


class WorkflowMetadata(BaseSchema):
    id: str = Field(..., min_length=1, pattern=WORKFLOW_ID_PATTERN)
    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    version: str = Field(..., pattern=SEMVER_PATTERN)


class Step(BaseSchema):
    """One step of a workflow, with the instructions an agent follows for it."""

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    instructions: List[str] = Field(..., min_length=1)


class Workflow(BaseSchema):
    """
    An ordered procedure for coding agents.

    Attributes:
        metadata: Identity, title and version of the workflow.
        state: Optional state variables, each described by a JSON schema.
        steps: The steps, at least one.
    """

    metadata: WorkflowMetadata
    state: Optional[Dict[str, Dict[str, Any]]] = None
    steps: List[Step] = Field(..., min_length=1)


class Execution(BaseSchema):
    """A run of a workflow: the step it is at and the current state values."""

    id: str = Field(..., min_length=1)
    workflow_id: str = Field(..., min_length=1)
    state_values: Dict[str, Any]
    step_id: str = Field(..., min_length=1)
