"""Error types for workflows."""

from __future__ import annotations

from projectkit.resource.errors import (
    NoResourcesFoundError,
    RepositoryIOError,
    ResourceAlreadyExistsError,
    ResourceError,
    ResourceNotFoundError,
    ResourceParseError,
    ResourceReadError,
    ResourceValidationError,
)

_KIND = "workflows"


class WorkflowReadError(ResourceReadError):
    kind = _KIND


class WorkflowParseError(ResourceParseError):
    kind = _KIND


class WorkflowValidationError(ResourceValidationError):
    kind = _KIND


class NoWorkflowsFoundError(NoResourcesFoundError):
    kind = _KIND


class WorkflowAlreadyExistsError(ResourceAlreadyExistsError):
    kind = "workflow"


class WorkflowNotFoundError(ResourceNotFoundError):
    kind = "workflow"


class InvalidWorkflowIdError(ResourceError):
    """Raised when a workflow id is not made of letters, digits and dashes."""

    kind = "workflow"

    def __init__(self, workflow_id: str) -> None:
        super().__init__(f"workflow id must be alphanumeric with dashes: '{workflow_id}'")
        self.workflow_id = workflow_id


class ExecutionAlreadyExistsError(ResourceAlreadyExistsError):
    kind = "execution"


class ExecutionNotFoundError(ResourceNotFoundError):
    kind = "execution"


class InvalidExecutionIdError(ResourceError):
    """Raised when an execution id is not made of letters, digits and dashes."""

    kind = "execution"

    def __init__(self, execution_id: str) -> None:
        super().__init__(f"execution id must be alphanumeric with dashes: '{execution_id}'")
        self.execution_id = execution_id


class WorkflowRepositoryError(RepositoryIOError):
    kind = _KIND
