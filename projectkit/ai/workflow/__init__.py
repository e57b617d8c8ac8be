"""Workflows: step-by-step procedures for coding agents."""

from .errors import (
    ExecutionAlreadyExistsError,
    ExecutionNotFoundError,
    InvalidExecutionIdError,
    InvalidWorkflowIdError,
    NoWorkflowsFoundError,
    WorkflowAlreadyExistsError,
    WorkflowNotFoundError,
    WorkflowParseError,
    WorkflowReadError,
    WorkflowRepositoryError,
    WorkflowValidationError,
)
from .loader import WORKFLOWS_KIND, WorkflowLoader, load_workflows_from_config
from .models import Execution, Step, Workflow, WorkflowMetadata
from .repository import WorkflowFsRepository, WorkflowRepository, validate_execution_id, validate_workflow_id

__all__ = [
    "Execution",
    "ExecutionAlreadyExistsError",
    "ExecutionNotFoundError",
    "InvalidExecutionIdError",
    "InvalidWorkflowIdError",
    "NoWorkflowsFoundError",
    "Step",
    "WORKFLOWS_KIND",
    "Workflow",
    "WorkflowAlreadyExistsError",
    "WorkflowFsRepository",
    "WorkflowLoader",
    "WorkflowMetadata",
    "WorkflowNotFoundError",
    "WorkflowParseError",
    "WorkflowReadError",
    "WorkflowRepository",
    "WorkflowRepositoryError",
    "WorkflowValidationError",
    "load_workflows_from_config",
    "validate_execution_id",
    "validate_workflow_id",
]
