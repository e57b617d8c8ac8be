"""Workflow repository.

Unlike the other repositories, workflow files are named after the workflow
id (``<id>.json``), so lookups by id read a single file. Executions of
workflows live in a second directory, named after the execution id in the
same way.
"""

from __future__ import annotations

import re
from typing import List, Protocol

from projectkit.fs import FileSystem
from projectkit.resource.repository import STORAGE_EXTENSION, FsRepository

from .errors import (
    ExecutionAlreadyExistsError,
    ExecutionNotFoundError,
    InvalidExecutionIdError,
    InvalidWorkflowIdError,
    WorkflowAlreadyExistsError,
    WorkflowNotFoundError,
    WorkflowRepositoryError,
)
from .models import WORKFLOW_ID_PATTERN, Execution, Workflow

_ID_RE = re.compile(WORKFLOW_ID_PATTERN)


def validate_workflow_id(workflow_id: str) -> None:
    """Raise :class:`InvalidWorkflowIdError` unless ``workflow_id`` is usable as a file name."""
    if not _ID_RE.fullmatch(workflow_id):
        raise InvalidWorkflowIdError(workflow_id)


def validate_execution_id(execution_id: str) -> None:
    """Raise :class:`InvalidExecutionIdError` unless ``execution_id`` is usable as a file name."""
    if not _ID_RE.fullmatch(execution_id):
        raise InvalidExecutionIdError(execution_id)


class WorkflowRepository(Protocol):
    """Access to stored workflows and their executions."""

    def get_all(self) -> List[Workflow]:
        ...

    def get_workflow_by_id(self, workflow_id: str) -> Workflow:
        ...

    def add_workflow(self, workflow: Workflow) -> None:
        ...

    def remove_all(self) -> None:
        ...

    def add_execution(self, execution: Execution) -> None:
        ...

    def update_execution(self, execution: Execution) -> None:
        ...

    def get_execution_by_id(self, execution_id: str) -> Execution:
        ...


class WorkflowFsRepository(FsRepository[Workflow]):
    """
    Workflows stored as ``<id>.json``, listed by name.

    Args:
        fs: Directory holding the workflows.
        execution_fs: Directory holding the executions. :meth:`remove_all`
            leaves it untouched.
    """

    model = Workflow
    io_error = WorkflowRepositoryError

    def __init__(self, fs: FileSystem, execution_fs: FileSystem) -> None:
        super().__init__(fs)
        self._execution_fs = execution_fs

    def identity(self, resource: Workflow) -> str:
        return resource.metadata.id

    def sort_key(self, resource: Workflow) -> str:
        return resource.metadata.name

    def _exists(self, filename: str, fs: FileSystem) -> bool:
        try:
            return fs.exists(filename)
        except OSError as exc:
            raise self.io_error("stat", filename) from exc

    def add_workflow(self, workflow: Workflow) -> None:
        """
        Store ``workflow`` under its id.

        Raises:
            InvalidWorkflowIdError: The id cannot be used as a file name.
            WorkflowAlreadyExistsError: A workflow with the same id is stored.
        """
        workflow_id = workflow.metadata.id
        validate_workflow_id(workflow_id)
        filename = f"{workflow_id}{STORAGE_EXTENSION}"
        with self._lock.write_locked():
            if self._exists(filename, self._fs):
                raise WorkflowAlreadyExistsError(workflow_id)
            self._save_file(filename, workflow)

    def get_workflow_by_id(self, workflow_id: str) -> Workflow:
        """
        Return the stored workflow with id ``workflow_id``.

        Raises:
            InvalidWorkflowIdError: The id cannot be used as a file name.
            WorkflowNotFoundError: No workflow with that id is stored.
        """
        validate_workflow_id(workflow_id)
        filename = f"{workflow_id}{STORAGE_EXTENSION}"
        with self._lock.read_locked():
            if not self._exists(filename, self._fs):
                raise WorkflowNotFoundError(workflow_id)
            return self._load_file(filename)

    def add_execution(self, execution: Execution) -> None:
        """
        Store a new execution.

        Raises:
            InvalidExecutionIdError: The id cannot be used as a file name.
            ExecutionAlreadyExistsError: An execution with the same id is stored.
        """
        validate_execution_id(execution.id)
        filename = f"{execution.id}{STORAGE_EXTENSION}"
        with self._lock.write_locked():
            if self._exists(filename, self._execution_fs):
                raise ExecutionAlreadyExistsError(execution.id)
            self._save_file(filename, execution, fs=self._execution_fs)

    def update_execution(self, execution: Execution) -> None:
        """
        Overwrite a stored execution.

        Raises:
            InvalidExecutionIdError: The id cannot be used as a file name.
            ExecutionNotFoundError: No execution with that id is stored.
        """
        validate_execution_id(execution.id)
        filename = f"{execution.id}{STORAGE_EXTENSION}"
        with self._lock.write_locked():
            if not self._exists(filename, self._execution_fs):
                raise ExecutionNotFoundError(execution.id)
            self._save_file(filename, execution, fs=self._execution_fs)

    def get_execution_by_id(self, execution_id: str) -> Execution:
        validate_execution_id(execution_id)
        filename = f"{execution_id}{STORAGE_EXTENSION}"
        with self._lock.read_locked():
            if not self._exists(filename, self._execution_fs):
                raise ExecutionNotFoundError(execution_id)
            return self._load_file(filename, fs=self._execution_fs, model=Execution)
