"""Instruction set repository.

Instruction sets are keyed by category. Adding a set whose category is
already stored appends its rules to the stored set instead of creating a
second file.
"""

from __future__ import annotations

from typing import List, Protocol

from projectkit.resource.repository import FsRepository

from .errors import InstructionRepositoryError
from .models import Instructions


class InstructionRepository(Protocol):
    """Access to stored instruction sets."""

    def get_all(self) -> List[Instructions]:
        ...

    def add_instructions(self, instructions: Instructions) -> None:
        ...

    def remove_all(self) -> None:
        ...


class InstructionFsRepository(FsRepository[Instructions]):
    """Instruction sets stored one file per category."""

    model = Instructions
    io_error = InstructionRepositoryError

    def identity(self, resource: Instructions) -> str:
        return resource.category

    def add_instructions(self, instructions: Instructions) -> None:
        """Store ``instructions``, merging into an existing set of the same category."""
        with self._lock.write_locked():
            for filename, existing in self._load_all():
                if existing.category == instructions.category:
                    merged = existing.model_copy(update={"rules": [*existing.rules, *instructions.rules]})
                    self._save_file(filename, merged)
                    return
            self._save_file(self._new_filename(), instructions)
