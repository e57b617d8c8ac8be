"""Documentation standard repository."""

from __future__ import annotations

from typing import List, Protocol

from projectkit.resource.repository import FsRepository

from .errors import StandardRepositoryError
from .models import Standard


class StandardRepository(Protocol):
    def get_all(self) -> List[Standard]:
        ...

    def add_standard(self, standard: Standard) -> None:
        ...

    def remove_all(self) -> None:
        ...


class StandardFsRepository(FsRepository[Standard]):
    """Standards stored one JSON file each, listed by display name."""

    model = Standard
    io_error = StandardRepositoryError

    def identity(self, resource: Standard) -> str:
        return resource.metadata.id

    def sort_key(self, resource: Standard) -> str:
        return resource.metadata.name

    def add_standard(self, standard: Standard) -> None:
        self._add(standard)
