"""Cross-cutting building blocks: settings, logging and the error base."""

from .errors import ProjectKitError, caused_by

__all__ = [
    "ProjectKitError",
    "caused_by",
]
