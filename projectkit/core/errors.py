"""Error base for the ProjectKit packages.

Every error raised by the core derives from :class:`ProjectKitError`. Errors
are matched by class, never by message text. When a component needs to add
context while propagating an error it calls :meth:`ProjectKitError.wrap` and
re-raises the same instance, so the class a caller matches on never changes
on the way up.

Foreign exceptions (``OSError``, YAML and pydantic errors) are attached as the
``__cause__`` of a domain error; :func:`caused_by` finds them again.
"""

from __future__ import annotations

from typing import Optional, Type, TypeVar

E = TypeVar("E", bound=BaseException)


class ProjectKitError(Exception):
    """Base error for all ProjectKit exceptions."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.context: list[str] = []

    def wrap(self, context: str) -> "ProjectKitError":
        """Prepend ``context`` to the rendered message and return ``self``."""
        self.context.insert(0, context)
        return self

    def __str__(self) -> str:
        return ": ".join([*self.context, self.message]) if self.context else self.message


def caused_by(error: BaseException, error_type: Type[E]) -> Optional[E]:
    """Return the first exception of ``error_type`` in the chain of ``error``.

    The chain is ``error`` itself followed by its ``__cause__`` (or implicit
    ``__context__``) links. ``None`` is returned when nothing matches.
    """
    seen: set[int] = set()
    current: Optional[BaseException] = error
    while current is not None and id(current) not in seen:
        if isinstance(current, error_type):
            return current
        seen.add(id(current))
        current = current.__cause__ or current.__context__
    return None
