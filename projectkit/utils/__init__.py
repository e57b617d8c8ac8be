"""Small shared utilities."""

from .rwlock import ReadWriteLock

__all__ = ["ReadWriteLock"]
