"""Mixin classes for the simple-player library."""

from .lock import LockMixin

__all__ = [
    "LockMixin",
]
