"""
Exception types for the equipment tracker.

Lookups that miss return None instead of raising; only name collisions,
invalid names and persistence problems are exceptions.
"""
from __future__ import annotations


class TrackerError(Exception):
    """Base class for all equipment tracker errors."""


class DuplicateNameError(TrackerError):
    """A list or item with this name already exists at the target location."""

    def __init__(self, name: str, kind: str = "item"):
        self.name = name
        self.kind = kind
        super().__init__(f"{kind.capitalize()} name already exists: {name!r}")


class InvalidNameError(TrackerError, ValueError):
    """Names must be non-empty, non-blank strings."""

    def __init__(self, name: object):
        self.name = name
        super().__init__(f"Invalid name: {name!r}")


class PersistenceError(TrackerError):
    """The persisted catalog could not be decoded."""


def validate_name(name: object) -> str:
    """Return name unchanged if it is usable, otherwise raise InvalidNameError."""
    if not isinstance(name, str) or not name.strip():
        raise InvalidNameError(name)
    return name
