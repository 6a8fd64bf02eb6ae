from __future__ import annotations


class NotFoundError(Exception):
    """Raise to map to HTTP 404."""


class InvalidInputError(Exception):
    """Raise to map to HTTP 400 (unparseable query value)."""


class StorageFailure(Exception):
    """Raise to map to HTTP 500 (the collection could not be persisted)."""
