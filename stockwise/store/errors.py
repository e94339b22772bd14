# stockwise/store/errors.py
"""
Failures raised by the record store.

Every page controller catches StoreError and degrades locally; nothing in
this hierarchy is retried automatically.
"""


class StoreError(Exception):
    """Base class for record store failures."""


class StoreUnavailable(StoreError):
    """The backend could not be reached (transient)."""


class ValidationError(StoreError):
    """The supplied record is malformed or misses required fields."""


class ConflictError(StoreError):
    """A record with the same identifier already exists."""


class NotFoundError(StoreError):
    """No record with the given identifier exists in the collection."""


class UnknownCollectionError(StoreError):
    """The façade was asked for a collection it does not serve."""


class ReadOnlyCollectionError(StoreError):
    """The collection does not allow this mutation (users are read-only; only products can be deleted)."""
