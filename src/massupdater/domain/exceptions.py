"""Domain-level exceptions.

Every failure an adapter or the update engine can hit is a subclass of
DomainException so the CLI layer can catch them uniformly and display
user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class StorageError(DomainException):
    """The backing catalog storage could not be read or written."""
