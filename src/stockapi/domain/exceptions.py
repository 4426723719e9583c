"""Domain-level exceptions.

All failures are expressed as subclasses of DomainException so the HTTP
and CLI layers can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class StorageError(DomainException):
    """The backing store could not be written."""
