"""Domain-level exceptions.

Expected purchase failures are *not* exceptions; they are returned as
``PurchaseResult`` values.  These classes cover invalid construction and
lookups of things that do not exist, so the CLI layer can catch them
uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""
