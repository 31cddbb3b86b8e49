"""Domain-level exceptions.

Every failure the stores can report is a subclass of DomainException so
the application layer can catch them at the transport boundary and the
CLI can turn them into user-facing messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidTransitionError(ValidationError):
    """An order status change is not allowed by the workflow."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class TransportError(DomainException):
    """A request to a backing collaborator failed."""
