"""Domain-level exceptions.

Every rejected request is a subclass of DomainException so the CLI layer
can catch them in one place and turn them into readable messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """The input is malformed or a business rule would be broken."""


class EntityNotFoundError(DomainException):
    """The addressed entity does not exist in the store."""
