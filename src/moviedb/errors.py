"""
Errors raised by the association registry, the resolver and the stores.

Declaration errors (duplicate names, bad key fields, unknown types) are
programmer errors and surface while the registry is built at startup.
Resolution errors surface per request and are reported by the HTTP layer.
"""


class RelationError(Exception):
    """Base class for every error raised by the relation core."""


class DuplicateEntityTypeError(RelationError):
    pass


class UnknownEntityTypeError(RelationError):
    pass


class DuplicateAssociationError(RelationError):
    pass


class InvalidFieldError(RelationError):
    pass


class UnknownAssociationError(RelationError):
    pass


class MissingKeyValueError(RelationError):
    pass


class CardinalityViolationError(RelationError):
    pass


class StoreError(RelationError):
    """A data store read or write failed. The driver error is kept as __cause__."""


class CatalogValidationError(ValueError):
    """Invalid payload for a create operation."""

    def __init__(self, errors: dict[str, str]):
        self.errors = errors
        super().__init__(
            "; ".join(f"{field} {message}" for field, message in errors.items())
        )
