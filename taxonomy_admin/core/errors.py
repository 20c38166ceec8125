"""Domain errors raised by taxonomy services."""


class TaxonomyError(Exception):
    """Base class for taxonomy errors."""


class AuthorizationError(TaxonomyError):
    """Caller is not allowed to perform the action."""

    def __init__(self, message: str = "Not authorized") -> None:
        super().__init__(message)


class NotFoundError(TaxonomyError):
    """Referenced row does not exist."""

    def __init__(self, resource: str, resource_id: object) -> None:
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(f"{resource} {resource_id} not found")


class DuplicateCodeError(TaxonomyError):
    """A row with the same code already exists in the table."""

    def __init__(self, label: str) -> None:
        self.label = label
        super().__init__(f"A {label} with that code already exists.")


class InvalidOrderingError(TaxonomyError):
    """Ordered ids do not match the sibling set being reordered."""
