"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


# ============================================================================
#                           Validation errors
# ============================================================================


class EntityValidationError(DomainError):
    """Raised when an entity field violates one of its constraints.

    There is a single validation error kind; callers tell causes apart by the
    message, which is part of the public contract and must not be reworded.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
