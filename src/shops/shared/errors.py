"""Error taxonomy for the shops domain.

``ValidationError`` is Protean's own (message dict keyed by field), re-exported
so callers have one import site. The remaining kinds carry a single
human-readable message.
"""

from protean.exceptions import ObjectNotFoundError, ValidationError

__all__ = [
    "AuthorizationError",
    "ConflictError",
    "NotFoundError",
    "StaleShopError",
    "StoreError",
    "ValidationError",
]


class NotFoundError(ObjectNotFoundError):
    """Malformed identifier, or no matching shop or comment."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class AuthorizationError(Exception):
    """Caller is not the owner or author required for a destructive operation."""

    def __init__(self, message: str = "User not authorized"):
        super().__init__(message)
        self.message = message


class ConflictError(Exception):
    """The requested change conflicts with the current state of the shop."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class StaleShopError(ConflictError):
    """The shop changed between read and write (lost update detected)."""


class StoreError(Exception):
    """Persistence failed for a reason that is not otherwise classified."""

    def __init__(self, message: str = "Store operation failed"):
        super().__init__(message)
        self.message = message
