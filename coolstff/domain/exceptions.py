"""Domain exceptions.

Errors raised by the catalog core and the application layer. The core only
ever raises InvalidArgumentError; missing references are resolved to empty
values instead of raising.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain exceptions.

    All domain errors should inherit from this class to allow
    catching domain-specific errors at the API layer.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


# ============================================================================
# Argument Errors
# ============================================================================


class InvalidArgumentError(DomainError):
    """Raised when a caller violates an operation's input contract.

    Examples are negative price bounds, a negative pagination offset,
    an unknown sort key or an unknown caption platform.
    """

    def __init__(self, argument: str, reason: str, value: Any = None) -> None:
        """Initialize invalid argument error.

        Args:
            argument: Name of the offending argument.
            reason: Explanation of why the value is rejected.
            value: The rejected value, if useful for the caller.
        """
        details: dict[str, Any] = {"argument": argument, "reason": reason}
        if value is not None:
            details["value"] = value
        super().__init__(f"Invalid {argument}: {reason}", details=details)
        self.argument = argument
        self.reason = reason


# ============================================================================
# Lookup Errors
# ============================================================================


class NotFoundError(DomainError):
    """Raised by the application layer when a directly requested entity is missing.

    Dangling references inside content (a deleted category, a stale
    favorite) never raise this; they resolve to None or are skipped.
    """

    def __init__(self, entity_type: str, entity_id: str) -> None:
        """Initialize not found error.

        Args:
            entity_type: Type of entity (e.g., "Product", "Category").
            entity_id: Identifier or slug that was looked up.
        """
        super().__init__(
            f"{entity_type} not found: {entity_id}",
            details={"entity_type": entity_type, "entity_id": entity_id},
        )
        self.entity_type = entity_type
        self.entity_id = entity_id


# ============================================================================
# Store Errors
# ============================================================================


class StoreUnavailableError(DomainError):
    """Raised when the content store cannot serve a request.

    The failure is opaque to callers and is never retried by the core.
    """

    def __init__(self, operation: str, reason: str = "Content store unavailable") -> None:
        """Initialize store unavailable error.

        Args:
            operation: Store operation that failed (e.g., "list_products").
            reason: Underlying failure description.
        """
        super().__init__(
            f"{operation} failed: {reason}",
            details={"operation": operation, "reason": reason},
        )
        self.operation = operation
