"""
Domain exceptions for the service layer.

These exceptions are raised by services and the persistence backend and
caught by API routes to convert into appropriate HTTP responses. Every
exception carries a human-readable ``message`` for the UI.
"""

from __future__ import annotations

from collections.abc import Iterable


class ServiceError(Exception):
    """Base exception for service layer errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NotFoundError(ServiceError):
    """Entity not found."""

    def __init__(self, entity: str, identifier: str | None = None):
        self.entity = entity
        self.identifier = identifier
        message = f"{entity} not found"
        if identifier:
            message = f"{entity} with identifier '{identifier}' not found"
        super().__init__(message)


class ConflictError(ServiceError):
    """Entity already exists or conflict occurred."""

    def __init__(self, entity: str, field: str, value: str, message: str | None = None):
        self.entity = entity
        self.field = field
        self.value = value
        if message is None:
            message = f"{entity} with {field} '{value}' already exists"
        super().__init__(message)


class OperationInProgressError(ServiceError):
    """The same operation is already running and cannot be re-entered."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"{operation} is already in progress")


class ValidationError(ServiceError):
    """Validation error in service layer. Raised before any write."""

    def __init__(self, message: str, field: str | None = None):
        self.field = field
        super().__init__(message)


class ReferentialError(ServiceError):
    """A link target does not exist. Raised before any write."""

    def __init__(self, entity: str, missing_ids: Iterable[str]):
        self.entity = entity
        self.missing_ids = sorted(missing_ids)
        message = f"Cannot link to unknown {entity}: {', '.join(self.missing_ids)}"
        super().__init__(message)


class PersistenceError(ServiceError):
    """The persistence backend rejected or failed a write; nothing was committed."""
