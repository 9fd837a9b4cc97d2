"""Custom application exceptions."""

from typing import Any


class AppException(Exception):
    """Base application exception."""

    def __init__(self, detail: str = "An unexpected error occurred") -> None:
        self.detail = detail
        super().__init__(detail)


class ValidationError(AppException):
    """Validation error exception."""

    def __init__(self, detail: str = "Validation failed", errors: list[dict[str, Any]] | None = None) -> None:
        self.errors = errors
        super().__init__(detail)


class NotFoundError(AppException):
    """Resource not found exception."""

    def __init__(self, resource: str = "Resource", identifier: str | None = None) -> None:
        detail = f"{resource} not found"
        if identifier:
            detail = f"{resource} with ID '{identifier}' not found"
        super().__init__(detail)


class PropertyNotAvailable(AppException):
    """Property not available exception."""

    def __init__(self, detail: str = "This property is not available") -> None:
        super().__init__(detail)


class DatesNotAvailable(AppException):
    """Dates not available exception."""

    def __init__(self, detail: str = "The selected dates are not available") -> None:
        super().__init__(detail)


class InvalidPaymentStatus(AppException):
    """Payment status change not allowed from the current status."""

    def __init__(self, detail: str = "This payment status change is not allowed") -> None:
        super().__init__(detail)


class SchemaNotInitializedError(AppException):
    """Tables are missing; data cannot be inserted yet."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = missing
        super().__init__(
            f"Missing tables: {', '.join(missing)}. "
            "Create the tables before inserting data."
        )


class SeedError(AppException):
    """Seed data could not be loaded."""

    def __init__(self, detail: str = "Seed data could not be loaded", errors: list[dict[str, Any]] | None = None) -> None:
        self.errors = errors
        super().__init__(detail)


class ExportError(AppException):
    """SQL scripts could not be written."""

    def __init__(self, path: str, detail: str | None = None) -> None:
        message = f"Cannot write SQL scripts to '{path}'"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
