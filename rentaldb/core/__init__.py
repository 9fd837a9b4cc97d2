"""Core utilities."""

from rentaldb.core.exceptions import (
    AppException,
    DatesNotAvailable,
    ExportError,
    InvalidPaymentStatus,
    NotFoundError,
    PropertyNotAvailable,
    SchemaNotInitializedError,
    SeedError,
    ValidationError,
)

__all__ = [
    "AppException",
    "DatesNotAvailable",
    "ExportError",
    "InvalidPaymentStatus",
    "NotFoundError",
    "PropertyNotAvailable",
    "SchemaNotInitializedError",
    "SeedError",
    "ValidationError",
]
