"""Core utilities and shared functionality."""

from dtrack.core.clock import Clock, now_ns, epoch_seconds
from dtrack.core.exceptions import (
    AppError,
    ValidationError,
    NotFoundError,
    AuthorizationError,
    ConflictError,
    AlreadyExistsError,
    CapacityExceededError,
    TransactionIdConflictError,
    ValueTooLargeError,
)

__all__ = [
    "Clock",
    "now_ns",
    "epoch_seconds",
    "AppError",
    "ValidationError",
    "NotFoundError",
    "AuthorizationError",
    "ConflictError",
    "AlreadyExistsError",
    "CapacityExceededError",
    "TransactionIdConflictError",
    "ValueTooLargeError",
]
