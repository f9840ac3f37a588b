"""Service layer - validation and repository orchestration."""

from dtrack.services.tracking_service import TrackingService, CustomTransactionInput

__all__ = [
    "TrackingService",
    "CustomTransactionInput",
]
